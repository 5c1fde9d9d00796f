from .goal_repository import GoalRepositoryProtocol
from .resource_repository import ResourceRepositoryProtocol
from .study_session_repository import StudySessionRepositoryProtocol

__all__ = [
    "GoalRepositoryProtocol",
    "ResourceRepositoryProtocol",
    "StudySessionRepositoryProtocol",
]
