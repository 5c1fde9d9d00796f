from .goal_repository import GoalRepository
from .resource_repository import ResourceRepository
from .study_session_repository import StudySessionRepository

__all__ = [
    "GoalRepository",
    "ResourceRepository",
    "StudySessionRepository",
]
