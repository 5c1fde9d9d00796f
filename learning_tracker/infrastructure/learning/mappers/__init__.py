from .goal_mapper import GoalMapper
from .resource_mapper import ResourceMapper
from .study_session_mapper import StudySessionMapper

__all__ = [
    "GoalMapper",
    "ResourceMapper",
    "StudySessionMapper",
]
