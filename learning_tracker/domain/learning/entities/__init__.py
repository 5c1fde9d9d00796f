from .goal import Goal, GoalStatus, Priority
from .resource import Resource
from .study_session import StudySession

__all__ = [
    "Goal",
    "GoalStatus",
    "Priority",
    "Resource",
    "StudySession",
]
