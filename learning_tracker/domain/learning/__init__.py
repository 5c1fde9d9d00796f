"""Learning domain layer: goals, study sessions and resources."""

from learning_tracker.domain.learning.entities import (
    Goal,
    GoalStatus,
    Priority,
    Resource,
    StudySession,
)

__all__ = [
    "Goal",
    "GoalStatus",
    "Priority",
    "Resource",
    "StudySession",
]
