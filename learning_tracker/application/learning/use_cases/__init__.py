"""Learning use cases."""

from .goal_use_case import GoalUseCase
from .resource_use_case import ResourceUseCase
from .study_session_use_case import StudySessionUseCase

__all__ = [
    "GoalUseCase",
    "ResourceUseCase",
    "StudySessionUseCase",
]
