"""Learning context schemas."""

from .goal_schemas import GoalSchema
from .resource_schemas import ResourceSchema
from .study_session_schemas import StudySessionCreate, StudySessionResponse

__all__ = [
    "GoalSchema",
    "ResourceSchema",
    "StudySessionCreate",
    "StudySessionResponse",
]
