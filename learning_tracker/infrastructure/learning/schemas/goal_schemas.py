"""Pydantic schemas for goals."""

from pydantic import BaseModel, ConfigDict, Field

from learning_tracker.domain.learning.entities.goal import MAX_TITLE_LENGTH, Priority
from learning_tracker.infrastructure.common.schemas.date_types import OptionalIsoDate

DEFAULT_CATEGORY = "Other"


class GoalSchema(BaseModel):
    """Schema for a goal, used both for requests and responses."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="Goal title")
    description: str = Field("", description="Free-text description")
    category: str = Field(DEFAULT_CATEGORY, description="Goal category, e.g. 'Math'")
    priority: Priority = Field(Priority.MEDIUM, description="low | medium | high")
    target_date: OptionalIsoDate = Field(None, description="Target date (YYYY-MM-DD)")
    completed: bool = Field(
        False, description="Ignored on create; kept from the stored goal when omitted on update"
    )
