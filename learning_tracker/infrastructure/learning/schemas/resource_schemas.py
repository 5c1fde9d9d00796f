"""Pydantic schemas for saved resources."""

from pydantic import BaseModel, ConfigDict, Field

from learning_tracker.infrastructure.learning.schemas.goal_schemas import DEFAULT_CATEGORY


class ResourceSchema(BaseModel):
    """Schema for a resource, used both for requests and responses."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, description="Resource title")
    url: str = Field(..., min_length=1, description="Link to the resource")
    category: str = Field(DEFAULT_CATEGORY, description="Resource category")
    notes: str | None = Field(None, description="Optional notes")
