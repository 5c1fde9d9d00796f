"""Pydantic schemas for user profiles."""

from pydantic import BaseModel, ConfigDict, Field

from learning_tracker.domain.identity.entities.user_profile import MAX_NAME_LENGTH


class UserProfileSchema(BaseModel):
    """Schema for a user profile."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Display name")
