"""Pydantic schemas for study sessions."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from learning_tracker.infrastructure.common.schemas.date_types import IsoDate


class StudySessionCreate(BaseModel):
    """Schema for logging a study session."""

    model_config = ConfigDict(extra="forbid")

    subject: str = Field(..., min_length=1, description="What was studied")
    date: IsoDate = Field(..., description="Day of the session (YYYY-MM-DD)")
    duration_minutes: int = Field(..., gt=0, strict=True, description="Minutes studied")
    notes: str | None = Field(None, description="Optional notes")


class StudySessionResponse(StudySessionCreate):
    """Schema for a stored study session."""

    id: UUID = Field(..., description="Generated session id")
