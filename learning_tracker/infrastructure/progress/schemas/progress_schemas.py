"""Pydantic schema for the progress dashboard."""

from pydantic import BaseModel, Field


class ProgressStatsResponse(BaseModel):
    """Progress snapshot returned to the dashboard."""

    total_study_minutes: int = Field(..., ge=0)
    total_study_hours: int = Field(..., ge=0, description="Minutes rounded to whole hours")
    total_goals: int = Field(..., ge=0)
    completed_goals: int = Field(..., ge=0)
    current_streak: int = Field(..., ge=0, description="Consecutive study days")
    distinct_study_days: int = Field(..., ge=0)
