"""Mapper for ProgressStats Domain → schema conversion."""

from learning_tracker.domain.progress.progress_stats import ProgressStats
from learning_tracker.infrastructure.progress.schemas.progress_schemas import (
    ProgressStatsResponse,
)


class ProgressStatsMapper:
    """Mapper for ProgressStats Domain → schema conversion."""

    def to_schema(self, stats: ProgressStats) -> ProgressStatsResponse:
        return ProgressStatsResponse(
            total_study_minutes=stats.total_study_minutes,
            total_study_hours=stats.total_study_hours,
            total_goals=stats.total_goals,
            completed_goals=stats.completed_goals,
            current_streak=stats.current_streak,
            distinct_study_days=stats.distinct_study_days,
        )
