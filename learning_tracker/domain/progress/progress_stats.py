"""ProgressStats value object."""

from dataclasses import dataclass

from learning_tracker.domain.common.value_object import ValueObject

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class ProgressStats(ValueObject):
    """
    Snapshot of an identity's progress.

    Derived from goals and study sessions on every request; never stored.
    """

    total_study_minutes: int
    total_goals: int
    completed_goals: int
    current_streak: int
    distinct_study_days: int

    @property
    def total_study_hours(self) -> int:
        """Study time rounded to whole hours (half rounds up)."""
        return (self.total_study_minutes + MINUTES_PER_HOUR // 2) // MINUTES_PER_HOUR
