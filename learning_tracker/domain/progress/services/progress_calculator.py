"""Domain service computing progress statistics and study streaks."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from learning_tracker.domain.learning.entities.goal import Goal
from learning_tracker.domain.learning.entities.study_session import StudySession
from learning_tracker.domain.progress.progress_stats import ProgressStats

ONE_DAY = timedelta(days=1)


class ProgressCalculator:
    """Stateless domain service deriving ProgressStats from goals and sessions."""

    @staticmethod
    def compute_stats(
        goals: Sequence[Goal],
        sessions: Sequence[StudySession],
        today: date,
    ) -> ProgressStats:
        """
        Compute a progress snapshot.

        Args:
            goals: All goals of one identity
            sessions: All study sessions of the same identity
            today: Calendar day the query is evaluated at

        Returns:
            ProgressStats for the given records
        """
        study_days = {session.study_date for session in sessions}
        return ProgressStats(
            total_study_minutes=sum(session.duration_minutes for session in sessions),
            total_goals=len(goals),
            completed_goals=sum(1 for goal in goals if goal.completed),
            current_streak=ProgressCalculator.current_streak(study_days, today),
            distinct_study_days=len(study_days),
        )

    @staticmethod
    def current_streak(study_days: Iterable[date], today: date) -> int:
        """
        Count consecutive study days ending at the most recent one.

        The streak is only active while the most recent study day is today
        or yesterday; otherwise it is 0. Walking back from the most recent
        day, each next day must be exactly one day earlier; the first gap
        ends the streak.

        Args:
            study_days: Days with at least one session (duplicates allowed)
            today: Calendar day the query is evaluated at

        Returns:
            Length of the active streak in days
        """
        days = sorted(set(study_days), reverse=True)
        if not days:
            return 0

        most_recent = days[0]
        if most_recent != today and most_recent != today - ONE_DAY:
            return 0

        streak = 1
        for previous, current in zip(days, days[1:]):
            if previous - current != ONE_DAY:
                break
            streak += 1
        return streak
