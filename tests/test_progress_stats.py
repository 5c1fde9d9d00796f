"""Tests for the progress dashboard query."""

import pytest

from learning_tracker.api import LearningTrackerAPI
from tests.conftest import ALICE, make_goal, make_session


class TestProgressStats:
    def test_no_data(self, api: LearningTrackerAPI) -> None:
        stats = api.get_progress_stats(ALICE)

        assert stats.current_streak == 0
        assert stats.distinct_study_days == 0
        assert stats.total_study_minutes == 0
        assert stats.total_goals == 0
        assert stats.completed_goals == 0

    @pytest.mark.parametrize(
        ("days", "expected_streak"),
        [
            (["2024-06-10", "2024-06-09", "2024-06-08"], 3),
            (["2024-06-09", "2024-06-08"], 2),
            (["2024-06-10", "2024-06-08"], 1),
            (["2024-06-01"], 0),
        ],
    )
    def test_streak_relative_to_today(
        self, api: LearningTrackerAPI, days: list[str], expected_streak: int
    ) -> None:
        for day in days:
            api.add_study_session(ALICE, make_session(day=day))

        assert api.get_progress_stats(ALICE).current_streak == expected_streak

    def test_goal_counts(self, api: LearningTrackerAPI) -> None:
        api.add_goal(ALICE, make_goal("One"))
        api.add_goal(ALICE, make_goal("Two"))
        api.add_goal(ALICE, make_goal("Three"))
        api.mark_goal_complete(ALICE, "Two")

        stats = api.get_progress_stats(ALICE)

        assert stats.total_goals == 3
        assert stats.completed_goals == 1

    def test_minutes_and_distinct_days(self, api: LearningTrackerAPI) -> None:
        api.add_study_session(ALICE, make_session("Math", "2024-06-10", 30))
        api.add_study_session(ALICE, make_session("Art", "2024-06-10", 45))
        api.add_study_session(ALICE, make_session("Math", "2024-06-09", 60))

        stats = api.get_progress_stats(ALICE)

        assert stats.total_study_minutes == 135
        assert stats.total_study_hours == 2
        assert stats.distinct_study_days == 2
        assert stats.current_streak == 2

    def test_stats_follow_deletes(self, api: LearningTrackerAPI) -> None:
        api.add_study_session(ALICE, make_session("Math", "2024-06-10", 30))
        api.add_study_session(ALICE, make_session("Art", "2024-06-09", 30))
        assert api.get_progress_stats(ALICE).current_streak == 2

        api.delete_study_session(ALICE, "Math")

        stats = api.get_progress_stats(ALICE)
        assert stats.current_streak == 1
        assert stats.total_study_minutes == 30
