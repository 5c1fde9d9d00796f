"""Tests for learning domain entities."""

from datetime import date

import pytest

from learning_tracker.domain.common.exceptions import ValidationError
from learning_tracker.domain.learning.entities.goal import Goal, GoalStatus, Priority
from learning_tracker.domain.learning.entities.resource import Resource
from learning_tracker.domain.learning.entities.study_session import StudySession


class TestGoal:
    def test_create_starts_incomplete(self) -> None:
        goal = Goal.create("Learn Rust", "", "Career", Priority.LOW)

        assert goal.completed is False
        assert goal.key == "Learn Rust"

    def test_mark_complete_twice(self) -> None:
        goal = Goal.create("Learn Rust", "", "Career", Priority.LOW)

        goal.mark_complete()
        goal.mark_complete()

        assert goal.completed is True

    def test_priority_must_be_enum(self) -> None:
        with pytest.raises(ValidationError):
            Goal(
                title="x",
                description="",
                category="Other",
                priority="high",  # type: ignore[arg-type]
            )

    def test_ensure_same_key(self) -> None:
        goal = Goal.create("Learn Rust", "", "Career", Priority.LOW)
        renamed = Goal.create("Learn Go", "", "Career", Priority.LOW)

        goal.ensure_same_key(Goal.create("Learn Rust", "new", "Math", Priority.HIGH))
        with pytest.raises(ValidationError):
            goal.ensure_same_key(renamed)

    def test_status_matches(self) -> None:
        done = Goal.create("a", "", "Other", Priority.LOW)
        done.mark_complete()
        open_goal = Goal.create("b", "", "Other", Priority.LOW)

        assert GoalStatus.COMPLETED.matches(done)
        assert not GoalStatus.COMPLETED.matches(open_goal)
        assert GoalStatus.ACTIVE.matches(open_goal)
        assert GoalStatus.ALL.matches(done)


class TestStudySession:
    def test_generated_ids_are_unique(self) -> None:
        first = StudySession(subject="Math", study_date=date(2024, 6, 10), duration_minutes=10)
        second = StudySession(subject="Math", study_date=date(2024, 6, 10), duration_minutes=10)

        assert first.key != second.key

    @pytest.mark.parametrize("minutes", [0, -1, True])
    def test_duration_must_be_positive_int(self, minutes: int) -> None:
        with pytest.raises(ValidationError):
            StudySession(subject="Math", study_date=date(2024, 6, 10), duration_minutes=minutes)

    def test_subject_required(self) -> None:
        with pytest.raises(ValidationError):
            StudySession(subject="", study_date=date(2024, 6, 10), duration_minutes=10)


class TestResource:
    def test_url_required(self) -> None:
        with pytest.raises(ValidationError):
            Resource(title="Docs", url=" ", category="Other")

    def test_notes_default_absent(self) -> None:
        assert Resource(title="Docs", url="https://example.com", category="Other").notes is None
