"""Tests for study session operations."""

import pytest

from learning_tracker.api import LearningTrackerAPI
from learning_tracker.domain.common.exceptions import NotFoundError, ValidationError
from tests.conftest import ALICE, make_session


class TestAddStudySession:
    def test_add_then_get(self, api: LearningTrackerAPI) -> None:
        stored = api.add_study_session(ALICE, make_session("Math", "2024-06-10", 45, notes="ch. 3"))

        sessions = api.get_study_sessions(ALICE)
        assert len(sessions) == 1
        assert sessions[0].id == stored.id
        assert sessions[0].subject == "Math"
        assert sessions[0].date.isoformat() == "2024-06-10"
        assert sessions[0].duration_minutes == 45
        assert sessions[0].notes == "ch. 3"

    def test_notes_absent_is_none_not_empty_string(self, api: LearningTrackerAPI) -> None:
        api.add_study_session(ALICE, make_session())
        api.add_study_session(ALICE, make_session("Art", notes=""))

        first, second = api.get_study_sessions(ALICE)
        assert first.notes is None
        assert second.notes == ""

    def test_same_subject_on_different_dates_keeps_both(self, api: LearningTrackerAPI) -> None:
        api.add_study_session(ALICE, make_session("Math", "2024-06-09"))
        api.add_study_session(ALICE, make_session("Math", "2024-06-10"))

        sessions = api.get_study_sessions(ALICE)
        assert [s.date.isoformat() for s in sessions] == ["2024-06-09", "2024-06-10"]
        assert sessions[0].id != sessions[1].id

    @pytest.mark.parametrize("minutes", [0, -5])
    def test_non_positive_duration_rejected(self, api: LearningTrackerAPI, minutes: int) -> None:
        with pytest.raises(ValidationError) as exc_info:
            api.add_study_session(ALICE, make_session(minutes=minutes))

        assert exc_info.value.field == "duration_minutes"
        assert api.get_study_sessions(ALICE) == []

    @pytest.mark.parametrize("day", ["2024-6-10", "10/06/2024", "2024-02-30", ""])
    def test_malformed_date_rejected(self, api: LearningTrackerAPI, day: str) -> None:
        with pytest.raises(ValidationError):
            api.add_study_session(ALICE, make_session(day=day))


class TestDeleteStudySession:
    def test_delete_by_subject_removes_every_matching_session(
        self, api: LearningTrackerAPI
    ) -> None:
        api.add_study_session(ALICE, make_session("Math", "2024-06-08"))
        api.add_study_session(ALICE, make_session("Science", "2024-06-09"))
        api.add_study_session(ALICE, make_session("Math", "2024-06-10"))

        api.delete_study_session(ALICE, "Math")

        assert [s.subject for s in api.get_study_sessions(ALICE)] == ["Science"]

    def test_delete_missing_subject_raises(self, api: LearningTrackerAPI) -> None:
        api.add_study_session(ALICE, make_session("Math"))
        api.delete_study_session(ALICE, "Math")

        with pytest.raises(NotFoundError) as exc_info:
            api.delete_study_session(ALICE, "Math")
        assert exc_info.value.details["operation"] == "delete_study_session"

    def test_delete_by_id_removes_only_that_session(self, api: LearningTrackerAPI) -> None:
        first = api.add_study_session(ALICE, make_session("Math", "2024-06-09"))
        second = api.add_study_session(ALICE, make_session("Math", "2024-06-10"))

        api.delete_study_session_by_id(ALICE, first.id)

        assert [s.id for s in api.get_study_sessions(ALICE)] == [second.id]

    def test_delete_by_unknown_id_raises(self, api: LearningTrackerAPI) -> None:
        stored = api.add_study_session(ALICE, make_session())
        api.delete_study_session_by_id(ALICE, str(stored.id))

        with pytest.raises(NotFoundError):
            api.delete_study_session_by_id(ALICE, stored.id)

    def test_delete_by_malformed_id_rejected(self, api: LearningTrackerAPI) -> None:
        with pytest.raises(ValidationError):
            api.delete_study_session_by_id(ALICE, "not-a-uuid")


class TestRecentStudySessions:
    def test_newest_first_with_limit(self, api: LearningTrackerAPI) -> None:
        api.add_study_session(ALICE, make_session("A", "2024-06-01"))
        api.add_study_session(ALICE, make_session("B", "2024-06-10"))
        api.add_study_session(ALICE, make_session("C", "2024-06-05"))
        api.add_study_session(ALICE, make_session("D", "2024-06-10"))

        recent = api.get_recent_study_sessions(ALICE, limit=3)

        assert [s.subject for s in recent] == ["B", "D", "C"]

    def test_default_limit_from_settings(self, api: LearningTrackerAPI) -> None:
        for day in range(1, 13):
            api.add_study_session(ALICE, make_session(day=f"2024-06-{day:02d}"))

        recent = api.get_recent_study_sessions(ALICE)

        assert len(recent) == api.settings.RECENT_SESSIONS_LIMIT
        assert recent[0].date.isoformat() == "2024-06-12"

    def test_non_positive_limit_rejected(self, api: LearningTrackerAPI) -> None:
        with pytest.raises(ValidationError):
            api.get_recent_study_sessions(ALICE, limit=0)
