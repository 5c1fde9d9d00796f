"""Tests for user profiles."""

import pytest

from learning_tracker.api import LearningTrackerAPI
from learning_tracker.domain.common.exceptions import ValidationError
from tests.conftest import ALICE, BOB


class TestCallerProfile:
    def test_absent_before_first_save(self, api: LearningTrackerAPI) -> None:
        assert api.get_caller_user_profile(ALICE) is None

    def test_last_write_wins(self, api: LearningTrackerAPI) -> None:
        api.save_caller_user_profile(ALICE, {"name": "Alice"})
        api.save_caller_user_profile(ALICE, {"name": "Alice Liddell"})

        profile = api.get_caller_user_profile(ALICE)
        assert profile is not None
        assert profile.name == "Alice Liddell"

    def test_saved_name_read_back_unchanged(self, api: LearningTrackerAPI) -> None:
        api.save_caller_user_profile(ALICE, {"name": " Ada "})

        profile = api.get_caller_user_profile(ALICE)
        assert profile is not None
        assert profile.name == " Ada "

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, api: LearningTrackerAPI, name: str) -> None:
        with pytest.raises(ValidationError):
            api.save_caller_user_profile(ALICE, {"name": name})

        assert api.get_caller_user_profile(ALICE) is None


class TestUserProfileLookup:
    def test_any_caller_reads_any_profile(self, api: LearningTrackerAPI) -> None:
        api.save_caller_user_profile(BOB, {"name": "Bob"})

        profile = api.get_user_profile(ALICE, BOB)

        assert profile is not None
        assert profile.name == "Bob"

    def test_unknown_identity_has_no_profile(self, api: LearningTrackerAPI) -> None:
        assert api.get_user_profile(ALICE, "never-seen") is None
