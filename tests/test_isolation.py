"""Tests that identities never see or modify each other's data."""

import threading

import pytest

from learning_tracker.api import LearningTrackerAPI
from learning_tracker.domain.common.exceptions import NotFoundError
from tests.conftest import ALICE, BOB, make_goal, make_resource, make_session


class TestIsolation:
    def test_mutations_by_one_identity_do_not_affect_another(
        self, api: LearningTrackerAPI
    ) -> None:
        api.add_goal(BOB, make_goal("Bob goal"))
        api.add_study_session(BOB, make_session("Bob subject"))
        api.add_resource(BOB, make_resource("Bob resource"))
        api.save_caller_user_profile(BOB, {"name": "Bob"})
        before = (
            api.get_goals(BOB),
            api.get_study_sessions(BOB),
            api.get_resources(BOB),
            api.get_caller_user_profile(BOB),
        )

        api.add_goal(ALICE, make_goal("Bob goal"))
        api.mark_goal_complete(ALICE, "Bob goal")
        api.add_study_session(ALICE, make_session("Bob subject"))
        api.delete_study_session(ALICE, "Bob subject")
        api.add_resource(ALICE, make_resource("Bob resource"))
        api.delete_resource(ALICE, "Bob resource")
        api.save_caller_user_profile(ALICE, {"name": "Alice"})

        after = (
            api.get_goals(BOB),
            api.get_study_sessions(BOB),
            api.get_resources(BOB),
            api.get_caller_user_profile(BOB),
        )
        assert after == before

    def test_cannot_delete_another_identitys_goal(self, api: LearningTrackerAPI) -> None:
        api.add_goal(BOB, make_goal("Bob goal"))

        with pytest.raises(NotFoundError):
            api.delete_goal(ALICE, "Bob goal")

        assert len(api.get_goals(BOB)) == 1

    def test_same_title_allowed_for_different_identities(self, api: LearningTrackerAPI) -> None:
        api.add_goal(ALICE, make_goal("Shared title"))
        api.add_goal(BOB, make_goal("Shared title"))

        assert len(api.get_goals(ALICE)) == 1
        assert len(api.get_goals(BOB)) == 1


class TestConcurrency:
    def test_concurrent_adds_of_same_title_store_one_goal(self, api: LearningTrackerAPI) -> None:
        errors: list[Exception] = []
        barrier = threading.Barrier(8)

        def add() -> None:
            barrier.wait()
            try:
                api.add_goal(ALICE, make_goal("Race"))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=add) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(api.get_goals(ALICE)) == 1
        assert len(errors) == 7

    def test_concurrent_sessions_are_all_counted(self, api: LearningTrackerAPI) -> None:
        def log_sessions(identity: str) -> None:
            for _ in range(50):
                api.add_study_session(identity, make_session(minutes=1))

        threads = [
            threading.Thread(target=log_sessions, args=(identity,))
            for identity in [ALICE, ALICE, BOB, BOB]
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert api.get_progress_stats(ALICE).total_study_minutes == 100
        assert api.get_progress_stats(BOB).total_study_minutes == 100
