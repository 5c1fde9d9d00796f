"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from dependency_injector import providers

from learning_tracker.api import LearningTrackerAPI
from learning_tracker.config import Settings
from learning_tracker.core import build_container
from learning_tracker.infrastructure.common.clock import FixedClock

# Query day used by all date-relative tests
TODAY = date(2024, 6, 10)

ADMIN = "admin-principal"
ALICE = "alice-principal"
BOB = "bob-principal"


@pytest.fixture
def settings() -> Settings:
    """Test settings with one bootstrap admin."""
    return Settings(_env_file=None, ENVIRONMENT="test", ADMIN_IDENTITIES=[ADMIN])


@pytest.fixture
def api(settings: Settings) -> LearningTrackerAPI:
    """API over a fresh store with the clock pinned to TODAY."""
    container = build_container(settings)
    container.clock.override(providers.Object(FixedClock(TODAY)))
    return LearningTrackerAPI(container, settings)


def make_goal(title: str = "Learn Python", **overrides: object) -> dict[str, object]:
    goal: dict[str, object] = {
        "title": title,
        "description": "Finish the tutorial",
        "category": "Career",
        "priority": "high",
        "target_date": "2024-07-01",
    }
    goal.update(overrides)
    return goal


def make_session(
    subject: str = "Math", day: str = "2024-06-10", minutes: int = 30, **overrides: object
) -> dict[str, object]:
    session: dict[str, object] = {
        "subject": subject,
        "date": day,
        "duration_minutes": minutes,
    }
    session.update(overrides)
    return session


def make_resource(title: str = "Python docs", **overrides: object) -> dict[str, object]:
    resource: dict[str, object] = {
        "title": title,
        "url": "https://docs.python.org",
        "category": "Career",
    }
    resource.update(overrides)
    return resource
