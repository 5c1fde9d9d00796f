"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from learning_tracker.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.STATS_TIMEZONE == "UTC"
        assert settings.ADMIN_IDENTITIES == []

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, STATS_TIMEZONE="Mars/Olympus_Mons")

    def test_admin_identities_are_stripped(self) -> None:
        settings = Settings(_env_file=None, ADMIN_IDENTITIES=[" root ", "", "ops"])

        assert settings.ADMIN_IDENTITIES == ["root", "ops"]

    def test_admin_identities_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ADMIN_IDENTITIES", '["root"]')

        assert Settings(_env_file=None).ADMIN_IDENTITIES == ["root"]
