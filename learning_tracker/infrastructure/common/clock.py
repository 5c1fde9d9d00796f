"""Clocks supplying the current calendar day."""

from datetime import date, datetime
from zoneinfo import ZoneInfo


class SystemClock:
    """Today's date in a fixed timezone."""

    def __init__(self, timezone: str = "UTC") -> None:
        self.timezone = ZoneInfo(timezone)

    def today(self) -> date:
        return datetime.now(self.timezone).date()


class FixedClock:
    """Clock pinned to one day. Used by tests and replays."""

    def __init__(self, day: date) -> None:
        self.day = day

    def today(self) -> date:
        return self.day
