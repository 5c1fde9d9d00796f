from datetime import date
from typing import Protocol


class ClockProtocol(Protocol):
    def today(self) -> date: ...
