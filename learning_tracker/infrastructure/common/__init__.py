from .clock import FixedClock, SystemClock
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "FixedClock",
    "InMemoryUnitOfWork",
    "SystemClock",
]
