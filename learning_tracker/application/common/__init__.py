"""
Application common module.

Contains the ports shared by all use cases:
- UnitOfWork: Serializes the operations of one identity partition
- ClockProtocol: Source of "today" for date-relative computations
"""

from .clock import ClockProtocol
from .unit_of_work import UnitOfWork

__all__ = [
    "ClockProtocol",
    "UnitOfWork",
]
