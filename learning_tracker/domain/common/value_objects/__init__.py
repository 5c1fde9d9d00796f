"""Common value objects shared across all domain modules."""

from .ids import Identity, StudySessionId

__all__ = [
    "Identity",
    "StudySessionId",
]
