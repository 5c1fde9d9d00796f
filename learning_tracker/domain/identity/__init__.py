"""Identity domain layer."""

from learning_tracker.domain.identity.entities.user_profile import UserProfile
from learning_tracker.domain.identity.entities.user_role import DEFAULT_ROLE, UserRole

__all__ = [
    "DEFAULT_ROLE",
    "UserProfile",
    "UserRole",
]
