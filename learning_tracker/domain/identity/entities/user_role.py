"""Roles an identity can hold."""

from enum import Enum


class UserRole(str, Enum):
    """
    Closed set of roles.

    Roles are ordered guest < user < admin; a role satisfies any
    requirement at or below its own rank.
    """

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def satisfies(self, required: "UserRole") -> bool:
        """Check whether this role meets the required minimum role."""
        return self.rank >= required.rank

    def __str__(self) -> str:
        return self.value


_RANKS = {
    UserRole.GUEST: 0,
    UserRole.USER: 1,
    UserRole.ADMIN: 2,
}

DEFAULT_ROLE = UserRole.USER
