"""Identity context schemas."""

from .user_schemas import UserProfileSchema

__all__ = ["UserProfileSchema"]
