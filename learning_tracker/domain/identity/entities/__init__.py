from .user_profile import UserProfile
from .user_role import UserRole

__all__ = ["UserProfile", "UserRole"]
