from .profile_repository import ProfileRepository
from .role_repository import RoleRepository

__all__ = [
    "ProfileRepository",
    "RoleRepository",
]
