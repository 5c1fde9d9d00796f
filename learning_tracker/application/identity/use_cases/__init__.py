"""Identity use cases."""

from .profile_use_case import ProfileUseCase
from .role_use_case import RoleUseCase

__all__ = [
    "ProfileUseCase",
    "RoleUseCase",
]
