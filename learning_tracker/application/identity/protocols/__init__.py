from .profile_repository import ProfileRepositoryProtocol
from .role_repository import RoleRepositoryProtocol

__all__ = [
    "ProfileRepositoryProtocol",
    "RoleRepositoryProtocol",
]
