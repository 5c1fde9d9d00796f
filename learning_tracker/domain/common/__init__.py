"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects identified by a natural key within one partition
- Exceptions shared by every domain module
"""

from .entity import Entity
from .exceptions import (
    AuthorizationError,
    DomainError,
    DuplicateKeyError,
    EntityNotFoundError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AuthorizationError",
    "DomainError",
    "DuplicateKeyError",
    "Entity",
    "EntityNotFoundError",
    "NotFoundError",
    "PermissionDeniedError",
    "ValidationError",
    "ValueObject",
]
