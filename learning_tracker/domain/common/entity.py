"""
Base class for Entities.

Entities carry a natural key that identifies them within their owner's
partition. The key is what repositories index by and what delete/update
operations look up.

Example:
    @dataclass
    class Goal(Entity[str]):
        title: str

        @property
        def key(self) -> str:
            return self.title
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

KeyType = TypeVar("KeyType")


class Entity(ABC, Generic[KeyType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Identified by their key within one identity's partition
    - Mutable (state can change over time)
    - Owned by exactly one identity, never shared

    Subclasses must expose a `key` property of type KeyType.
    """

    @property
    @abstractmethod
    def key(self) -> KeyType:
        """Natural key of the entity within its owner's partition."""
