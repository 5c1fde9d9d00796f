"""
Unit of Work interface.

The Unit of Work scopes a business operation to one identity partition and
serializes it against every other operation on that partition. A use case
performs its lookups and its write inside the same unit so that
check-then-write sequences (duplicate checks, not-found checks) are atomic.

Example:
    class GoalUseCase:
        def add_goal(self, identity: str, goal: Goal) -> None:
            owner = Identity(identity)
            with self.uow.partition(owner):
                if self.goal_repository.find_by_title(owner, goal.title):
                    raise DuplicateKeyError("Goal", goal.title)
                self.goal_repository.add(owner, goal)
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from learning_tracker.domain.common.value_objects.ids import Identity


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Grants exclusive access to one identity partition at a time
    - Is re-entrant, so a use case may call another inside its unit
    - Never spans two partitions

    Infrastructure layer provides the concrete implementation
    (InMemoryUnitOfWork).
    """

    @abstractmethod
    def partition(self, owner: Identity) -> AbstractContextManager[None]:
        """
        Enter an exclusive section over the owner's partition.

        All reads and writes that must be observed atomically belong
        inside the returned context.
        """
        raise NotImplementedError

    @abstractmethod
    def roles(self) -> AbstractContextManager[None]:
        """Enter an exclusive section over the role registry."""
        raise NotImplementedError
