"""Unit of Work backed by the in-memory store's locks."""

from collections.abc import Iterator
from contextlib import contextmanager

from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.infrastructure.store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Serializes operations per identity partition using the store's locks."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @contextmanager
    def partition(self, owner: Identity) -> Iterator[None]:
        with self.store.lock_for(owner):
            yield

    @contextmanager
    def roles(self) -> Iterator[None]:
        with self.store.roles_lock:
            yield
