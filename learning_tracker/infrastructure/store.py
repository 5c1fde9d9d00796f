"""
In-memory store partitioned by identity.

One store instance is constructed at process start and shared by every
repository. Each identity owns a partition holding one map per entity type,
keyed by natural key, plus an optional profile. The role registry lives
beside the partitions under its own lock.
"""

import threading
from dataclasses import dataclass, field

from learning_tracker.domain.common.value_objects.ids import Identity, StudySessionId
from learning_tracker.domain.identity.entities.user_profile import UserProfile
from learning_tracker.domain.identity.entities.user_role import UserRole
from learning_tracker.domain.learning.entities.goal import Goal
from learning_tracker.domain.learning.entities.resource import Resource
from learning_tracker.domain.learning.entities.study_session import StudySession


@dataclass
class Partition:
    """All data owned by one identity. Dicts keep insertion order."""

    goals: dict[str, Goal] = field(default_factory=dict)
    study_sessions: dict[StudySessionId, StudySession] = field(default_factory=dict)
    resources: dict[str, Resource] = field(default_factory=dict)
    profile: UserProfile | None = None


class InMemoryStore:
    """Process-wide store. Callers must hold the matching lock while reading or writing."""

    def __init__(self) -> None:
        self._partitions: dict[Identity, Partition] = {}
        self._roles: dict[Identity, UserRole] = {}
        self._partition_locks: dict[Identity, threading.RLock] = {}
        self._locks_guard = threading.Lock()
        self.roles_lock = threading.RLock()

    def lock_for(self, owner: Identity) -> threading.RLock:
        """Get (or lazily create) the re-entrant lock of one partition."""
        with self._locks_guard:
            lock = self._partition_locks.get(owner)
            if lock is None:
                lock = threading.RLock()
                self._partition_locks[owner] = lock
            return lock

    def partition(self, owner: Identity) -> Partition | None:
        """Get the owner's partition without creating it."""
        return self._partitions.get(owner)

    def partition_for_write(self, owner: Identity) -> Partition:
        """Get the owner's partition, creating an empty one on first write."""
        partition = self._partitions.get(owner)
        if partition is None:
            partition = Partition()
            self._partitions[owner] = partition
        return partition

    @property
    def roles(self) -> dict[Identity, UserRole]:
        return self._roles
