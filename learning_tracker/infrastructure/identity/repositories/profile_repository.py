"""Repository for UserProfile domain entities."""

import dataclasses

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_profile import UserProfile
from learning_tracker.infrastructure.store import InMemoryStore


class ProfileRepository:
    """Repository for UserProfile domain entities (one per identity)."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def find_by_owner(self, owner: Identity) -> UserProfile | None:
        partition = self.store.partition(owner)
        if partition is None or partition.profile is None:
            return None
        return dataclasses.replace(partition.profile)

    def save(self, profile: UserProfile) -> UserProfile:
        """Create or replace the owner's profile."""
        self.store.partition_for_write(profile.owner).profile = dataclasses.replace(profile)
        return profile
