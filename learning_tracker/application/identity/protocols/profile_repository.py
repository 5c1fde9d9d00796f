from typing import Protocol

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_profile import UserProfile


class ProfileRepositoryProtocol(Protocol):
    def find_by_owner(self, owner: Identity) -> UserProfile | None: ...

    def save(self, profile: UserProfile) -> UserProfile: ...
