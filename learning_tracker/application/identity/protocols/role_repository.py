from typing import Protocol

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_role import UserRole


class RoleRepositoryProtocol(Protocol):
    def find_role(self, identity: Identity) -> UserRole | None: ...

    def save_role(self, identity: Identity, role: UserRole) -> None: ...
