"""Repository for role assignments."""

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_role import UserRole
from learning_tracker.infrastructure.store import InMemoryStore


class RoleRepository:
    """Role registry. Identities without an entry have never been assigned a role."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def find_role(self, identity: Identity) -> UserRole | None:
        return self.store.roles.get(identity)

    def save_role(self, identity: Identity, role: UserRole) -> None:
        self.store.roles[identity] = role
