from typing import Protocol

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.learning.entities.resource import Resource


class ResourceRepositoryProtocol(Protocol):
    def find_by_title(self, owner: Identity, title: str) -> Resource | None: ...

    def find_all(self, owner: Identity) -> list[Resource]: ...

    def add(self, owner: Identity, resource: Resource) -> Resource: ...

    def replace(self, owner: Identity, resource: Resource) -> Resource: ...

    def delete(self, owner: Identity, title: str) -> bool: ...
