"""Repository for Resource domain entities."""

import dataclasses

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.learning.entities.resource import Resource
from learning_tracker.infrastructure.store import InMemoryStore


class ResourceRepository:
    """Repository for Resource domain entities."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def find_by_title(self, owner: Identity, title: str) -> Resource | None:
        partition = self.store.partition(owner)
        if partition is None:
            return None
        resource = partition.resources.get(title)
        return dataclasses.replace(resource) if resource else None

    def find_all(self, owner: Identity) -> list[Resource]:
        partition = self.store.partition(owner)
        if partition is None:
            return []
        return [dataclasses.replace(resource) for resource in partition.resources.values()]

    def add(self, owner: Identity, resource: Resource) -> Resource:
        partition = self.store.partition_for_write(owner)
        partition.resources[resource.title] = dataclasses.replace(resource)
        return resource

    def replace(self, owner: Identity, resource: Resource) -> Resource:
        partition = self.store.partition_for_write(owner)
        partition.resources[resource.title] = dataclasses.replace(resource)
        return resource

    def delete(self, owner: Identity, title: str) -> bool:
        partition = self.store.partition(owner)
        if partition is None or title not in partition.resources:
            return False
        del partition.resources[title]
        return True
