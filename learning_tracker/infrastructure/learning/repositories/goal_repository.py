"""Repository for Goal domain entities."""

import dataclasses

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.learning.entities.goal import Goal
from learning_tracker.infrastructure.store import InMemoryStore


class GoalRepository:
    """
    Repository for Goal domain entities.

    Entities are copied on the way in and out so that callers never hold a
    reference into the store.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def find_by_title(self, owner: Identity, title: str) -> Goal | None:
        """
        Find a goal by title within the owner's partition.

        Returns:
            Goal entity if found, None otherwise
        """
        partition = self.store.partition(owner)
        if partition is None:
            return None
        goal = partition.goals.get(title)
        return dataclasses.replace(goal) if goal else None

    def find_all(self, owner: Identity) -> list[Goal]:
        """Get all goals of the owner in insertion order."""
        partition = self.store.partition(owner)
        if partition is None:
            return []
        return [dataclasses.replace(goal) for goal in partition.goals.values()]

    def add(self, owner: Identity, goal: Goal) -> Goal:
        """Insert a new goal. The caller has checked the title is free."""
        self.store.partition_for_write(owner).goals[goal.title] = dataclasses.replace(goal)
        return goal

    def replace(self, owner: Identity, goal: Goal) -> Goal:
        """Overwrite the goal stored under the same title, keeping its position."""
        self.store.partition_for_write(owner).goals[goal.title] = dataclasses.replace(goal)
        return goal

    def delete(self, owner: Identity, title: str) -> bool:
        """
        Delete a goal.

        Returns:
            True if deleted, False if not found
        """
        partition = self.store.partition(owner)
        if partition is None or title not in partition.goals:
            return False
        del partition.goals[title]
        return True
