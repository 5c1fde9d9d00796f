from typing import Protocol

from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.learning.entities.goal import Goal


class GoalRepositoryProtocol(Protocol):
    def find_by_title(self, owner: Identity, title: str) -> Goal | None: ...

    def find_all(self, owner: Identity) -> list[Goal]: ...

    def add(self, owner: Identity, goal: Goal) -> Goal: ...

    def replace(self, owner: Identity, goal: Goal) -> Goal: ...

    def delete(self, owner: Identity, title: str) -> bool: ...
