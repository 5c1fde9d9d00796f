"""Goal entity."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from learning_tracker.domain.common.entity import Entity
from learning_tracker.domain.common.exceptions import ValidationError

MAX_TITLE_LENGTH = 200


class Priority(str, Enum):
    """Goal priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GoalStatus(str, Enum):
    """Filter applied when listing goals."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    def matches(self, goal: "Goal") -> bool:
        if self is GoalStatus.ACTIVE:
            return not goal.completed
        if self is GoalStatus.COMPLETED:
            return goal.completed
        return True


@dataclass
class Goal(Entity[str]):
    """
    Learning goal owned by one identity.

    Business Rules:
    - Title is the natural key and must be unique per identity
      (enforced by the use case against the repository)
    - New goals always start incomplete
    - Completion only moves false -> true, except through a full
      replacement that explicitly sets it
    - A replacement must keep the same title; renaming is delete + add
    """

    title: str
    description: str
    category: str
    priority: Priority
    target_date: date | None = None
    completed: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Goal title cannot be empty", field="title", value=self.title)
        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Goal title cannot exceed {MAX_TITLE_LENGTH} characters",
                field="title",
                value=self.title,
            )
        if not isinstance(self.priority, Priority):
            raise ValidationError("Unknown goal priority", field="priority", value=self.priority)

    @property
    def key(self) -> str:
        return self.title

    def mark_complete(self) -> None:
        """Mark the goal as completed. Calling it again is a no-op."""
        self.completed = True

    def ensure_same_key(self, replacement: "Goal") -> None:
        """
        Check that a replacement record keeps this goal's title.

        Raises:
            ValidationError: If the replacement carries a different title
        """
        if replacement.title != self.title:
            raise ValidationError(
                "Goal title cannot be changed by an update; delete and re-create instead",
                field="title",
                value=replacement.title,
            )

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        category: str,
        priority: Priority,
        target_date: date | None = None,
    ) -> "Goal":
        """
        Create a new goal. Completion is always False on creation.

        Raises:
            ValidationError: If title is empty or priority is unknown
        """
        return cls(
            title=title,
            description=description,
            category=category,
            priority=priority,
            target_date=target_date,
            completed=False,
        )
