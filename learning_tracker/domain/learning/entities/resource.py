"""Resource entity."""

from dataclasses import dataclass

from learning_tracker.domain.common.entity import Entity
from learning_tracker.domain.common.exceptions import ValidationError


@dataclass
class Resource(Entity[str]):
    """
    A saved learning resource (article, course, video...).

    Business Rules:
    - Title is the natural key and must be unique per identity
    - URL must be non-empty
    - A replacement must keep the same title
    """

    title: str
    url: str
    category: str
    notes: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError(
                "Resource title cannot be empty", field="title", value=self.title
            )
        if not self.url or not self.url.strip():
            raise ValidationError("Resource URL cannot be empty", field="url", value=self.url)

    @property
    def key(self) -> str:
        return self.title

    def in_category(self, category: str) -> bool:
        return self.category == category

    def ensure_same_key(self, replacement: "Resource") -> None:
        """
        Check that a replacement record keeps this resource's title.

        Raises:
            ValidationError: If the replacement carries a different title
        """
        if replacement.title != self.title:
            raise ValidationError(
                "Resource title cannot be changed by an update; delete and re-create instead",
                field="title",
                value=replacement.title,
            )
