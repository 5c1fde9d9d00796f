"""User profile entity."""

from dataclasses import dataclass

from learning_tracker.domain.common.entity import Entity
from learning_tracker.domain.common.exceptions import ValidationError
from learning_tracker.domain.common.value_objects.ids import Identity

# Domain constraints
MAX_NAME_LENGTH = 100


@dataclass
class UserProfile(Entity[Identity]):
    """
    Display profile of an identity.

    Business Rules:
    - At most one profile per identity (the identity is the key)
    - Name must be non-empty and at most MAX_NAME_LENGTH characters
    """

    owner: Identity
    name: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Profile name cannot be empty", field="name", value=self.name)
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Profile name cannot exceed {MAX_NAME_LENGTH} characters",
                field="name",
                value=self.name,
            )

    @property
    def key(self) -> Identity:
        return self.owner

    @classmethod
    def create(cls, owner: Identity, name: str) -> "UserProfile":
        """
        Create a profile for an identity.

        Raises:
            ValidationError: If name is empty or too long
        """
        return cls(owner=owner, name=name)
