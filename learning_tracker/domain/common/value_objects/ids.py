from dataclasses import dataclass
from uuid import UUID, uuid4

from ..exceptions import ValidationError
from ..value_object import ValueObject


@dataclass(frozen=True)
class Identity(ValueObject):
    """
    Opaque caller identity issued by the external authentication layer.

    Used only as a partition key; never issued or validated here.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationError("Identity must be a non-empty string", field="identity")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StudySessionId(ValueObject):
    """Strongly-typed study session identifier."""

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "StudySessionId":
        return cls(uuid4())
