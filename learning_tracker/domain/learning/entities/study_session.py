"""StudySession entity."""

from dataclasses import dataclass, field
from datetime import date

from learning_tracker.domain.common.entity import Entity
from learning_tracker.domain.common.exceptions import ValidationError
from learning_tracker.domain.common.value_objects.ids import StudySessionId


@dataclass
class StudySession(Entity[StudySessionId]):
    """
    A logged block of study time.

    Business Rules:
    - Duration must be a positive number of minutes
    - Subject must be non-empty; several sessions may share a subject
    - Each session is keyed by its own generated id
    """

    subject: str
    study_date: date
    duration_minutes: int
    notes: str | None = None
    id: StudySessionId = field(default_factory=StudySessionId.generate)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.subject or not self.subject.strip():
            raise ValidationError(
                "Study session subject cannot be empty", field="subject", value=self.subject
            )
        if not isinstance(self.study_date, date):
            raise ValidationError("Study date must be a date", field="date", value=self.study_date)
        if isinstance(self.duration_minutes, bool) or not isinstance(self.duration_minutes, int):
            raise ValidationError(
                "Duration must be a whole number of minutes",
                field="duration_minutes",
                value=self.duration_minutes,
            )
        if self.duration_minutes <= 0:
            raise ValidationError(
                "Duration must be greater than zero",
                field="duration_minutes",
                value=self.duration_minutes,
            )

    @property
    def key(self) -> StudySessionId:
        return self.id

    def has_subject(self, subject: str) -> bool:
        return self.subject == subject
