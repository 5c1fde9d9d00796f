"""Mapper for StudySession schema ↔ Domain conversion."""

from learning_tracker.domain.learning.entities.study_session import StudySession
from learning_tracker.infrastructure.learning.schemas.study_session_schemas import (
    StudySessionCreate,
    StudySessionResponse,
)


class StudySessionMapper:
    """Mapper for StudySession schema ↔ Domain conversion."""

    def to_domain(self, schema: StudySessionCreate) -> StudySession:
        """Build a new session; the id is generated here."""
        return StudySession(
            subject=schema.subject,
            study_date=schema.date,
            duration_minutes=schema.duration_minutes,
            notes=schema.notes,
        )

    def to_schema(self, session: StudySession) -> StudySessionResponse:
        return StudySessionResponse(
            id=session.id.value,
            subject=session.subject,
            date=session.study_date,
            duration_minutes=session.duration_minutes,
            notes=session.notes,
        )
