"""Use case for logging study sessions."""

import structlog

from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.application.identity.services.access_control_service import (
    AccessControlService,
)
from learning_tracker.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from learning_tracker.domain.common.exceptions import NotFoundError, ValidationError
from learning_tracker.domain.common.value_objects.ids import Identity, StudySessionId
from learning_tracker.domain.identity.entities.user_role import UserRole
from learning_tracker.domain.learning.entities.study_session import StudySession

logger = structlog.get_logger(__name__)

ENTITY_TYPE = "StudySession"


class StudySessionUseCase:
    def __init__(
        self,
        session_repository: StudySessionRepositoryProtocol,
        access_control: AccessControlService,
        uow: UnitOfWork,
    ) -> None:
        self.session_repository = session_repository
        self.access_control = access_control
        self.uow = uow

    def add_study_session(self, identity: str, session: StudySession) -> StudySession:
        """
        Log a study session for the caller.

        Sessions are keyed by their generated id, so logging the same
        subject on several dates keeps every session.

        Returns:
            The stored session, carrying its id

        Raises:
            PermissionDeniedError: If the caller is a guest
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "add_study_session")

        with self.uow.partition(owner):
            stored = self.session_repository.add(owner, session)

        logger.info(
            "created_study_session",
            identity=identity,
            session_id=str(stored.id),
            subject=stored.subject,
            duration_minutes=stored.duration_minutes,
        )
        return stored

    def delete_study_session(self, identity: str, subject: str) -> int:
        """
        Delete every session logged under a subject.

        Returns:
            Number of sessions removed (at least one)

        Raises:
            PermissionDeniedError: If the caller is a guest
            NotFoundError: If no session has that subject
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "delete_study_session")

        with self.uow.partition(owner):
            removed = self.session_repository.delete_by_subject(owner, subject)
        if removed == 0:
            raise NotFoundError(ENTITY_TYPE, subject, operation="delete_study_session")

        logger.info("deleted_study_sessions", identity=identity, subject=subject, count=removed)
        return removed

    def delete_study_session_by_id(self, identity: str, session_id: StudySessionId) -> None:
        """
        Delete a single session by its id.

        Raises:
            PermissionDeniedError: If the caller is a guest
            NotFoundError: If the caller has no session with that id
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "delete_study_session_by_id")

        with self.uow.partition(owner):
            deleted = self.session_repository.delete(owner, session_id)
        if not deleted:
            raise NotFoundError(
                ENTITY_TYPE, str(session_id), operation="delete_study_session_by_id"
            )

        logger.info("deleted_study_session", identity=identity, session_id=str(session_id))

    def get_study_sessions(self, identity: str) -> list[StudySession]:
        """Get the caller's sessions in insertion order."""
        owner = Identity(identity)
        with self.uow.partition(owner):
            return self.session_repository.find_all(owner)

    def get_recent_study_sessions(self, identity: str, limit: int) -> list[StudySession]:
        """
        Get the caller's most recent sessions, newest date first.

        Sessions on the same date keep their insertion order.

        Raises:
            ValidationError: If limit is not positive
        """
        if limit < 1:
            raise ValidationError("Limit must be at least 1", field="limit", value=limit)
        sessions = self.get_study_sessions(identity)
        ordered = sorted(sessions, key=lambda session: session.study_date, reverse=True)
        return ordered[:limit]
