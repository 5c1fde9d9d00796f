"""Repository for StudySession domain entities."""

import dataclasses

from learning_tracker.domain.common.value_objects.ids import Identity, StudySessionId
from learning_tracker.domain.learning.entities.study_session import StudySession
from learning_tracker.infrastructure.store import InMemoryStore


class StudySessionRepository:
    """Repository for StudySession domain entities, keyed by session id."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def find_all(self, owner: Identity) -> list[StudySession]:
        """Get all sessions of the owner in insertion order."""
        partition = self.store.partition(owner)
        if partition is None:
            return []
        return [dataclasses.replace(s) for s in partition.study_sessions.values()]

    def add(self, owner: Identity, session: StudySession) -> StudySession:
        partition = self.store.partition_for_write(owner)
        partition.study_sessions[session.id] = dataclasses.replace(session)
        return session

    def delete(self, owner: Identity, session_id: StudySessionId) -> bool:
        """
        Delete one session.

        Returns:
            True if deleted, False if the owner has no such session
        """
        partition = self.store.partition(owner)
        if partition is None or session_id not in partition.study_sessions:
            return False
        del partition.study_sessions[session_id]
        return True

    def delete_by_subject(self, owner: Identity, subject: str) -> int:
        """
        Delete every session logged under a subject.

        Returns:
            Number of sessions removed
        """
        partition = self.store.partition(owner)
        if partition is None:
            return 0
        matching = [
            session_id
            for session_id, session in partition.study_sessions.items()
            if session.has_subject(subject)
        ]
        for session_id in matching:
            del partition.study_sessions[session_id]
        return len(matching)
