from typing import Protocol

from learning_tracker.domain.common.value_objects.ids import Identity, StudySessionId
from learning_tracker.domain.learning.entities.study_session import StudySession


class StudySessionRepositoryProtocol(Protocol):
    def find_all(self, owner: Identity) -> list[StudySession]: ...

    def add(self, owner: Identity, session: StudySession) -> StudySession: ...

    def delete(self, owner: Identity, session_id: StudySessionId) -> bool: ...

    def delete_by_subject(self, owner: Identity, subject: str) -> int: ...
