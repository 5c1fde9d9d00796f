"""Use case for the progress dashboard."""

import structlog

from learning_tracker.application.common.clock import ClockProtocol
from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.application.learning.protocols.goal_repository import (
    GoalRepositoryProtocol,
)
from learning_tracker.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.progress.progress_stats import ProgressStats
from learning_tracker.domain.progress.services.progress_calculator import ProgressCalculator

logger = structlog.get_logger(__name__)


class ProgressStatsUseCase:
    def __init__(
        self,
        goal_repository: GoalRepositoryProtocol,
        session_repository: StudySessionRepositoryProtocol,
        progress_calculator: ProgressCalculator,
        clock: ClockProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.goal_repository = goal_repository
        self.session_repository = session_repository
        self.progress_calculator = progress_calculator
        self.clock = clock
        self.uow = uow

    def get_progress_stats(self, identity: str) -> ProgressStats:
        """
        Compute the caller's progress from their current goals and sessions.

        Goals and sessions are read under one partition lock, so the
        snapshot never mixes states from before and after a concurrent write.
        """
        owner = Identity(identity)
        with self.uow.partition(owner):
            goals = self.goal_repository.find_all(owner)
            sessions = self.session_repository.find_all(owner)

        today = self.clock.today()
        stats = self.progress_calculator.compute_stats(goals, sessions, today)
        logger.debug(
            "computed_progress_stats",
            identity=identity,
            today=today.isoformat(),
            current_streak=stats.current_streak,
        )
        return stats
