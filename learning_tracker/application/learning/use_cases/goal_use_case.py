"""Use case for managing goals."""

import structlog

from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.application.identity.services.access_control_service import (
    AccessControlService,
)
from learning_tracker.application.learning.protocols.goal_repository import (
    GoalRepositoryProtocol,
)
from learning_tracker.domain.common.exceptions import DuplicateKeyError, NotFoundError
from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_role import UserRole
from learning_tracker.domain.learning.entities.goal import Goal, GoalStatus

logger = structlog.get_logger(__name__)

ENTITY_TYPE = "Goal"


class GoalUseCase:
    def __init__(
        self,
        goal_repository: GoalRepositoryProtocol,
        access_control: AccessControlService,
        uow: UnitOfWork,
    ) -> None:
        self.goal_repository = goal_repository
        self.access_control = access_control
        self.uow = uow

    def add_goal(self, identity: str, goal: Goal) -> None:
        """
        Add a goal for the caller. The stored goal always starts incomplete.

        Args:
            identity: Caller identity
            goal: Goal to add; its completed flag is ignored

        Raises:
            PermissionDeniedError: If the caller is a guest
            DuplicateKeyError: If a goal with the same title exists
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "add_goal")

        new_goal = Goal.create(
            title=goal.title,
            description=goal.description,
            category=goal.category,
            priority=goal.priority,
            target_date=goal.target_date,
        )
        with self.uow.partition(owner):
            if self.goal_repository.find_by_title(owner, new_goal.title) is not None:
                raise DuplicateKeyError(ENTITY_TYPE, new_goal.title, operation="add_goal")
            self.goal_repository.add(owner, new_goal)

        logger.info("created_goal", identity=identity, title=new_goal.title)

    def update_goal(
        self, identity: str, title: str, goal: Goal, keep_completed: bool = False
    ) -> None:
        """
        Replace the goal stored under title with a full new record.

        Args:
            identity: Caller identity
            title: Title of the goal to replace
            goal: Replacement record; must carry the same title
            keep_completed: Carry over the stored completion flag instead of
                the one on the replacement record

        Raises:
            PermissionDeniedError: If the caller is a guest
            NotFoundError: If no goal has that title
            ValidationError: If the replacement changes the title
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "update_goal")

        with self.uow.partition(owner):
            existing = self.goal_repository.find_by_title(owner, title)
            if existing is None:
                raise NotFoundError(ENTITY_TYPE, title, operation="update_goal")
            existing.ensure_same_key(goal)
            if keep_completed:
                goal.completed = existing.completed
            self.goal_repository.replace(owner, goal)

        logger.info("updated_goal", identity=identity, title=title, completed=goal.completed)

    def delete_goal(self, identity: str, title: str) -> None:
        """
        Delete a goal by title.

        Raises:
            PermissionDeniedError: If the caller is a guest
            NotFoundError: If no goal has that title
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "delete_goal")

        with self.uow.partition(owner):
            deleted = self.goal_repository.delete(owner, title)
        if not deleted:
            raise NotFoundError(ENTITY_TYPE, title, operation="delete_goal")

        logger.info("deleted_goal", identity=identity, title=title)

    def mark_goal_complete(self, identity: str, title: str) -> None:
        """
        Mark a goal as completed (idempotent).

        Raises:
            PermissionDeniedError: If the caller is a guest
            NotFoundError: If no goal has that title
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "mark_goal_complete")

        with self.uow.partition(owner):
            goal = self.goal_repository.find_by_title(owner, title)
            if goal is None:
                raise NotFoundError(ENTITY_TYPE, title, operation="mark_goal_complete")
            already_completed = goal.completed
            goal.mark_complete()
            self.goal_repository.replace(owner, goal)

        logger.info(
            "completed_goal",
            identity=identity,
            title=title,
            already_completed=already_completed,
        )

    def get_goals(self, identity: str, status: GoalStatus = GoalStatus.ALL) -> list[Goal]:
        """
        Get the caller's goals in insertion order.

        Args:
            identity: Caller identity
            status: Restrict to active or completed goals

        Returns:
            List of goals, empty if none
        """
        owner = Identity(identity)
        with self.uow.partition(owner):
            goals = self.goal_repository.find_all(owner)
        return [goal for goal in goals if status.matches(goal)]
