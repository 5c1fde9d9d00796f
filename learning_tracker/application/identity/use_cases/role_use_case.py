"""Use case for reading and assigning roles."""

import structlog

from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.application.identity.protocols.role_repository import (
    RoleRepositoryProtocol,
)
from learning_tracker.application.identity.services.access_control_service import (
    AccessControlService,
)
from learning_tracker.domain.common.exceptions import PermissionDeniedError
from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_role import DEFAULT_ROLE, UserRole

logger = structlog.get_logger(__name__)


class RoleUseCase:
    def __init__(
        self,
        role_repository: RoleRepositoryProtocol,
        access_control: AccessControlService,
        uow: UnitOfWork,
    ) -> None:
        self.role_repository = role_repository
        self.access_control = access_control
        self.uow = uow

    def get_caller_role(self, identity: str) -> UserRole:
        return self.access_control.role_of(Identity(identity))

    def is_caller_admin(self, identity: str) -> bool:
        return self.access_control.is_admin(Identity(identity))

    def assign_role(self, caller: str, target: str, role: UserRole) -> None:
        """
        Assign a role to another identity (or to the caller).

        Admins may move any identity to any role, including demoting
        themselves.

        Args:
            caller: Identity performing the assignment
            target: Identity receiving the role
            role: New role

        Raises:
            PermissionDeniedError: If the caller is not an admin
        """
        caller_vo = Identity(caller)
        target_vo = Identity(target)

        # Check and write under one registry lock so a concurrent demotion
        # of the caller cannot interleave.
        with self.uow.roles():
            caller_role = self.role_repository.find_role(caller_vo) or DEFAULT_ROLE
            if caller_role is not UserRole.ADMIN:
                logger.warning(
                    "permission_denied",
                    operation="assign_role",
                    identity=caller,
                    role=caller_role.value,
                    required_role=UserRole.ADMIN.value,
                )
                raise PermissionDeniedError("assign_role", caller_vo, required_role=UserRole.ADMIN)

            previous = self.role_repository.find_role(target_vo) or DEFAULT_ROLE
            self.role_repository.save_role(target_vo, role)

        logger.info(
            "assigned_role",
            caller=caller,
            target=target,
            previous_role=previous.value,
            role=role.value,
        )

    def seed_admins(self, identities: list[str]) -> None:
        """Grant the admin role to bootstrap identities without a permission check."""
        with self.uow.roles():
            for identity in identities:
                self.role_repository.save_role(Identity(identity), UserRole.ADMIN)
        if identities:
            logger.info("seeded_admins", count=len(identities))
