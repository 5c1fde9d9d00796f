"""Access-control gate guarding every mutation."""

import structlog

from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.application.identity.protocols.role_repository import (
    RoleRepositoryProtocol,
)
from learning_tracker.domain.common.exceptions import PermissionDeniedError
from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_role import DEFAULT_ROLE, UserRole

logger = structlog.get_logger(__name__)


class AccessControlService:
    """Resolves roles and checks them before a use case touches the store."""

    def __init__(self, role_repository: RoleRepositoryProtocol, uow: UnitOfWork) -> None:
        self.role_repository = role_repository
        self.uow = uow

    def role_of(self, identity: Identity) -> UserRole:
        """
        Get the role of an identity.

        Identities that were never assigned a role hold the default role.
        This does not imply the identity has any other data.
        """
        with self.uow.roles():
            role = self.role_repository.find_role(identity)
        return role if role is not None else DEFAULT_ROLE

    def is_admin(self, identity: Identity) -> bool:
        return self.role_of(identity) is UserRole.ADMIN

    def require_role(self, identity: Identity, minimum: UserRole, operation: str) -> None:
        """
        Check that the identity holds at least the given role.

        Args:
            identity: Caller identity
            minimum: Lowest role allowed to perform the operation
            operation: Operation name, reported in the error

        Raises:
            PermissionDeniedError: If the caller's role ranks below minimum
        """
        role = self.role_of(identity)
        if not role.satisfies(minimum):
            logger.warning(
                "permission_denied",
                operation=operation,
                identity=str(identity),
                role=role.value,
                required_role=minimum.value,
            )
            raise PermissionDeniedError(operation, identity, required_role=minimum)
