"""Use case for managing saved resources."""

import structlog

from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.application.identity.services.access_control_service import (
    AccessControlService,
)
from learning_tracker.application.learning.protocols.resource_repository import (
    ResourceRepositoryProtocol,
)
from learning_tracker.domain.common.exceptions import DuplicateKeyError, NotFoundError
from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_role import UserRole
from learning_tracker.domain.learning.entities.resource import Resource

logger = structlog.get_logger(__name__)

ENTITY_TYPE = "Resource"


class ResourceUseCase:
    def __init__(
        self,
        resource_repository: ResourceRepositoryProtocol,
        access_control: AccessControlService,
        uow: UnitOfWork,
    ) -> None:
        self.resource_repository = resource_repository
        self.access_control = access_control
        self.uow = uow

    def add_resource(self, identity: str, resource: Resource) -> None:
        """
        Save a resource for the caller.

        Raises:
            PermissionDeniedError: If the caller is a guest
            DuplicateKeyError: If a resource with the same title exists
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "add_resource")

        with self.uow.partition(owner):
            if self.resource_repository.find_by_title(owner, resource.title) is not None:
                raise DuplicateKeyError(ENTITY_TYPE, resource.title, operation="add_resource")
            self.resource_repository.add(owner, resource)

        logger.info("created_resource", identity=identity, title=resource.title)

    def update_resource(self, identity: str, title: str, resource: Resource) -> None:
        """
        Replace the resource stored under title with a full new record.

        Raises:
            PermissionDeniedError: If the caller is a guest
            NotFoundError: If no resource has that title
            ValidationError: If the replacement changes the title
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "update_resource")

        with self.uow.partition(owner):
            existing = self.resource_repository.find_by_title(owner, title)
            if existing is None:
                raise NotFoundError(ENTITY_TYPE, title, operation="update_resource")
            existing.ensure_same_key(resource)
            self.resource_repository.replace(owner, resource)

        logger.info("updated_resource", identity=identity, title=title)

    def delete_resource(self, identity: str, title: str) -> None:
        """
        Delete a resource by title.

        Raises:
            PermissionDeniedError: If the caller is a guest
            NotFoundError: If no resource has that title
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "delete_resource")

        with self.uow.partition(owner):
            deleted = self.resource_repository.delete(owner, title)
        if not deleted:
            raise NotFoundError(ENTITY_TYPE, title, operation="delete_resource")

        logger.info("deleted_resource", identity=identity, title=title)

    def get_resources(self, identity: str, category: str | None = None) -> list[Resource]:
        """Get the caller's resources in insertion order, optionally for one category."""
        owner = Identity(identity)
        with self.uow.partition(owner):
            resources = self.resource_repository.find_all(owner)
        if category is None:
            return resources
        return [resource for resource in resources if resource.in_category(category)]
