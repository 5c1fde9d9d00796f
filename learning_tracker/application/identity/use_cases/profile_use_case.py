"""Use case for user profiles."""

import structlog

from learning_tracker.application.common.unit_of_work import UnitOfWork
from learning_tracker.application.identity.protocols.profile_repository import (
    ProfileRepositoryProtocol,
)
from learning_tracker.application.identity.services.access_control_service import (
    AccessControlService,
)
from learning_tracker.domain.common.value_objects.ids import Identity
from learning_tracker.domain.identity.entities.user_profile import UserProfile
from learning_tracker.domain.identity.entities.user_role import UserRole

logger = structlog.get_logger(__name__)


class ProfileUseCase:
    def __init__(
        self,
        profile_repository: ProfileRepositoryProtocol,
        access_control: AccessControlService,
        uow: UnitOfWork,
    ) -> None:
        self.profile_repository = profile_repository
        self.access_control = access_control
        self.uow = uow

    def save_caller_profile(self, identity: str, name: str) -> UserProfile:
        """
        Create or replace the caller's profile (last write wins).

        Raises:
            PermissionDeniedError: If the caller is a guest
            ValidationError: If name is empty
        """
        owner = Identity(identity)
        self.access_control.require_role(owner, UserRole.USER, "save_caller_user_profile")

        profile = UserProfile.create(owner=owner, name=name)
        with self.uow.partition(owner):
            created = self.profile_repository.find_by_owner(owner) is None
            saved = self.profile_repository.save(profile)

        logger.info("saved_profile", identity=identity, created=created)
        return saved

    def get_caller_profile(self, identity: str) -> UserProfile | None:
        return self.get_profile(Identity(identity))

    def get_user_profile(self, caller: str, target: str) -> UserProfile | None:
        """
        Read any identity's profile.

        Profiles are readable by every authenticated caller, so the caller
        is only used for logging.
        """
        caller_vo = Identity(caller)
        target_vo = Identity(target)
        logger.debug("profile_lookup", caller=str(caller_vo), target=str(target_vo))
        return self.get_profile(target_vo)

    def get_profile(self, owner: Identity) -> UserProfile | None:
        with self.uow.partition(owner):
            return self.profile_repository.find_by_owner(owner)
