from dependency_injector import containers, providers

from learning_tracker.application.identity.services.access_control_service import (
    AccessControlService,
)
from learning_tracker.application.identity.use_cases.profile_use_case import ProfileUseCase
from learning_tracker.application.identity.use_cases.role_use_case import RoleUseCase
from learning_tracker.application.learning.use_cases.goal_use_case import GoalUseCase
from learning_tracker.application.learning.use_cases.resource_use_case import ResourceUseCase
from learning_tracker.application.learning.use_cases.study_session_use_case import (
    StudySessionUseCase,
)
from learning_tracker.application.progress.use_cases.progress_stats_use_case import (
    ProgressStatsUseCase,
)
from learning_tracker.config import Settings
from learning_tracker.domain.progress.services.progress_calculator import ProgressCalculator
from learning_tracker.infrastructure.common.clock import SystemClock
from learning_tracker.infrastructure.common.unit_of_work import InMemoryUnitOfWork
from learning_tracker.infrastructure.identity.repositories import (
    ProfileRepository,
    RoleRepository,
)
from learning_tracker.infrastructure.learning.repositories import (
    GoalRepository,
    ResourceRepository,
    StudySessionRepository,
)
from learning_tracker.infrastructure.store import InMemoryStore


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Dependency(instance_of=Settings)

    # One store per container, shared by every repository
    store = providers.Singleton(InMemoryStore)
    uow = providers.Singleton(InMemoryUnitOfWork, store=store)
    clock = providers.Singleton(SystemClock, timezone=settings.provided.STATS_TIMEZONE)

    # Repositories
    goal_repository = providers.Factory(GoalRepository, store=store)
    study_session_repository = providers.Factory(StudySessionRepository, store=store)
    resource_repository = providers.Factory(ResourceRepository, store=store)
    profile_repository = providers.Factory(ProfileRepository, store=store)
    role_repository = providers.Factory(RoleRepository, store=store)

    # Domain services (pure domain logic, no store)
    progress_calculator = providers.Factory(ProgressCalculator)

    # Identity module
    access_control_service = providers.Factory(
        AccessControlService,
        role_repository=role_repository,
        uow=uow,
    )
    role_use_case = providers.Factory(
        RoleUseCase,
        role_repository=role_repository,
        access_control=access_control_service,
        uow=uow,
    )
    profile_use_case = providers.Factory(
        ProfileUseCase,
        profile_repository=profile_repository,
        access_control=access_control_service,
        uow=uow,
    )

    # Learning module
    goal_use_case = providers.Factory(
        GoalUseCase,
        goal_repository=goal_repository,
        access_control=access_control_service,
        uow=uow,
    )
    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        session_repository=study_session_repository,
        access_control=access_control_service,
        uow=uow,
    )
    resource_use_case = providers.Factory(
        ResourceUseCase,
        resource_repository=resource_repository,
        access_control=access_control_service,
        uow=uow,
    )

    # Progress module
    progress_stats_use_case = providers.Factory(
        ProgressStatsUseCase,
        goal_repository=goal_repository,
        session_repository=study_session_repository,
        progress_calculator=progress_calculator,
        clock=clock,
        uow=uow,
    )


def build_container(settings: Settings) -> Container:
    """Create a container with its own store and seed the configured admins."""
    container = Container(settings=settings)
    container.role_use_case().seed_admins(settings.ADMIN_IDENTITIES)
    return container
