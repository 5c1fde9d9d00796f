"""
In-process API of the learning tracker.

Every method takes the caller's identity first. Identities come from the
external authentication layer and are only used as partition keys. Payloads
may be passed as schema instances or plain mappings; they are validated
here, so invalid enum values or malformed dates never reach the store.
"""

from collections.abc import Mapping
from typing import Any, TypeVar
from uuid import UUID

import pydantic
import structlog

from learning_tracker.config import Settings, configure_logging, get_settings
from learning_tracker.core import Container, build_container
from learning_tracker.domain.common.exceptions import ValidationError
from learning_tracker.domain.common.value_objects.ids import StudySessionId
from learning_tracker.domain.identity.entities.user_role import UserRole
from learning_tracker.domain.learning.entities.goal import GoalStatus
from learning_tracker.infrastructure.identity.mappers import UserProfileMapper
from learning_tracker.infrastructure.identity.schemas import UserProfileSchema
from learning_tracker.infrastructure.learning.mappers import (
    GoalMapper,
    ResourceMapper,
    StudySessionMapper,
)
from learning_tracker.infrastructure.learning.schemas import (
    GoalSchema,
    ResourceSchema,
    StudySessionCreate,
    StudySessionResponse,
)
from learning_tracker.infrastructure.progress.mappers import ProgressStatsMapper
from learning_tracker.infrastructure.progress.schemas import ProgressStatsResponse

logger = structlog.get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def _validate(schema: type[SchemaT], payload: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Validate a payload against a schema, raising the domain ValidationError."""
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(
            f"Invalid {schema.__name__}: {first['msg']}", field=field, value=first.get("input")
        ) from e


def _parse_enum(enum_type: type[UserRole] | type[GoalStatus], value: object, field: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as e:
        raise ValidationError(f"Unknown {field}", field=field, value=value) from e


class LearningTrackerAPI:
    """Facade exposing every tracker operation to the surrounding application."""

    def __init__(self, container: Container, settings: Settings) -> None:
        self.container = container
        self.settings = settings
        self.goal_mapper = GoalMapper()
        self.resource_mapper = ResourceMapper()
        self.session_mapper = StudySessionMapper()
        self.profile_mapper = UserProfileMapper()
        self.stats_mapper = ProgressStatsMapper()

    @classmethod
    def create(cls, settings: Settings | None = None) -> "LearningTrackerAPI":
        """Build an API over a fresh store."""
        settings = settings or get_settings()
        configure_logging(settings.ENVIRONMENT)
        container = build_container(settings)
        logger.info(
            "learning_tracker_started",
            environment=settings.ENVIRONMENT,
            stats_timezone=settings.STATS_TIMEZONE,
        )
        return cls(container, settings)

    # Goals

    def add_goal(self, caller: str, goal: GoalSchema | Mapping[str, Any]) -> None:
        schema = _validate(GoalSchema, goal)
        self.container.goal_use_case().add_goal(caller, self.goal_mapper.to_domain(schema))

    def update_goal(self, caller: str, title: str, goal: GoalSchema | Mapping[str, Any]) -> None:
        schema = _validate(GoalSchema, goal)
        self.container.goal_use_case().update_goal(
            caller,
            title,
            self.goal_mapper.to_domain(schema),
            keep_completed="completed" not in schema.model_fields_set,
        )

    def delete_goal(self, caller: str, title: str) -> None:
        self.container.goal_use_case().delete_goal(caller, title)

    def mark_goal_complete(self, caller: str, title: str) -> None:
        self.container.goal_use_case().mark_goal_complete(caller, title)

    def get_goals(self, caller: str, status: GoalStatus | str = GoalStatus.ALL) -> list[GoalSchema]:
        goal_status = _parse_enum(GoalStatus, status, "status")
        goals = self.container.goal_use_case().get_goals(caller, goal_status)
        return [self.goal_mapper.to_schema(goal) for goal in goals]

    # Study sessions

    def add_study_session(
        self, caller: str, session: StudySessionCreate | Mapping[str, Any]
    ) -> StudySessionResponse:
        schema = _validate(StudySessionCreate, session)
        stored = self.container.study_session_use_case().add_study_session(
            caller, self.session_mapper.to_domain(schema)
        )
        return self.session_mapper.to_schema(stored)

    def delete_study_session(self, caller: str, subject: str) -> None:
        self.container.study_session_use_case().delete_study_session(caller, subject)

    def delete_study_session_by_id(self, caller: str, session_id: UUID | str) -> None:
        try:
            session_uuid = session_id if isinstance(session_id, UUID) else UUID(session_id)
        except ValueError as e:
            raise ValidationError("Invalid session id", field="id", value=session_id) from e
        self.container.study_session_use_case().delete_study_session_by_id(
            caller, StudySessionId(session_uuid)
        )

    def get_study_sessions(self, caller: str) -> list[StudySessionResponse]:
        sessions = self.container.study_session_use_case().get_study_sessions(caller)
        return [self.session_mapper.to_schema(session) for session in sessions]

    def get_recent_study_sessions(
        self, caller: str, limit: int | None = None
    ) -> list[StudySessionResponse]:
        sessions = self.container.study_session_use_case().get_recent_study_sessions(
            caller, limit if limit is not None else self.settings.RECENT_SESSIONS_LIMIT
        )
        return [self.session_mapper.to_schema(session) for session in sessions]

    # Resources

    def add_resource(self, caller: str, resource: ResourceSchema | Mapping[str, Any]) -> None:
        schema = _validate(ResourceSchema, resource)
        self.container.resource_use_case().add_resource(
            caller, self.resource_mapper.to_domain(schema)
        )

    def update_resource(
        self, caller: str, title: str, resource: ResourceSchema | Mapping[str, Any]
    ) -> None:
        schema = _validate(ResourceSchema, resource)
        self.container.resource_use_case().update_resource(
            caller, title, self.resource_mapper.to_domain(schema)
        )

    def delete_resource(self, caller: str, title: str) -> None:
        self.container.resource_use_case().delete_resource(caller, title)

    def get_resources(self, caller: str, category: str | None = None) -> list[ResourceSchema]:
        resources = self.container.resource_use_case().get_resources(caller, category)
        return [self.resource_mapper.to_schema(resource) for resource in resources]

    # Profiles

    def save_caller_user_profile(
        self, caller: str, profile: UserProfileSchema | Mapping[str, Any]
    ) -> None:
        schema = _validate(UserProfileSchema, profile)
        self.container.profile_use_case().save_caller_profile(caller, schema.name)

    def get_caller_user_profile(self, caller: str) -> UserProfileSchema | None:
        profile = self.container.profile_use_case().get_caller_profile(caller)
        return self.profile_mapper.to_schema(profile)

    def get_user_profile(self, caller: str, target: str) -> UserProfileSchema | None:
        profile = self.container.profile_use_case().get_user_profile(caller, target)
        return self.profile_mapper.to_schema(profile)

    # Roles

    def assign_caller_user_role(self, caller: str, target: str, role: UserRole | str) -> None:
        new_role = _parse_enum(UserRole, role, "role")
        self.container.role_use_case().assign_role(caller, target, new_role)

    def get_caller_user_role(self, caller: str) -> UserRole:
        return self.container.role_use_case().get_caller_role(caller)

    def is_caller_admin(self, caller: str) -> bool:
        return self.container.role_use_case().is_caller_admin(caller)

    # Progress

    def get_progress_stats(self, caller: str) -> ProgressStatsResponse:
        stats = self.container.progress_stats_use_case().get_progress_stats(caller)
        return self.stats_mapper.to_schema(stats)
