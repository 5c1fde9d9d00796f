"""Mapper for UserProfile Domain → schema conversion."""

from learning_tracker.domain.identity.entities.user_profile import UserProfile
from learning_tracker.infrastructure.identity.schemas.user_schemas import UserProfileSchema


class UserProfileMapper:
    """Mapper for UserProfile Domain → schema conversion."""

    def to_schema(self, profile: UserProfile | None) -> UserProfileSchema | None:
        """Convert a profile; an absent profile stays absent."""
        if profile is None:
            return None
        return UserProfileSchema(name=profile.name)
