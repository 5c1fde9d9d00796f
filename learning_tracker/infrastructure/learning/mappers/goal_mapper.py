"""Mapper for Goal schema ↔ Domain conversion."""

from learning_tracker.domain.learning.entities.goal import Goal
from learning_tracker.infrastructure.learning.schemas.goal_schemas import GoalSchema


class GoalMapper:
    """Mapper for Goal schema ↔ Domain conversion."""

    def to_domain(self, schema: GoalSchema) -> Goal:
        """Convert a validated schema to a domain entity."""
        return Goal(
            title=schema.title,
            description=schema.description,
            category=schema.category,
            priority=schema.priority,
            target_date=schema.target_date,
            completed=schema.completed,
        )

    def to_schema(self, goal: Goal) -> GoalSchema:
        """Convert a domain entity to its response schema."""
        return GoalSchema(
            title=goal.title,
            description=goal.description,
            category=goal.category,
            priority=goal.priority,
            target_date=goal.target_date,
            completed=goal.completed,
        )
