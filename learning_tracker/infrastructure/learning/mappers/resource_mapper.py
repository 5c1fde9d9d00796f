"""Mapper for Resource schema ↔ Domain conversion."""

from learning_tracker.domain.learning.entities.resource import Resource
from learning_tracker.infrastructure.learning.schemas.resource_schemas import ResourceSchema


class ResourceMapper:
    """Mapper for Resource schema ↔ Domain conversion."""

    def to_domain(self, schema: ResourceSchema) -> Resource:
        return Resource(
            title=schema.title,
            url=schema.url,
            category=schema.category,
            notes=schema.notes,
        )

    def to_schema(self, resource: Resource) -> ResourceSchema:
        return ResourceSchema(
            title=resource.title,
            url=resource.url,
            category=resource.category,
            notes=resource.notes,
        )
