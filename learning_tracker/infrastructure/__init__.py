"""Infrastructure layer: in-memory store, repositories, schemas and mappers."""
