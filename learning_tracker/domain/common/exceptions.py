"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
Every failure is raised synchronously to the caller; none is retried.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: Empty goal title, non-positive study duration, malformed date.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Deleting a goal whose title does not exist for the caller.
    """

    def __init__(self, entity_type: str, key: object) -> None:
        message = f"{entity_type} '{key}' not found"
        super().__init__(message, {"entity_type": entity_type, "key": key})
        self.entity_type = entity_type
        self.key = key


class NotFoundError(EntityNotFoundError):
    """Raised when an update, delete or mark-complete targets a missing key."""

    def __init__(self, entity_type: str, key: object, operation: str | None = None) -> None:
        super().__init__(entity_type, key)
        self.operation = operation
        if operation:
            self.details["operation"] = operation


class DuplicateKeyError(DomainError):
    """
    Raised when a create targets a natural key that already exists.

    Example: Adding a second goal titled "Learn Rust" for the same identity.
    """

    def __init__(self, entity_type: str, key: object, operation: str | None = None) -> None:
        details: dict[str, object] = {"entity_type": entity_type, "key": key}
        if operation:
            details["operation"] = operation
        super().__init__(f"{entity_type} '{key}' already exists", details)
        self.entity_type = entity_type
        self.key = key
        self.operation = operation


class AuthorizationError(DomainError):
    """
    Raised when an operation is not authorized.

    Example: A guest trying to add a goal.
    """

    def __init__(
        self,
        message: str = "Not authorized to perform this action",
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message, details)


class PermissionDeniedError(AuthorizationError):
    """Raised when the caller's role does not allow the requested operation."""

    def __init__(self, operation: str, identity: object, required_role: object = None) -> None:
        details: dict[str, object] = {"operation": operation, "identity": str(identity)}
        if required_role is not None:
            details["required_role"] = str(required_role)
        super().__init__(f"Permission denied for {operation}", details)
        self.operation = operation
        self.identity = identity
        self.required_role = required_role
