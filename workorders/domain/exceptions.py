"""Domain exceptions for the work-order service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class WorkOrderException(Exception):
    """Base exception for all work-order service errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error code, message and details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(WorkOrderException):
    """Raised when input validation fails for one or more fields.

    details["errors"] is a list of {"field", "message"} entries so clients
    can point the user at each offending field.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        """Initialize with message and either a single field or a list of errors.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation (single-error form).
            errors: Optional list of field-level errors ({"field", "message"}).
        """
        if errors is None:
            errors = [{"field": field, "message": message}] if field else []
        self.errors = errors
        details: dict[str, Any] = {"errors": errors}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(WorkOrderException):
    """Raised when authentication fails (missing, invalid or expired token)."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(WorkOrderException):
    """Raised when the actor may not touch the requested resource."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Forbidden",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'work_order').
            action: Optional action that was attempted (e.g. 'read', 'update').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(WorkOrderException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'work_order', 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DatabaseNotConfiguredException(WorkOrderException):
    """Raised when an operation needs the SQL database but DATABASE_URL is unset."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
