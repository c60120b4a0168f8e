"""Domain exceptions for the rentals application.

Defines domain-level exceptions that represent business rule violations
and store faults. Presentation layer maps them to HTTP responses in
exception handlers (see rentals.core.exception_handlers).
"""

from typing import Any


class RentalsException(Exception):
    """Base exception for all rentals application errors.

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
        """Return the JSON body used by the API for this error."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RentalsException):
    """Raised when input or state validation fails (e.g. role already held)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class DuplicateKeyException(RentalsException):
    """Raised when a person's national id or email is already registered.

    Uniqueness is checked application-side across all persons, active or not.
    The field is carried in details so handlers can attach the error to the
    offending input.
    """

    def __init__(self, field: str, value: str) -> None:
        """Initialize with the duplicated field and value.

        Args:
            field: Input field name ('national_id' or 'email').
            value: The value that already exists.
        """
        super().__init__(
            f"A person with this {field.replace('_', ' ')} already exists",
            "DUPLICATE_KEY",
            {"field": field, "value": value},
        )
        self.field = field


class ResourceNotFoundException(RentalsException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'person', 'owner').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class NotSupportedException(RentalsException):
    """Raised by operations that are intentionally not implemented.

    Always raised unconditionally; callers must not retry.
    """

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with operation name and reason.

        Args:
            operation: Name of the unsupported operation (e.g. 'owner.update').
            reason: Why the operation is not offered.
        """
        super().__init__(
            f"Operation not supported: {operation}. {reason}",
            "NOT_SUPPORTED",
            {"operation": operation},
        )


class StoreFailureException(RentalsException):
    """Raised when the relational store fails (connectivity, constraint, query).

    The original driver exception is chained as __cause__ (raise ... from).
    """

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        """Initialize with the failing operation and the underlying fault.

        Args:
            operation: Human-readable description of what was being done.
            cause: Original exception, kept for logging and chaining.
        """
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Error while trying to {operation}{detail}",
            "STORE_FAILURE",
            {"operation": operation},
        )
        self.operation = operation
        self.cause = cause
