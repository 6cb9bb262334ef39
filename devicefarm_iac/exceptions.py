"""
Exception hierarchy for Device Farm upload resources.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the provider
"""

from typing import Any


class DeviceFarmIacError(Exception):
    """Base exception for all Device Farm upload resource errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DeviceFarmIacError):
    """Raised when declared upload configuration is rejected."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ArnParseError(DeviceFarmIacError):
    """Raised when a string is not a well-formed ARN."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Error parsing '{value}': {reason}", {"value": value})


class InvalidUploadArnError(DeviceFarmIacError):
    """Raised when an upload ARN does not embed project-id/upload-id."""

    def __init__(self, arn: str, resource: str) -> None:
        super().__init__(
            f"Unexpected format of ID ({resource!r}), expected project-id/upload-id",
            {"arn": arn, "resource": resource},
        )


class UploadNotFoundError(DeviceFarmIacError):
    """Raised when Device Farm has no upload for the given ARN."""

    def __init__(self, arn: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["arn"] = arn
        super().__init__(f"Device Farm upload not found: {arn}", details)


class UploadOperationError(DeviceFarmIacError):
    """Raised when Device Farm rejects an upload operation."""

    def __init__(
        self,
        message: str,
        operation: str,
        arn: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upload operation error.

        Args:
            message: Error message
            operation: Operation that failed (create, read, update, delete)
            arn: Upload ARN, when one is known
            details: Additional context
        """
        details = details or {}
        details["operation"] = operation
        if arn:
            details["arn"] = arn
        self.operation = operation
        super().__init__(message, details)
