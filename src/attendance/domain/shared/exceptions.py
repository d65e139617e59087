"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
domain layer. All domain exceptions inherit from DomainException so the
presentation layer can handle them centrally.

Every exception carries two tiers of information:
- ``message``: the external, user-safe text (one per error kind)
- ``details``: internal context that is logged but never sent to clients
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict Errors (400 for registration, see exception handlers)
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_EMPLOYEE_ID = "DUPLICATE_EMPLOYEE_ID"

    # Authentication Errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # Authorization Errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not Found Errors (404)
    TEACHER_NOT_FOUND = "TEACHER_NOT_FOUND"

    # Infrastructure Errors (500/503)
    CORRUPT_CREDENTIAL = "CORRUPT_CREDENTIAL"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an entity collides with an existing one."""


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""


class AuthenticationError(DomainException):
    """Raised when a principal cannot be authenticated."""


class AuthorizationError(DomainException):
    """Raised when an authenticated principal may not perform an action."""

    def __init__(
        self,
        message: str = "You are not allowed to access this resource",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.FORBIDDEN, details)


class InfrastructureError(DomainException):
    """Raised for internal or infrastructure faults (never client-caused)."""


class StoreUnavailableError(InfrastructureError):
    """Raised when the persistent store times out or cannot be reached.

    Retryable by the caller; never retried by the service itself.
    """

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "Service temporarily unavailable. Please try again later.",
            ErrorCode.STORE_UNAVAILABLE,
            details,
        )
