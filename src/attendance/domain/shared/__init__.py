"""Shared domain building blocks."""

from attendance.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InfrastructureError,
    StoreUnavailableError,
    ValidationError,
)
from attendance.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InfrastructureError",
    "StoreUnavailableError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
