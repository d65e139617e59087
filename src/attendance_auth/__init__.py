"""Attendance Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the attendance domain. It handles:
- Password hashing (bcrypt)
- Session token creation and verification (JWT, HS256)

Architecture:
    attendance_auth/
    ├── services/           # Pure logic (password hashing, tokens)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from attendance_auth import PasswordHashingService, SessionTokenService
"""

from attendance_auth.exceptions import (
    AuthError,
    CorruptCredentialError,
    InvalidTokenError,
    TokenExpiredError,
    WeakPasswordError,
)
from attendance_auth.schemas import TEACHER_ROLE, TokenPayload
from attendance_auth.services import PasswordHashingService, SessionTokenService

__all__ = [
    # Services
    "PasswordHashingService",
    "SessionTokenService",
    # Schemas
    "TEACHER_ROLE",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "CorruptCredentialError",
    "InvalidTokenError",
    "TokenExpiredError",
    "WeakPasswordError",
]
