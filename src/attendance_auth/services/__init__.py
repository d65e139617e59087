"""Authentication services.

Provides password hashing and session token management.
"""

from attendance_auth.services.password_service import PasswordHashingService
from attendance_auth.services.token_service import SessionTokenService

__all__ = [
    "PasswordHashingService",
    "SessionTokenService",
]
