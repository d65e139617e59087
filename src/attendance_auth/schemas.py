"""Auth schemas and data structures.

These are simple data classes used for transferring token data between
components.
"""

from dataclasses import dataclass
from datetime import datetime

TEACHER_ROLE = "TEACHER"


@dataclass(frozen=True)
class TokenPayload:
    """Decoded session token payload.

    This represents the data extracted from a verified token.

    Attributes
    ----------
    teacher_id
        The surrogate identifier of the teacher
    email
        The teacher's (normalized) email address
    role
        Principal role, always "TEACHER"
    issued_at
        Token issue timestamp (UTC)
    expires_at
        Token expiration timestamp (UTC)
    """

    teacher_id: int
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check whether the token is expired at *now*."""
        return now >= self.expires_at

    def is_teacher(self) -> bool:
        return self.role == TEACHER_ROLE
