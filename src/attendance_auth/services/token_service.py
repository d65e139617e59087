"""Session token service.

Provides signed, time-bound session tokens (JWT, HS256) for teachers.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from attendance_auth.exceptions import InvalidTokenError, TokenExpiredError
from attendance_auth.schemas import TEACHER_ROLE, TokenPayload


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class SessionTokenService:
    """Service for session token creation and verification.

    Tokens carry ``{sub, email, role, iat, exp}`` and are verifiable with
    the signing secret alone. There is no refresh mechanism and no
    server-side revocation: a token lives until its ``exp``.

    Examples
    --------
    >>> service = SessionTokenService(secret_key="your-secret-key")
    >>> token = service.issue(42, "teacher@example.com")
    >>> payload = service.verify(token)
    >>> payload.teacher_id
    42
    """

    DEFAULT_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "email", "role", "iat", "exp")

    def __init__(
        self,
        secret_key: str,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the token service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expire_hours
            Validity window in hours (default 24)
        clock
            Returns the current UTC time; injectable for tests.
        """
        if not secret_key:
            msg = "Token secret key cannot be empty"
            raise ValueError(msg)
        if expire_hours <= 0:
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=expire_hours)
        self._clock = clock

    @property
    def expires_in_seconds(self) -> int:
        return int(self._expire.total_seconds())

    def issue(self, teacher_id: int, email: str) -> str:
        """Create a session token for a teacher.

        Parameters
        ----------
        teacher_id
            The teacher's surrogate identifier
        email
            The teacher's email address

        Returns
        -------
        The encoded token string
        """
        now = self._clock()
        # Fractional NumericDates keep exp exactly one lifetime after iat
        payload = {
            "sub": str(teacher_id),
            "email": email,
            "role": TEACHER_ROLE,
            "iat": now.timestamp(),
            "exp": (now + self._expire).timestamp(),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenPayload:
        """Verify and decode a session token.

        The signature is checked before any claim is read. Expiry is
        evaluated against the injected clock, so a token is valid on
        ``[iat, exp)``.

        Parameters
        ----------
        token
            The token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If the signature is wrong or the token is malformed
        TokenExpiredError
            If the token is authentic but past its expiry
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": list(self.REQUIRED_CLAIMS),
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            payload = TokenPayload(
                teacher_id=int(claims["sub"]),
                email=str(claims["email"]),
                role=str(claims["role"]),
                issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            )
        except (KeyError, ValueError, TypeError, OverflowError, OSError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        if not payload.is_teacher():
            msg = "Token was not issued for a teacher"
            raise InvalidTokenError(msg)

        if payload.is_expired(self._clock()):
            raise TokenExpiredError

        return payload
