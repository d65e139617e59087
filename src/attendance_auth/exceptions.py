"""Authentication exceptions.

These exceptions are raised by the attendance_auth package and should be
caught and translated by the application layer (TeacherIdentityService).
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a session token has a bad signature or is malformed."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenExpiredError(AuthError):
    """Raised when a correctly signed session token is past its expiry.

    Deliberately not a subclass of InvalidTokenError: clients may react to
    expiry by re-authenticating, while a bad signature is always rejected.
    """

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class CorruptCredentialError(AuthError):
    """Raised when a stored password hash cannot be parsed.

    This is an internal fault (operator attention), not a wrong password.
    """

    def __init__(self, message: str = "Stored credential is malformed"):
        super().__init__(message)
