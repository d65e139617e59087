"""Teacher domain exceptions.

Each exception has a fixed, user-safe message. Anything that identifies
the caller's input (the email, the employee id) goes into ``details``,
which is logged only.
"""

from attendance.domain.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    InfrastructureError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address is empty or malformed."""

    def __init__(self, value: str) -> None:
        super().__init__("Invalid email format", details={"email": value})


class DuplicateEmailError(ConflictError):
    """Email already registered to another teacher."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email already registered. Please use a different email address.",
            ErrorCode.DUPLICATE_EMAIL,
            {"email": email},
        )


class DuplicateEmployeeIdError(ConflictError):
    """Employee id already registered to another teacher."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(
            "Employee ID already registered. Please contact administrator.",
            ErrorCode.DUPLICATE_EMPLOYEE_ID,
            {"employee_id": employee_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """Unknown email or wrong password.

    The two cases share one message so responses cannot be used to
    enumerate accounts.
    """

    def __init__(self, reason: str = "") -> None:
        super().__init__(
            "Invalid email or password",
            ErrorCode.INVALID_CREDENTIALS,
            {"reason": reason} if reason else None,
        )


class InvalidSessionTokenError(AuthenticationError):
    """Session token has a bad signature or is malformed."""

    def __init__(self, reason: str = "") -> None:
        super().__init__(
            "Invalid session token",
            ErrorCode.INVALID_TOKEN,
            {"reason": reason} if reason else None,
        )


class SessionTokenExpiredError(AuthenticationError):
    """Session token is authentic but past its expiry."""

    def __init__(self) -> None:
        super().__init__(
            "Session expired. Please log in again.",
            ErrorCode.TOKEN_EXPIRED,
        )


class TeacherNotFoundError(EntityNotFoundError):
    """Teacher not found."""

    def __init__(self, teacher_id: int) -> None:
        self.teacher_id = teacher_id
        super().__init__(
            "Teacher not found",
            ErrorCode.TEACHER_NOT_FOUND,
            {"teacher_id": teacher_id},
        )


class CorruptCredentialError(InfrastructureError):
    """Stored password hash for a teacher could not be parsed."""

    def __init__(self, teacher_id: int | None) -> None:
        super().__init__(
            "An internal error occurred",
            ErrorCode.CORRUPT_CREDENTIAL,
            {"teacher_id": teacher_id},
        )
