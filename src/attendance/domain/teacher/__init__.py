"""Teacher domain: the principal managed by the identity core."""

from attendance.domain.teacher.aggregates import Teacher
from attendance.domain.teacher.exceptions import (
    CorruptCredentialError,
    DuplicateEmailError,
    DuplicateEmployeeIdError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidSessionTokenError,
    SessionTokenExpiredError,
    TeacherNotFoundError,
)
from attendance.domain.teacher.repositories import TeacherRepository
from attendance.domain.teacher.value_objects import Email

__all__ = [
    "CorruptCredentialError",
    "DuplicateEmailError",
    "DuplicateEmployeeIdError",
    "Email",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "InvalidSessionTokenError",
    "SessionTokenExpiredError",
    "Teacher",
    "TeacherNotFoundError",
    "TeacherRepository",
]
