"""Data transfer objects returned across the identity service boundary.

None of these carry the password hash.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from attendance.domain.teacher import Teacher


@dataclass(frozen=True)
class TeacherDTO:
    """A teacher record stripped of its credential."""

    id: int
    name: str
    email: str
    employee_id: str
    department: str
    created_at: datetime

    @classmethod
    def from_teacher(cls, teacher: Teacher) -> TeacherDTO:
        if teacher.id is None:
            msg = "Cannot build a DTO for an unsaved teacher"
            raise ValueError(msg)
        return cls(
            id=teacher.id,
            name=teacher.name,
            email=teacher.email,
            employee_id=teacher.employee_id,
            department=teacher.department,
            created_at=teacher.created_at,
        )


# The profile projection has exactly the same fields as the stripped record.
TeacherProfileDTO = TeacherDTO


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    teacher: TeacherDTO
    token: str
    expires_in: int
