"""Teacher aggregate, the sole principal of the attendance system."""

from datetime import datetime
from typing import Optional, Union

from attendance.domain.shared.exceptions import ValidationError
from attendance.domain.shared.time import ensure_tz_aware, utc_now
from attendance.domain.teacher.value_objects import Email


class Teacher:
    """
    Teacher aggregate root.

    Immutable once created. The ``id`` is assigned by the store on insert;
    a freshly created teacher has ``id is None`` until persisted.

    ``password_hash`` lives on the aggregate for credential checks only and
    must never be copied into anything returned across the service boundary.
    """

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        employee_id: str,
        department: str,
        id: Optional[int] = None,
        created_at: datetime | None = None,
    ):
        self._name = _required("name", name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = _required("password_hash", password_hash)
        self._employee_id = _required("employee_id", employee_id)
        self._department = _required("department", department)
        self._id = id
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def employee_id(self) -> str:
        return self._employee_id

    @property
    def department(self) -> str:
        return self._department

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        employee_id: str,
        department: str,
    ) -> "Teacher":
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            employee_id=employee_id,
            department=department,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        employee_id: str,
        department: str,
        created_at: datetime,
    ) -> "Teacher":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            employee_id=employee_id,
            department=department,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Teacher):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"Teacher(id={self._id}, email={self._email.value})"


def _required(field: str, value: str) -> str:
    if value is None or not str(value).strip():
        msg = "All fields are required"
        raise ValidationError(msg, details={"field": field})
    return str(value).strip()
