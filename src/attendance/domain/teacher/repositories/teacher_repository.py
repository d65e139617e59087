"""Teacher repository interface.

This is the only persistence contract the identity core depends on:
unique-key lookups, lookup by id, and insert-with-constraint.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from attendance.domain.teacher.aggregates.teacher import Teacher
from attendance.domain.teacher.value_objects.email import Email


class TeacherRepository(ABC):
    """Repository interface for Teacher aggregates.

    Implementations must enforce uniqueness of ``email`` and
    ``employee_id`` in the store itself. A pre-check in the caller is a
    courtesy; the constraint violation raised by ``add`` is authoritative.
    Store timeouts and outages must surface as ``StoreUnavailableError``.
    """

    @abstractmethod
    async def find_by_id(self, teacher_id: int) -> Optional[Teacher]:
        """Find a teacher by surrogate id."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Teacher]:
        """Find a teacher by (normalized) email address."""

    @abstractmethod
    async def find_by_employee_id(self, employee_id: str) -> Optional[Teacher]:
        """Find a teacher by employee id."""

    @abstractmethod
    async def add(self, teacher: Teacher) -> Teacher:
        """
        Insert a new teacher.

        Returns
        -------
        The persisted teacher with its assigned ``id``.

        Raises
        ------
        DuplicateEmailError
            If the store rejects the insert on the email constraint
        DuplicateEmployeeIdError
            If the store rejects the insert on the employee id constraint
        """

    @abstractmethod
    async def count(self) -> int:
        """Count registered teachers."""
