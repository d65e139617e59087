"""SQLAlchemy implementation of TeacherRepository."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, TypeVar, Union

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession

from attendance.domain.shared.exceptions import StoreUnavailableError
from attendance.domain.teacher import (
    DuplicateEmailError,
    DuplicateEmployeeIdError,
    Email,
    Teacher,
    TeacherRepository,
)
from attendance.infrastructure.persistence.sqlalchemy.models import (
    EMAIL_CONSTRAINT,
    EMPLOYEE_ID_CONSTRAINT,
    TeacherModel,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 5.0


class TeacherRepositorySQLAlchemy(TeacherRepository):
    """SQLAlchemy implementation of the TeacherRepository interface.

    Every database round trip is bounded by ``timeout_seconds``. Timeouts,
    pool exhaustion and connection-level failures are raised as
    ``StoreUnavailableError``.
    """

    def __init__(
        self,
        session: AsyncSession,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session
        self._timeout = timeout_seconds

    async def find_by_id(self, teacher_id: int) -> Teacher | None:
        stmt = select(TeacherModel).where(TeacherModel.id == teacher_id)
        return await self._find_one(stmt, "find_by_id")

    async def find_by_email(self, email: Union[str, Email]) -> Teacher | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        stmt = select(TeacherModel).where(TeacherModel.email == email_value)
        return await self._find_one(stmt, "find_by_email")

    async def find_by_employee_id(self, employee_id: str) -> Teacher | None:
        stmt = select(TeacherModel).where(
            TeacherModel.employee_id == employee_id.strip(),
        )
        return await self._find_one(stmt, "find_by_employee_id")

    async def add(self, teacher: Teacher) -> Teacher:
        if teacher.is_persisted:
            msg = f"Teacher {teacher.id} is already persisted"
            raise ValueError(msg)

        model = self._map_to_model(teacher)
        self._session.add(model)

        try:
            await self._guard(self._session.flush(), "add")
        except IntegrityError as e:
            mapped = self._map_integrity_error(e, teacher)
            if mapped is None:
                raise
            raise mapped from e

        logger.info("Created teacher: %s", model.id)
        return self._map_to_domain(model)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(TeacherModel)
        result = await self._guard(self._session.execute(stmt), "count")
        return result.scalar_one()

    async def _find_one(self, stmt: Select[Any], operation: str) -> Teacher | None:
        result = await self._guard(self._session.execute(stmt), operation)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def _guard(self, awaitable: Awaitable[T], operation: str) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout)
        except (asyncio.TimeoutError, PoolTimeoutError) as e:
            logger.error(
                "Teacher store timed out after %.1fs during %s",
                self._timeout,
                operation,
            )
            raise StoreUnavailableError(
                details={"operation": operation, "reason": "timeout"},
            ) from e
        except (OperationalError, InterfaceError) as e:
            logger.error("Teacher store unavailable during %s: %s", operation, e)
            raise StoreUnavailableError(
                details={"operation": operation, "reason": str(e.orig)},
            ) from e

    def _map_integrity_error(
        self,
        error: IntegrityError,
        teacher: Teacher,
    ) -> Exception | None:
        # Postgres names the constraint; SQLite names the column
        message = str(error.orig).lower()
        if EMPLOYEE_ID_CONSTRAINT in message:
            duplicate = "employee_id"
        elif EMAIL_CONSTRAINT in message:
            duplicate = "email"
        elif "teachers.employee_id" in message:
            duplicate = "employee_id"
        elif "teachers.email" in message:
            duplicate = "email"
        else:
            return None

        logger.info("Insert rejected on %s constraint", duplicate)
        if duplicate == "employee_id":
            return DuplicateEmployeeIdError(teacher.employee_id)
        return DuplicateEmailError(teacher.email)

    def _map_to_domain(self, model: TeacherModel) -> Teacher:
        return Teacher.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            employee_id=model.employee_id,
            department=model.department,
            created_at=model.created_at,
        )

    def _map_to_model(self, teacher: Teacher) -> TeacherModel:
        return TeacherModel(
            name=teacher.name,
            email=teacher.email,
            password_hash=teacher.password_hash,
            employee_id=teacher.employee_id,
            department=teacher.department,
            created_at=teacher.created_at,
        )
