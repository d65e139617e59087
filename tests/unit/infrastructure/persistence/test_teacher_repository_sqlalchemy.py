"""Tests for TeacherRepositorySQLAlchemy against a real SQLite database."""

import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from attendance.domain.shared.exceptions import StoreUnavailableError
from attendance.domain.teacher import (
    DuplicateEmailError,
    DuplicateEmployeeIdError,
    Email,
    Teacher,
)
from attendance.infrastructure.persistence.sqlalchemy import (
    TeacherRepositorySQLAlchemy,
)

HASH = "$2b$04$abcdefghijklmnopqrstuuJ7Vg0wRQk2l7x8y9z0a1b2c3d4e5f6g"


def _new_teacher(
    email: str = "a@x.com",
    employee_id: str = "E1",
    name: str = "A. Smith",
) -> Teacher:
    return Teacher.create(
        name=name,
        email=email,
        password_hash=HASH,
        employee_id=employee_id,
        department="Class 5",
    )


class TestTeacherRepositoryAdd:
    async def test_add_assigns_id(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)

        saved = await repo.add(_new_teacher())

        assert saved.id is not None
        assert saved.is_persisted
        assert saved.email == "a@x.com"
        assert saved.password_hash == HASH

    async def test_ids_are_unique(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)

        first = await repo.add(_new_teacher("a@x.com", "E1"))
        second = await repo.add(_new_teacher("b@x.com", "E2"))

        assert first.id != second.id
        assert await repo.count() == 2

    async def test_add_persisted_teacher_raises(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)
        saved = await repo.add(_new_teacher())

        with pytest.raises(ValueError, match="already persisted"):
            await repo.add(saved)

    async def test_duplicate_email_violates_constraint(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)
        await repo.add(_new_teacher("a@x.com", "E1"))

        with pytest.raises(DuplicateEmailError) as exc_info:
            await repo.add(_new_teacher("A@X.COM", "E2"))

        assert isinstance(exc_info.value.__cause__, IntegrityError)

    async def test_duplicate_employee_id_violates_constraint(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)
        await repo.add(_new_teacher("a@x.com", "E1"))

        with pytest.raises(DuplicateEmployeeIdError):
            await repo.add(_new_teacher("b@x.com", "E1"))

    async def test_employee_id_is_case_sensitive(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)
        await repo.add(_new_teacher("a@x.com", "E1"))

        saved = await repo.add(_new_teacher("b@x.com", "e1"))

        assert saved.employee_id == "e1"

    async def test_second_session_rejected_by_constraint(self, session_maker):
        """A session that passed its own pre-check still loses to the constraint."""
        async with session_maker() as first, session_maker() as second:
            first_repo = TeacherRepositorySQLAlchemy(first)
            second_repo = TeacherRepositorySQLAlchemy(second)

            # Both pre-checks see an empty table
            assert await first_repo.find_by_email("a@x.com") is None
            assert await second_repo.find_by_email("a@x.com") is None
            await first.rollback()
            await second.rollback()

            await first_repo.add(_new_teacher("a@x.com", "E1"))
            await first.commit()

            with pytest.raises(DuplicateEmailError):
                await second_repo.add(_new_teacher("a@x.com", "E2"))

        async with session_maker() as session:
            assert await TeacherRepositorySQLAlchemy(session).count() == 1


class TestTeacherRepositoryFind:
    async def test_find_by_id(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)
        saved = await repo.add(_new_teacher())

        found = await repo.find_by_id(saved.id)

        assert found == saved
        assert found.name == "A. Smith"
        assert found.created_at.tzinfo is not None

    async def test_find_by_id_missing(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)

        assert await repo.find_by_id(999) is None

    async def test_find_by_email_is_case_insensitive(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)
        saved = await repo.add(_new_teacher("a@x.com"))

        assert await repo.find_by_email("A@X.COM") == saved
        assert await repo.find_by_email(Email("a@x.com")) == saved

    async def test_find_by_email_missing(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)

        assert await repo.find_by_email("nobody@x.com") is None

    async def test_find_by_employee_id(self, db_session):
        repo = TeacherRepositorySQLAlchemy(db_session)
        saved = await repo.add(_new_teacher(employee_id="E1"))

        assert await repo.find_by_employee_id(" E1 ") == saved
        assert await repo.find_by_employee_id("E2") is None

    async def test_committed_data_visible_to_new_session(self, session_maker):
        async with session_maker() as session:
            saved = await TeacherRepositorySQLAlchemy(session).add(_new_teacher())
            await session.commit()

        async with session_maker() as session:
            found = await TeacherRepositorySQLAlchemy(session).find_by_id(saved.id)

        assert found is not None
        assert found.email == "a@x.com"


class TestTeacherRepositoryStoreFailures:
    """Timeouts and connection failures become StoreUnavailableError."""

    async def test_timeout_raises_store_unavailable(self):
        async def hang(*args, **kwargs):
            await asyncio.sleep(10)

        session = AsyncMock(spec=AsyncSession)
        session.execute.side_effect = hang
        repo = TeacherRepositorySQLAlchemy(session, timeout_seconds=0.01)

        with pytest.raises(StoreUnavailableError) as exc_info:
            await repo.find_by_id(1)

        assert exc_info.value.details["reason"] == "timeout"
        assert exc_info.value.details["operation"] == "find_by_id"

    async def test_operational_error_raises_store_unavailable(self):
        session = AsyncMock(spec=AsyncSession)
        session.execute.side_effect = OperationalError(
            "SELECT 1",
            {},
            Exception("database is locked"),
        )
        repo = TeacherRepositorySQLAlchemy(session)

        with pytest.raises(StoreUnavailableError) as exc_info:
            await repo.find_by_email("a@x.com")

        assert "database is locked" in exc_info.value.details["reason"]
        # The public message never carries driver text
        assert "locked" not in exc_info.value.message

    async def test_unrelated_integrity_error_propagates(self):
        session = AsyncMock(spec=AsyncSession)
        session.add = lambda model: None
        session.flush.side_effect = IntegrityError(
            "INSERT",
            {},
            Exception("NOT NULL constraint failed: teachers.department"),
        )
        repo = TeacherRepositorySQLAlchemy(session)

        with pytest.raises(IntegrityError):
            await repo.add(_new_teacher())

    @pytest.mark.parametrize(
        ("driver_message", "expected"),
        [
            (
                'duplicate key value violates unique constraint "uq_teachers_email"\n'
                "DETAIL:  Key (email)=(employee_id@x.com) already exists.",
                DuplicateEmailError,
            ),
            (
                "duplicate key value violates unique constraint "
                '"uq_teachers_employee_id"',
                DuplicateEmployeeIdError,
            ),
        ],
    )
    async def test_named_constraint_is_mapped(self, driver_message, expected):
        session = AsyncMock(spec=AsyncSession)
        session.add = lambda model: None
        session.flush.side_effect = IntegrityError(
            "INSERT",
            {},
            Exception(driver_message),
        )
        repo = TeacherRepositorySQLAlchemy(session)

        with pytest.raises(expected):
            await repo.add(_new_teacher())
