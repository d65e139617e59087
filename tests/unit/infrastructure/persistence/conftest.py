"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh SQLite database file under pytest's tmp_path,
accessed through aiosqlite like the default deployment.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from attendance.infrastructure.persistence.sqlalchemy.models import Base


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Create a file-backed SQLite database with the schema applied."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'attendance.db'}",
        echo=False,
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    """Provide a session for the test; uncommitted work is rolled back."""
    async with session_maker() as session:
        yield session
