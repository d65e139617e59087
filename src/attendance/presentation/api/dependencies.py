"""FastAPI dependency injection for the attendance API.

Provides dependencies for:
- Settings (the explicit configuration object bound to the app)
- Database sessions
- Password hashing and session token services
- The teacher identity service
- The authenticated teacher's token claims
"""

import logging
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from attendance.application.services import TeacherIdentityService
from attendance.domain.teacher import InvalidSessionTokenError
from attendance.infrastructure.persistence.sqlalchemy.repositories import (
    TeacherRepositorySQLAlchemy,
)
from attendance_auth import PasswordHashingService, SessionTokenService, TokenPayload
from attendance_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for bearer session tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------


def get_api_settings(request: Request) -> Settings:
    """Return the settings object the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session
# -----------------------------------------------------------------------------


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the shared async database engine for an application.

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    url = settings.database_url
    connect_args: dict = {}

    if url.startswith("sqlite"):
        # Ensure data directory exists for SQLite
        db_path = url.split("///")[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        # sqlite3 busy timeout, so a locked database fails instead of hanging
        connect_args["timeout"] = settings.store_timeout_seconds
        return create_async_engine(url, echo=False, connect_args=connect_args)

    return create_async_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
        pool_timeout=settings.store_timeout_seconds,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_token_service(settings: SettingsDep) -> SessionTokenService:
    """Get session token service configured with API settings."""
    return SessionTokenService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_hours=settings.jwt_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service configured with API settings."""
    return PasswordHashingService(
        rounds=settings.password_hash_rounds,
        min_length=settings.password_min_length,
    )


async def get_identity_service(
    session: DBSession,
    settings: SettingsDep,
    token_service: SessionTokenService = Depends(get_token_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> TeacherIdentityService:
    """
    Get the teacher identity service with all dependencies.

    This service orchestrates registration, login and profile lookup.
    """
    teacher_repo = TeacherRepositorySQLAlchemy(
        session,
        timeout_seconds=settings.store_timeout_seconds,
    )

    return TeacherIdentityService(
        teacher_repository=teacher_repo,
        password_service=password_service,
        token_service=token_service,
    )


# Type alias for injected identity service
IdentityService = Annotated[TeacherIdentityService, Depends(get_identity_service)]


# -----------------------------------------------------------------------------
# Current Teacher (session token)
# -----------------------------------------------------------------------------


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """Return the raw bearer token from the Authorization header, if any."""
    if credentials is None:
        return None
    return credentials.credentials


OptionalBearerToken = Annotated[str | None, Depends(get_bearer_token)]


def get_current_claims(
    identity_service: IdentityService,
    token: OptionalBearerToken,
) -> TokenPayload:
    """
    FastAPI dependency returning the verified claims of the caller's token.

    Raises
    ------
    InvalidSessionTokenError
        If no token is present, or it is forged or malformed
    SessionTokenExpiredError
        If the token is authentic but expired
    """
    if token is None:
        msg = "missing bearer token"
        raise InvalidSessionTokenError(msg)
    return identity_service.verify_token(token)


CurrentClaims = Annotated[TokenPayload, Depends(get_current_claims)]
