"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. ATTENDANCE_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. ATTENDANCE_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("ATTENDANCE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Server configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security (MUST be set - app fails without it)
    jwt_secret_key: SecretStr  # Secret for signing session tokens

    # Application
    app_name: str = "Attendance"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/attendance.db"
    store_timeout_seconds: float = 5.0

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_debug: bool = False
    api_cors_origins: str = ""  # Empty = no CORS allowed

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # Session tokens
    jwt_expire_hours: int = 24

    # Password hashing
    password_hash_rounds: int = 12
    password_min_length: int = 8

    # Profile lookup by bare teacherId is the legacy contract; set to
    # true to demand a matching bearer token as well.
    profile_requires_token: bool = False

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


class ClientSettings(BaseSettings):
    """Device-side client configuration (ATTENDANCE_CLIENT_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="ATTENDANCE_CLIENT_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = "http://localhost:3000/api"
    timeout_seconds: float = 30.0
    session_file: Path = Path.home() / ".attendance" / "session.json"


@lru_cache()
def get_settings() -> Settings:
    """Return cached server settings.

    The required jwt_secret_key must be provided via environment
    variables or a .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


@lru_cache()
def get_client_settings() -> ClientSettings:
    """Return cached client settings."""
    return ClientSettings()


def clear_settings_cache() -> None:
    """Clear the settings caches (useful for tests)."""
    get_settings.cache_clear()
    get_client_settings.cache_clear()
