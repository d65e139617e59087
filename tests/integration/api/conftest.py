"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from attendance.presentation.api.app import API_PREFIX, create_app
from attendance_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"


@pytest.fixture
def api_prefix() -> str:
    """Get the API prefix for building URLs."""
    return API_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings backed by a throwaway SQLite file."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'attendance.db'}",
        password_hash_rounds=4,  # Low rounds for fast tests
        api_host="127.0.0.1",
        api_port=3000,
        api_debug=True,
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client; the lifespan creates the schema."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def hardened_client(api_settings):
    """Test client with token-checked profile lookups."""
    settings = api_settings.model_copy(update={"profile_requires_token": True})
    app = create_app(settings=settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def registration_data() -> dict:
    """Registration body from the mobile client."""
    return {
        "name": "A. Smith",
        "email": "a@x.com",
        "password": "pw123456",
        "employeeId": "E1",
        "department": "Class 5",
    }
