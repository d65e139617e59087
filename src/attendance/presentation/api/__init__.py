"""REST API presentation layer for the attendance backend.

Structure:
    api/
    ├── app.py               # FastAPI application factory
    ├── dependencies.py      # Dependency injection
    ├── exception_handlers.py
    ├── routers/             # API route handlers
    └── schemas/             # Pydantic request/response schemas
"""

from attendance.presentation.api.app import create_app

__all__ = ["create_app"]
