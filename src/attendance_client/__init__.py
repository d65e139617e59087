"""Device-side client for the attendance teacher API."""

from attendance_client.api_client import TeacherApiClient
from attendance_client.exceptions import (
    ApiConnectionError,
    ApiError,
    ClientError,
    SessionCacheError,
)
from attendance_client.session import TeacherSession
from attendance_client.session_cache import CachedSession, SessionCache

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "CachedSession",
    "ClientError",
    "SessionCache",
    "SessionCacheError",
    "TeacherApiClient",
    "TeacherSession",
]
