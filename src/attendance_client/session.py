"""Client-side teacher session flow: restore on launch, login, logout."""

from __future__ import annotations

import logging
from typing import Any

from attendance_client.api_client import TeacherApiClient
from attendance_client.exceptions import ApiError, SessionCacheError
from attendance_client.session_cache import CachedSession, SessionCache

logger = logging.getLogger(__name__)

# Keys in the login response that belong to the session, not the teacher
_SESSION_KEYS = ("token", "expiresIn")


class TeacherSession:
    """Ties the API client to the local session cache.

    The teacher record and token are always written and removed
    together, through the cache's single document.
    """

    def __init__(self, client: TeacherApiClient, cache: SessionCache) -> None:
        self._client = client
        self._cache = cache
        self._current: CachedSession | None = None

    @property
    def current(self) -> CachedSession | None:
        return self._current

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    async def restore(self, verify: bool = False) -> CachedSession | None:
        """Resume the session saved by a previous launch.

        Parameters
        ----------
        verify:
            Also ask the server whether the token is still accepted. A
            token the server rejects (expired or invalid) is dropped; an
            unreachable server keeps the cached session.
        """
        cached = self._cache.load()
        if cached is None:
            self._current = None
            return None

        if verify:
            try:
                await self._client.get_my_profile(cached.token)
            except ApiError as e:
                if e.status_code == 401:
                    logger.info("Cached session rejected by server: %s", e.code)
                    self._drop_cache()
                    self._current = None
                    return None
                raise

        self._current = cached
        return cached

    async def login(self, email: str, password: str) -> CachedSession:
        """Log in and persist the teacher record with its token.

        Raises
        ------
        ApiError
            If the server rejects the credentials.
        SessionCacheError
            If the session could not be stored locally.
        """
        response = await self._client.login(email, password)
        token = response["token"]
        teacher = _strip_session_keys(response)
        self._current = self._cache.save(teacher, token)
        logger.info("Logged in as teacher %s", self._current.teacher_id)
        return self._current

    def logout(self) -> None:
        """End the session. Never raises, even if the cache cannot be cleared."""
        self._current = None
        self._drop_cache()

    def _drop_cache(self) -> None:
        try:
            self._cache.clear()
        except SessionCacheError:
            logger.exception("Failed to clear the session cache")


def _strip_session_keys(response: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in response.items() if key not in _SESSION_KEYS}
