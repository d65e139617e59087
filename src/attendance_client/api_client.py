"""HTTP client for the attendance teacher API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from attendance_client.exceptions import ApiConnectionError, ApiError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Request failed"


class TeacherApiClient:
    """Async wrapper around the ``/teachers`` endpoints.

    Responses are returned as the decoded JSON objects (camelCase keys).
    Any non-2xx response raises ``ApiError`` carrying the server's
    ``message``; transport failures raise ``ApiConnectionError``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> TeacherApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        employee_id: str,
        department: str,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/teachers/register",
            json={
                "name": name,
                "email": email,
                "password": password,
                "employeeId": employee_id,
                "department": department,
            },
        )

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and return the teacher record including ``token``."""
        return await self._request(
            "POST",
            "/teachers/login",
            json={"email": email, "password": password},
        )

    async def get_profile(
        self,
        teacher_id: int,
        token: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            "/teachers/profile",
            params={"teacherId": teacher_id},
            token=token,
        )

    async def get_my_profile(self, token: str) -> dict[str, Any]:
        return await self._request("GET", "/teachers/me", token=token)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        token: str | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        client = await self._get_client()
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out", path)
            msg = "The server did not respond in time"
            raise ApiConnectionError(msg) from e
        except httpx.TransportError as e:
            logger.warning("Request to %s failed: %s", path, e)
            msg = "Could not reach the server"
            raise ApiConnectionError(msg) from e

        if response.is_success:
            return response.json()

        raise _to_api_error(response)


def _to_api_error(response: httpx.Response) -> ApiError:
    message = GENERIC_ERROR_MESSAGE
    code = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        if isinstance(body.get("message"), str):
            message = body["message"]
        if isinstance(body.get("code"), str):
            code = body["code"]
    logger.debug("API error %d (%s): %s", response.status_code, code, message)
    return ApiError(response.status_code, message, code)
