"""Exceptions raised by the device-side client."""


class ClientError(Exception):
    """Base class for client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(ClientError):
    """The server answered with a non-2xx status.

    ``message`` is the server's user-facing text, suitable for display.
    """

    def __init__(self, status_code: int, message: str, code: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class ApiConnectionError(ClientError):
    """The server could not be reached or did not answer in time."""


class SessionCacheError(ClientError):
    """The local session document could not be written or removed."""
