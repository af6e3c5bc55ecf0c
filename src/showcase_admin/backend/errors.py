"""Errors raised when the content backend rejects or cannot serve a request."""

from __future__ import annotations

from typing import Any

import httpx


class BackendError(Exception):
    """A non-2xx response from the content backend."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data

    @classmethod
    def from_response(cls, response: httpx.Response) -> BackendError:
        """Build an error from a failed response, using its JSON body when present."""
        try:
            data = response.json()
        except ValueError:
            data = response.text or None

        message = None
        if isinstance(data, dict):
            for key in ("message", "error", "detail"):
                value = data.get(key)
                if isinstance(value, str) and value:
                    message = value
                    break
        elif isinstance(data, str) and data:
            message = data
        if message is None:
            message = f"Backend request failed with status {response.status_code}"
        return cls(message, status_code=response.status_code, data=data)


class BackendUnavailableError(BackendError):
    """The backend could not be reached (connection refused, timeout, ...)."""
