"""Async HTTP client for the content backend."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from showcase_admin.backend.errors import BackendError, BackendUnavailableError

if TYPE_CHECKING:
    from showcase_admin.config import ApiConfig

logger = logging.getLogger(__name__)


class BackendClient:
    """Manages the shared ``httpx.AsyncClient`` used by every repository."""

    def __init__(
        self,
        config: ApiConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Create the underlying HTTP client."""
        headers = {"Accept": "application/json"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url.rstrip("/"),
            headers=headers,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            transport=self._transport,
        )
        logger.info("Backend client created — base_url=%s", self._config.base_url)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("BackendClient not initialized — call initialize() first")
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body (None when empty).

        Raises ``BackendError`` for non-2xx responses and
        ``BackendUnavailableError`` when the backend cannot be reached.
        """
        started_at = time.monotonic()
        try:
            response = await self.http.request(method, path, json=json, params=params)
        except httpx.TransportError as exc:
            logger.warning("Backend unreachable — %s %s: %s", method, path, exc)
            raise BackendUnavailableError(
                f"Content backend is unreachable: {exc}"
            ) from exc

        logger.debug(
            "Backend request — %s %s status=%d duration_ms=%.0f",
            method,
            path,
            response.status_code,
            (time.monotonic() - started_at) * 1000,
        )
        if response.is_error:
            raise BackendError.from_response(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, *, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
