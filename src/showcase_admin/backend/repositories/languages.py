"""Repository for site languages."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from showcase_admin.backend.errors import BackendError
from showcase_admin.backend.repositories.base import BaseRepository
from showcase_admin.models.language import Language, static_languages

if TYPE_CHECKING:
    from showcase_admin.backend.client import BackendClient

logger = logging.getLogger(__name__)

_HTTP_NOT_FOUND = 404


class LanguageRepository(BaseRepository[Language]):
    """Language CRUD; listing falls back to configured codes when unsupported."""

    model_class = Language

    def __init__(self, client: BackendClient, fallback_codes: Sequence[str] = ()) -> None:
        super().__init__(client)
        self._fallback_codes = tuple(fallback_codes)

    async def list_all(self) -> list[Language]:
        try:
            languages = self._parse_many(await self._client.get("/languages"))
        except BackendError as exc:
            if exc.status_code != _HTTP_NOT_FOUND:
                raise
            logger.debug("Backend has no /languages route — using configured codes")
            return static_languages(self._fallback_codes)
        return languages or static_languages(self._fallback_codes)

    async def create(self, code: str, name: str) -> Language:
        data = await self._client.post("/languages", json={"code": code, "name": name})
        return self._parse(data)

    async def update(self, language_id: str, *, code: str, name: str) -> Language:
        data = await self._client.put(
            f"/languages/{language_id}", json={"code": code, "name": name}
        )
        return self._parse(data)

    async def delete(self, language_id: str) -> None:
        await self._client.delete(f"/languages/{language_id}")
