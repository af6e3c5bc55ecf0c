"""Repository for sector categories."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from showcase_admin.backend.repositories.base import BaseRepository
from showcase_admin.models.category import Category, CategoryDraft
from showcase_admin.schemas import CATEGORY_SCHEMA

if TYPE_CHECKING:
    from showcase_admin.diff import Changeset, Record

logger = logging.getLogger(__name__)


class CategoryRepository(BaseRepository[Category]):
    """Provide access to the categories endpoints."""

    model_class = Category
    schema = CATEGORY_SCHEMA

    async def list_all(self) -> list[Category]:
        return self._parse_many(await self._client.get("/categories"))

    async def get(self, slug: str) -> Category:
        """Fetch a category by slug (the backend also accepts its id)."""
        data = await self._client.get(f"/categories/{slug}")
        return Category.from_response(data or {})

    async def create(self, draft: CategoryDraft) -> Category:
        data = await self._client.post("/categories/new", json=draft.model_dump())
        category = Category.from_response(data or {})
        logger.info("Category created — id=%s", category.id)
        return category

    async def delete(self, category_id: str) -> None:
        await self._client.delete(f"/categories/{category_id}")
        logger.info("Category deleted — id=%s", category_id)

    async def fetch_record(
        self, record_id: str | None, *, languages: Sequence[str]
    ) -> Record:
        category = await self.get(record_id or "")
        return category.to_record(languages)

    async def apply_changeset(self, record_id: str | None, changeset: Changeset) -> Any:
        logger.info("Updating category — id=%s %s", record_id, changeset.summary())
        return await self._client.put(
            f"/categories/{record_id}", json=changeset.to_payload()
        )
