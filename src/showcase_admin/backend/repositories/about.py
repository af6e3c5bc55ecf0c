"""Repository for the singleton About-Us document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from showcase_admin.backend.repositories.base import BaseRepository
from showcase_admin.models.about import AboutUs
from showcase_admin.schemas import ABOUT_US_SCHEMA

if TYPE_CHECKING:
    from showcase_admin.diff import Changeset, Record

logger = logging.getLogger(__name__)


class AboutUsRepository(BaseRepository[AboutUs]):
    """Read the About-Us sections and apply section changesets."""

    model_class = AboutUs
    schema = ABOUT_US_SCHEMA

    async def get(self) -> AboutUs:
        data = await self._client.get("/api/aboutus/admin")
        return self._parse(data or {})

    async def fetch_record(
        self, record_id: str | None = None, *, languages: Sequence[str]
    ) -> Record:
        """Fetch the singleton record; ``record_id`` is ignored."""
        about = await self.get()
        return about.to_record(languages)

    async def apply_changeset(self, record_id: str | None, changeset: Changeset) -> Any:
        logger.info("Updating About-Us sections — %s", changeset.summary())
        return await self._client.put(
            "/api/aboutus/content-sections", json=changeset.to_payload()
        )
