"""Repository for portfolio projects and their image galleries."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from showcase_admin.backend.repositories.base import BaseRepository
from showcase_admin.models.project import Project, ProjectDraft
from showcase_admin.schemas import PROJECT_SCHEMA

if TYPE_CHECKING:
    from showcase_admin.diff import Changeset, Record

logger = logging.getLogger(__name__)


class ProjectRepository(BaseRepository[Project]):
    """Provide access to the projects endpoints."""

    model_class = Project
    schema = PROJECT_SCHEMA

    async def list_page(self, offset: int = 0) -> list[Project]:
        """Fetch one page of projects starting at ``offset``."""
        data = await self._client.get("/api/projects", params={"offset": offset})
        return self._parse_many(data)

    async def search(self, query: str) -> list[Project]:
        data = await self._client.get("/api/projects/search", params={"query": query})
        return self._parse_many(data)

    async def get(self, project_id: str) -> Project:
        data = await self._client.get(f"/api/projects/{project_id}")
        if isinstance(data, dict) and isinstance(data.get("project"), dict):
            data = data["project"]
        return self._parse(data or {})

    async def create(self, draft: ProjectDraft) -> Project:
        data = await self._client.post("/api/projects/create", json=draft.model_dump())
        project = self._parse(data or {})
        logger.info("Project created — id=%s", project.id)
        return project

    async def delete(self, project_id: str) -> None:
        await self._client.delete(f"/api/projects/delete/{project_id}")
        logger.info("Project deleted — id=%s", project_id)

    async def fetch_record(
        self, record_id: str | None, *, languages: Sequence[str]
    ) -> Record:
        project = await self.get(record_id or "")
        return project.to_record(languages)

    async def apply_changeset(self, record_id: str | None, changeset: Changeset) -> Any:
        logger.info("Updating project — id=%s %s", record_id, changeset.summary())
        return await self._client.put(
            f"/api/projects/{record_id}", json=changeset.to_payload()
        )
