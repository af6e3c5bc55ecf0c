"""Projects routes — list, search, create, delete, and open an edit session."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Query, Request, Response, status

from showcase_admin.backend.repositories.projects import ProjectRepository
from showcase_admin.models.project import ProjectDraft
from showcase_admin.routes.sessions import open_session

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("")
async def list_projects(
    request: Request,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[dict[str, Any]]:
    repo = ProjectRepository(request.app.state.backend)
    projects = await repo.list_page(offset)
    return [project.model_dump(mode="json") for project in projects]


@router.get("/search")
async def search_projects(
    request: Request,
    query: Annotated[str, Query(min_length=1)],
) -> list[dict[str, Any]]:
    repo = ProjectRepository(request.app.state.backend)
    projects = await repo.search(query)
    return [project.model_dump(mode="json") for project in projects]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(request: Request, draft: ProjectDraft) -> dict[str, Any]:
    """Create a project outside the edit-session flow."""
    repo = ProjectRepository(request.app.state.backend)
    project = await repo.create(draft)
    return project.model_dump(mode="json")


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(request: Request, project_id: str) -> Response:
    repo = ProjectRepository(request.app.state.backend)
    await repo.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{project_id}/edit")
async def edit_project(request: Request, project_id: str) -> dict[str, Any]:
    """Start a project edit session and return its working copy."""
    repo = ProjectRepository(request.app.state.backend)
    return await open_session(request, repo, project_id)
