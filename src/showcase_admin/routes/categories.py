"""Categories routes — list, create, delete, and open an edit session."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from showcase_admin.backend.repositories.categories import CategoryRepository
from showcase_admin.models.category import CategoryDraft
from showcase_admin.routes.sessions import open_session

router = APIRouter(prefix="/categories", tags=["categories"])
logger = logging.getLogger(__name__)


@router.get("")
async def list_categories(request: Request) -> list[dict[str, Any]]:
    repo = CategoryRepository(request.app.state.backend)
    categories = await repo.list_all()
    return [category.model_dump(mode="json") for category in categories]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(request: Request, draft: CategoryDraft) -> dict[str, Any]:
    """Create a category outside the edit-session flow."""
    repo = CategoryRepository(request.app.state.backend)
    category = await repo.create(draft)
    return category.model_dump(mode="json")


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(request: Request, category_id: str) -> Response:
    repo = CategoryRepository(request.app.state.backend)
    await repo.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{slug}/edit")
async def edit_category(request: Request, slug: str) -> dict[str, Any]:
    """Start a category edit session.

    The snapshot is fetched by slug, but changes are sent to the category id.
    """
    repo = CategoryRepository(request.app.state.backend)
    languages = request.app.state.settings.languages.codes
    category = await repo.get(slug)
    logger.debug("Category resolved — slug=%s id=%s", slug, category.id)
    return await open_session(
        request,
        repo,
        category.id or slug,
        record=category.to_record(languages),
    )
