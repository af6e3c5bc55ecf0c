"""About-Us route — open an edit session on the singleton document."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from showcase_admin.backend.repositories.about import AboutUsRepository
from showcase_admin.routes.sessions import open_session

router = APIRouter(tags=["about"])


@router.get("/about")
async def edit_about(request: Request) -> dict[str, Any]:
    """Start an About-Us edit session and return its working copy."""
    repo = AboutUsRepository(request.app.state.backend)
    return await open_session(request, repo, None)
