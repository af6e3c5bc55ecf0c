"""Health route — liveness and session count."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz(request: Request) -> dict[str, Any]:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "environment": settings.app.env,
        "backend_url": settings.api.base_url,
        "open_sessions": len(request.app.state.sessions),
    }
