"""Web app entry point — FastAPI factory with backend client lifecycle."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from showcase_admin.backend import BackendClient, BackendError, BackendUnavailableError
from showcase_admin.config import load_settings
from showcase_admin.logging import configure_logging
from showcase_admin.routes import ROUTERS
from showcase_admin.services.sessions import SessionRegistry

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the backend client on startup and close it on shutdown."""
    settings = app.state.settings
    backend = BackendClient(settings.api)
    await backend.initialize()
    app.state.backend = backend
    app.state.sessions = SessionRegistry(ttl_seconds=settings.app.session_ttl_seconds)
    logger.info("Admin app started — env=%s", settings.app.env)
    try:
        yield
    finally:
        await backend.close()
        logger.info("Admin app shutdown complete")


async def _backend_error_handler(request: Request, exc: BackendError) -> JSONResponse:
    """Map backend failures on lifecycle routes to an HTTP error."""
    if isinstance(exc, BackendUnavailableError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif (
        exc.status_code is not None
        and status.HTTP_400_BAD_REQUEST
        <= exc.status_code
        < status.HTTP_500_INTERNAL_SERVER_ERROR
    ):
        code = exc.status_code
    else:
        code = status.HTTP_502_BAD_GATEWAY
    logger.warning(
        "Backend error — %s %s status=%s error=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)

    app = FastAPI(
        title="Showcase Admin",
        lifespan=lifespan,
        debug=settings.app.is_development,
    )
    app.state.settings = settings
    app.add_exception_handler(BackendError, _backend_error_handler)  # type: ignore[arg-type]
    for router in ROUTERS:
        app.include_router(router)
    return app


def main() -> None:
    """Run the admin app with uvicorn."""
    settings = load_settings()
    uvicorn.run(
        "showcase_admin.app:create_app",
        factory=True,
        host=settings.app.host,
        port=settings.app.port,
        reload=settings.app.is_development,
    )


if __name__ == "__main__":
    main()
