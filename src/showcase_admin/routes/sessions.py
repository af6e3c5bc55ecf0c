"""Edit-session routes — mutate the working copy, preview and submit changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Request, Response, status

from showcase_admin.diff import Record
from showcase_admin.services.sessions import EditSession, UnknownCollectionError

if TYPE_CHECKING:
    from showcase_admin.backend.repositories.base import EditableRepository
    from showcase_admin.services.sessions import SessionRegistry

router = APIRouter(prefix="/sessions", tags=["sessions"])


def session_view(session: EditSession) -> dict[str, Any]:
    """Convert a session to a JSON-friendly dict."""
    return {
        "session_id": session.id,
        "record_type": session.record_type,
        "record_id": session.record_id,
        "working": session.working.model_dump(mode="json"),
    }


async def open_session(
    request: Request,
    repository: EditableRepository,
    record_id: str | None,
    *,
    record: Record | None = None,
) -> dict[str, Any]:
    """Start an edit session for a record and register it on the app.

    Pass ``record`` when the caller already fetched the snapshot.
    """
    languages = request.app.state.settings.languages.codes
    registry: SessionRegistry = request.app.state.sessions
    if record is None:
        session = await EditSession.start(repository, record_id, languages=languages)
    else:
        session = EditSession.open(
            repository, record, record_id=record_id, languages=languages
        )
    registry.add(session)
    return session_view(session)


def _get_session(request: Request, session_id: str) -> EditSession:
    session = request.app.state.sessions.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Edit session {session_id} not found",
        )
    return session


@router.put("/{session_id}")
async def replace_working(
    request: Request,
    session_id: str,
    record: Record,
) -> dict[str, Any]:
    """Replace the session's working copy with the submitted record."""
    session = _get_session(request, session_id)
    session.replace_working(record)
    return session_view(session)


@router.post("/{session_id}/children/{collection}", status_code=status.HTTP_201_CREATED)
async def add_child(
    request: Request,
    session_id: str,
    collection: str,
    fields: Annotated[dict[str, Any] | None, Body()] = None,
) -> dict[str, Any]:
    """Append a pending child to a collection of the working copy."""
    session = _get_session(request, session_id)
    try:
        child = session.add_child(collection, **(fields or {}))
    except UnknownCollectionError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown collection {collection}",
        ) from exc
    return {"child": child.model_dump(mode="json")}


@router.delete(
    "/{session_id}/children/{collection}/{child_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_child(
    request: Request,
    session_id: str,
    collection: str,
    child_id: str,
) -> Response:
    """Remove a child from the working copy."""
    session = _get_session(request, session_id)
    try:
        removed = session.remove_child(collection, child_id)
    except UnknownCollectionError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown collection {collection}",
        ) from exc
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Child {child_id} not found in {collection}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{session_id}/changes")
async def preview_changes(request: Request, session_id: str) -> dict[str, Any]:
    """Return the changeset that a submit would send."""
    changeset = _get_session(request, session_id).changes()
    return {"is_empty": changeset.is_empty, "changes": changeset.model_dump(mode="json")}


@router.post("/{session_id}/submit")
async def submit(request: Request, session_id: str) -> dict[str, Any]:
    """Diff the working copy against the snapshot and send the changes."""
    session = _get_session(request, session_id)
    result = await session.submit()
    if session.closed:
        request.app.state.sessions.discard(session_id)
    return {
        "notice": result.notice.model_dump(mode="json"),
        "submitted": result.submitted,
        "saved": result.saved,
        "changes": result.changeset.model_dump(mode="json"),
        "working": None if session.closed else session.working.model_dump(mode="json"),
    }


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def discard(request: Request, session_id: str) -> Response:
    """Discard a session without sending anything."""
    if not request.app.state.sessions.discard(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Edit session {session_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
