"""Messages routes — contact-form inbox."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response, status

from showcase_admin.backend.repositories.messages import MessageRepository

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("")
async def list_messages(request: Request) -> list[dict[str, Any]]:
    repo = MessageRepository(request.app.state.backend)
    messages = await repo.list_all()
    return [message.model_dump(mode="json") for message in messages]


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(request: Request, message_id: str) -> Response:
    repo = MessageRepository(request.app.state.backend)
    await repo.delete(message_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
