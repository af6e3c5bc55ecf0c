"""Repository for contact-form messages."""

from __future__ import annotations

import logging

from showcase_admin.backend.repositories.base import BaseRepository
from showcase_admin.models.message import ContactMessage

logger = logging.getLogger(__name__)


class MessageRepository(BaseRepository[ContactMessage]):
    model_class = ContactMessage

    async def list_all(self) -> list[ContactMessage]:
        """Fetch all messages, newest first."""
        messages = self._parse_many(await self._client.get("/messages"))
        return sorted(
            messages,
            key=lambda message: message.created_at.timestamp() if message.created_at else 0.0,
            reverse=True,
        )

    async def delete(self, message_id: str) -> None:
        await self._client.delete(f"/messages/{message_id}")
        logger.info("Message deleted — id=%s", message_id)
