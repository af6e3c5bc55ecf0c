"""Contact message document model."""

from __future__ import annotations

from showcase_admin.models.base import DocumentBase


class ContactMessage(DocumentBase):
    """A message submitted through the public contact form."""

    name: str = ""
    email: str = ""
    message: str = ""
