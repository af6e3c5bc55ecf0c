"""User-facing notices reported after an edit or lifecycle action."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class NoticeVariant(StrEnum):
    DEFAULT = "default"
    INFO = "info"
    DESTRUCTIVE = "destructive"


class Notice(BaseModel):
    """A short title/description pair shown to the editor."""

    title: str
    description: str = ""
    variant: NoticeVariant = NoticeVariant.DEFAULT


def no_changes() -> Notice:
    return Notice(
        title="No changes",
        description="No changes to save",
        variant=NoticeVariant.INFO,
    )


def saved(label: str) -> Notice:
    return Notice(title="Success", description=f"{label} updated successfully")


def failed(message: str) -> Notice:
    return Notice(title="Error", description=message, variant=NoticeVariant.DESTRUCTIVE)
