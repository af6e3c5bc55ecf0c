"""Base model shared by all documents served by the content backend."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def coerce_translations(raw: object) -> dict[str, dict[str, Any]]:
    """Keep only well-formed ``{language: {field: value}}`` entries.

    Legacy records return ``null`` or malformed translation blocks; those
    are dropped instead of failing validation.
    """
    if not isinstance(raw, dict):
        return {}
    return {
        str(language): dict(values)
        for language, values in raw.items()
        if isinstance(values, dict)
    }


class DocumentBase(BaseModel):
    """Fields common to every backend document."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
