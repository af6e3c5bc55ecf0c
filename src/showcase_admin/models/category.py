"""Category document model — sector taxonomy with per-language names."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator

from showcase_admin.diff import Record
from showcase_admin.models.base import DocumentBase, coerce_translations


class Category(DocumentBase):
    """A sector category with an icon and translated name/description."""

    slug: str = ""
    icon_svg_url: str | None = ""
    name: str = ""
    description: str | None = ""
    project_count: int = 0
    translations: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("translations", mode="before")
    @classmethod
    def _clean_translations(cls, value: object) -> dict[str, dict[str, Any]]:
        return coerce_translations(value)

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> Category:
        """Accept both ``{"category": {...}}`` and a bare category body."""
        body = payload.get("category", payload) if isinstance(payload, dict) else {}
        return cls.model_validate(body)

    def to_record(self, languages: Sequence[str]) -> Record:
        translations = self.translations
        if not translations and self.name:
            default_language = languages[0] if languages else "en"
            translations = {
                default_language: {"name": self.name, "description": self.description}
            }
        return Record(
            id=self.id,
            fields={"icon_svg_url": self.icon_svg_url},
            translations=translations,
        )


class CategoryDraft(BaseModel):
    """Payload for creating a category."""

    name: str = Field(min_length=2)
    description: str = ""
    icon_svg_url: str = Field(min_length=2)
