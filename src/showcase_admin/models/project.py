"""Project document model — portfolio entries with an image gallery."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, field_validator

from showcase_admin.diff import Record
from showcase_admin.models.base import DocumentBase, coerce_translations

TRANSLATED_FIELDS = ("title", "short_description", "extra_description")


class ProjectImage(DocumentBase):
    url: str = ""
    is_main: bool = False
    display_order: int | None = None

    def to_record(self) -> Record:
        return Record(
            id=self.id,
            fields={
                "url": self.url,
                "is_main": self.is_main,
                "display_order": self.display_order,
            },
        )


class Project(DocumentBase):
    """A portfolio project belonging to one category."""

    category_id: str | None = ""
    creation_date: str | None = ""
    country: str | None = ""
    title: str | None = ""
    short_description: str | None = ""
    extra_description: str | None = ""
    translations: dict[str, dict[str, Any]] = Field(default_factory=dict)
    images: list[ProjectImage] = Field(default_factory=list)

    @field_validator("category_id", mode="before")
    @classmethod
    def _coerce_category_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("translations", mode="before")
    @classmethod
    def _clean_translations(cls, value: object) -> dict[str, dict[str, Any]]:
        return coerce_translations(value)

    @field_validator("images", mode="before")
    @classmethod
    def _images_as_list(cls, value: object) -> object:
        return [] if value is None else value

    def to_record(self, languages: Sequence[str]) -> Record:
        """Map to a diffable record.

        Projects stored before translations existed carry flat
        title/description fields; those seed every known language.
        """
        translations = self.translations
        if not translations:
            flat = {name: getattr(self, name) or "" for name in TRANSLATED_FIELDS}
            translations = {language: dict(flat) for language in languages}
        return Record(
            id=self.id,
            fields={
                "category_id": self.category_id,
                "creation_date": self.creation_date,
                "country": self.country,
            },
            translations=translations,
            children={"images": [image.to_record() for image in self.images]},
        )


class ProjectDraft(BaseModel):
    """Payload for creating a project; images are referenced by URL."""

    category_id: str = Field(min_length=1)
    country: str = ""
    creation_date: str = ""
    translations: dict[str, dict[str, str]] = Field(default_factory=dict)
    image_urls: list[str] = Field(default_factory=list)
    main_image_index: int = 0
