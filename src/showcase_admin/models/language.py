"""Language document model."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from showcase_admin.models.base import DocumentBase

LANGUAGE_NAMES = {"en": "English", "fr": "French", "tr": "Turkish"}


class Language(DocumentBase):
    code: str
    name: str = ""


class LanguageDraft(BaseModel):
    """Payload for creating or renaming a language."""

    code: str = Field(min_length=2)
    name: str = Field(min_length=2)


def static_languages(codes: Iterable[str]) -> list[Language]:
    """Build the language list from configured codes (ids are 1-based positions)."""
    return [
        Language(id=str(position), code=code, name=LANGUAGE_NAMES.get(code, code))
        for position, code in enumerate(codes, start=1)
    ]
