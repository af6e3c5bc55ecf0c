"""Record model — the generic nested shape every editable document is diffed as."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from showcase_admin.diff.schema import FieldSchema

PENDING_PREFIX = "new-"


def new_pending_id(prefix: str = PENDING_PREFIX) -> str:
    """Return a placeholder id for a child that the backend has not stored yet."""
    return f"{prefix}{uuid.uuid4().hex}"


class Record(BaseModel):
    """An entity with scalar fields, per-language translations and child collections.

    ``translations`` maps a language code to ``{field_name: value}``;
    ``children`` maps a collection name to an ordered list of child records.
    """

    id: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)
    translations: dict[str, dict[str, Any]] = Field(default_factory=dict)
    children: dict[str, list[Record]] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("fields", "translations", "children", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return {} if value is None else value

    def snapshot(self) -> Record:
        """Return a deep, independent copy of this record."""
        return self.model_copy(deep=True)

    def child(self, collection: str, child_id: str) -> Record | None:
        """Find a child by id, or None when it is not in the collection."""
        for item in self.children.get(collection, []):
            if item.id == child_id:
                return item
        return None


def backfill_translations(
    record: Record,
    languages: Iterable[str],
    schema: FieldSchema,
) -> Record:
    """Return a copy where every language carries every translatable field.

    Missing languages and missing fields are filled with empty strings;
    existing values are kept as they are. Child collections declared by the
    schema are filled the same way with their own schema.
    """
    codes = list(languages)
    filled = record.snapshot()
    _backfill_in_place(filled, codes, schema)
    return filled


def _backfill_in_place(record: Record, languages: list[str], schema: FieldSchema) -> None:
    if schema.translatable_fields:
        for language in languages:
            values = record.translations.setdefault(language, {})
            for name in schema.translatable_fields:
                if values.get(name) is None:
                    values[name] = ""
    for collection, child_schema in schema.children.items():
        for item in record.children.get(collection, []):
            _backfill_in_place(item, languages, child_schema)
