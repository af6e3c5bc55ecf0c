"""Changeset models — the minimal patch sent to the content backend."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class FieldChange(BaseModel):
    """A scalar or composite field whose working value differs from the snapshot."""

    field: str
    new_value: Any = None


class TranslationChange(BaseModel):
    """Changed fields of one language of the edited record."""

    record_id: str | None = None
    language: str
    changed_fields: dict[str, Any] = Field(default_factory=dict)


class ChildCreate(BaseModel):
    """A locally added child to be stored by the backend.

    ``local_id`` is the placeholder id the editor worked with; it is not part
    of ``payload`` when it is a pending id.
    """

    collection: str
    local_id: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)


class ChildUpdate(BaseModel):
    """Changed fields and translations of a stored child."""

    collection: str
    child_id: str
    changed_fields: dict[str, Any] = Field(default_factory=dict)
    changed_translations: dict[str, dict[str, Any]] = Field(default_factory=dict)


class ChildDelete(BaseModel):
    collection: str
    child_id: str


class Changeset(BaseModel):
    """Field updates plus child create/update/delete lists for one record."""

    record_type: str = ""
    record_id: str | None = None
    field_changes: list[FieldChange] = Field(default_factory=list)
    translation_changes: list[TranslationChange] = Field(default_factory=list)
    child_creates: list[ChildCreate] = Field(default_factory=list)
    child_updates: list[ChildUpdate] = Field(default_factory=list)
    child_deletes: list[ChildDelete] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.field_changes
            or self.translation_changes
            or self.child_creates
            or self.child_updates
            or self.child_deletes
        )

    def child_ids(self) -> tuple[set[str], set[str], set[str]]:
        """Return the (created, updated, deleted) child id sets."""
        created = {c.local_id for c in self.child_creates if c.local_id is not None}
        updated = {u.child_id for u in self.child_updates}
        deleted = {d.child_id for d in self.child_deletes}
        return created, updated, deleted

    def summary(self) -> str:
        """Return a compact count string for log lines."""
        return (
            f"fields={len(self.field_changes)} "
            f"translations={len(self.translation_changes)} "
            f"creates={len(self.child_creates)} "
            f"updates={len(self.child_updates)} "
            f"deletes={len(self.child_deletes)}"
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialise to the JSON body accepted by the backend."""
        return self.model_dump(mode="json", exclude={"record_type"})
