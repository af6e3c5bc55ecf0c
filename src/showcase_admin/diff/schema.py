"""Field schemas — the static list of compared fields per record type."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from showcase_admin.diff.record import PENDING_PREFIX


@dataclass(frozen=True)
class FieldSchema:
    """Describe which parts of a record type the diff engine compares.

    ``composite_fields`` hold serialised key/value structures (for example a
    JSON object of social links) and are compared by canonical form.
    ``placeholder_fields`` carry form defaults and do not make a new child
    count as filled in. ``primary_flag`` names a boolean field that exactly
    one child of a collection should hold.

    Only one level of ``children`` is diffed: a child schema describes its
    own fields and translations, and any ``children`` it declares are ignored
    by the engine.
    """

    record_type: str
    scalar_fields: tuple[str, ...] = ()
    composite_fields: tuple[str, ...] = ()
    translatable_fields: tuple[str, ...] = ()
    children: Mapping[str, FieldSchema] = field(default_factory=dict)
    pending_prefix: str = PENDING_PREFIX
    placeholder_fields: tuple[str, ...] = ()
    primary_flag: str | None = None

    @property
    def compared_fields(self) -> tuple[str, ...]:
        return self.scalar_fields + self.composite_fields

    def is_pending(self, record_id: str | None) -> bool:
        """Return True when the id was generated locally (or is missing)."""
        return record_id is None or record_id.startswith(self.pending_prefix)

    def child_schema(self, collection: str) -> FieldSchema | None:
        return self.children.get(collection)
