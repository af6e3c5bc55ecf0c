"""Snapshot-diff engine for nested multi-language records."""

from showcase_admin.diff.changeset import (
    Changeset,
    ChildCreate,
    ChildDelete,
    ChildUpdate,
    FieldChange,
    TranslationChange,
)
from showcase_admin.diff.engine import diff
from showcase_admin.diff.record import (
    PENDING_PREFIX,
    Record,
    backfill_translations,
    new_pending_id,
)
from showcase_admin.diff.schema import FieldSchema

__all__ = [
    "PENDING_PREFIX",
    "Changeset",
    "ChildCreate",
    "ChildDelete",
    "ChildUpdate",
    "FieldChange",
    "FieldSchema",
    "Record",
    "TranslationChange",
    "backfill_translations",
    "diff",
    "new_pending_id",
]
