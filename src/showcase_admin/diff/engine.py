"""Snapshot-diff engine — compute the minimal changeset between two records.

The engine is a pure function of ``(original, working, schema)``. It never
raises on odd input: a missing section on the original side is treated as
"no prior value", so an edit form keeps working when the backend and the
client disagree on the shape of a record.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from showcase_admin.diff.changeset import (
    Changeset,
    ChildCreate,
    ChildDelete,
    ChildUpdate,
    FieldChange,
    TranslationChange,
)
from showcase_admin.diff.record import Record
from showcase_admin.diff.schema import FieldSchema

logger = logging.getLogger(__name__)


def diff(original: Record | None, working: Record, schema: FieldSchema) -> Changeset:
    """Return the changes needed to bring ``original`` in line with ``working``."""
    before = original if original is not None else Record()
    record_id = working.id if working.id is not None else before.id
    changeset = Changeset(record_type=schema.record_type, record_id=record_id)

    changeset.field_changes.extend(
        FieldChange(field=name, new_value=value)
        for name, value in _changed_fields(before, working, schema).items()
    )
    changeset.translation_changes.extend(
        TranslationChange(record_id=record_id, language=language, changed_fields=delta)
        for language, delta in _changed_translations(
            before.translations, working.translations, schema.translatable_fields
        ).items()
    )
    for collection, child_schema in schema.children.items():
        _diff_collection(collection, before, working, child_schema, changeset)

    logger.debug(
        "Diff computed — record_type=%s id=%s %s",
        schema.record_type,
        record_id,
        changeset.summary(),
    )
    return changeset


def _normalize(value: Any) -> Any:
    return "" if value is None else value


def _canonical(value: Any) -> str:
    """Serialise a composite value so key order never counts as a change."""
    decoded = value
    if isinstance(value, str):
        if not value.strip():
            return ""
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            return value
    if decoded is None or decoded in ({}, []):
        return ""
    try:
        return json.dumps(decoded, sort_keys=True, ensure_ascii=False)
    except TypeError:
        return repr(decoded)


def _is_blank(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, dict | list | tuple | set):
        return not value
    return False


def _changed_fields(before: Record, after: Record, schema: FieldSchema) -> dict[str, Any]:
    changed: dict[str, Any] = {}
    for name in schema.scalar_fields:
        value = after.fields.get(name)
        if _normalize(value) != _normalize(before.fields.get(name)):
            changed[name] = value
    for name in schema.composite_fields:
        value = after.fields.get(name)
        if _canonical(value) != _canonical(before.fields.get(name)):
            changed[name] = value
    return changed


def _changed_translations(
    before: dict[str, dict[str, Any]],
    after: dict[str, dict[str, Any]],
    fields: tuple[str, ...],
) -> dict[str, dict[str, Any]]:
    changed: dict[str, dict[str, Any]] = {}
    for language, values in after.items():
        current = values or {}
        previous = before.get(language) or {}
        delta = {
            name: current.get(name)
            for name in fields
            if _normalize(current.get(name)) != _normalize(previous.get(name))
        }
        if delta:
            changed[language] = delta
    return changed


def _is_populated(child: Record, schema: FieldSchema) -> bool:
    """Return True when a new child carries at least one non-blank value."""
    if any(
        not _is_blank(child.fields.get(name))
        for name in schema.compared_fields
        if name not in schema.placeholder_fields
    ):
        return True
    return any(
        not _is_blank((values or {}).get(name))
        for values in child.translations.values()
        for name in schema.translatable_fields
    )


def _create_payload(child: Record, schema: FieldSchema) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if not schema.is_pending(child.id):
        payload["id"] = child.id
    for name in schema.compared_fields:
        if name in child.fields:
            payload[name] = child.fields[name]
    if schema.translatable_fields:
        payload["translations"] = {
            language: {
                name: _normalize((values or {}).get(name))
                for name in schema.translatable_fields
            }
            for language, values in child.translations.items()
        }
    return payload


def _diff_collection(
    collection: str,
    before: Record,
    after: Record,
    schema: FieldSchema,
    changeset: Changeset,
) -> None:
    """Split one child collection into creates, updates and deletes."""
    stored: dict[str, Record] = {}
    for item in before.children.get(collection) or []:
        if not schema.is_pending(item.id) and item.id not in stored:
            stored[item.id] = item

    seen: set[str] = set()
    for item in after.children.get(collection) or []:
        if item.id is not None:
            if item.id in seen:
                logger.debug(
                    "Skipping duplicate child — collection=%s id=%s", collection, item.id
                )
                continue
            seen.add(item.id)

        if schema.is_pending(item.id) or item.id not in stored:
            if _is_populated(item, schema):
                changeset.child_creates.append(
                    ChildCreate(
                        collection=collection,
                        local_id=item.id,
                        payload=_create_payload(item, schema),
                    )
                )
            continue

        previous = stored[item.id]
        fields = _changed_fields(previous, item, schema)
        translations = _changed_translations(
            previous.translations, item.translations, schema.translatable_fields
        )
        if fields or translations:
            changeset.child_updates.append(
                ChildUpdate(
                    collection=collection,
                    child_id=item.id,
                    changed_fields=fields,
                    changed_translations=translations,
                )
            )

    changeset.child_deletes.extend(
        ChildDelete(collection=collection, child_id=child_id)
        for child_id in stored
        if child_id not in seen
    )
