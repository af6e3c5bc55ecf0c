"""Edit sessions — an immutable snapshot, a working copy and a submit step.

A session is opened with a full fetch of the record, keeps that snapshot
read-only, and lets the caller mutate a separate working copy. Submitting
diffs the two and sends only the changeset. After a successful save the
snapshot is re-fetched rather than patched in place.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from showcase_admin.backend.errors import BackendError
from showcase_admin.diff import Changeset, Record, backfill_translations, diff, new_pending_id
from showcase_admin.services import notices
from showcase_admin.services.notices import Notice

if TYPE_CHECKING:
    from showcase_admin.backend.repositories.base import EditableRepository

logger = logging.getLogger(__name__)

_RECORD_LABELS = {
    "about_us": "About Us",
    "category": "Category",
    "project": "Project",
}


class UnknownCollectionError(KeyError):
    """The record type declares no child collection with that name."""


class SubmitResult(BaseModel):
    """Outcome of ``EditSession.submit``."""

    notice: Notice
    changeset: Changeset
    submitted: bool = False
    saved: bool = False


class EditSession:
    """One editor's pair of snapshot and working copy for a single record."""

    def __init__(
        self,
        repository: EditableRepository,
        original: Record,
        *,
        record_id: str | None,
        languages: Sequence[str],
    ) -> None:
        self.id = uuid.uuid4().hex
        self._repository = repository
        self._record_id = record_id
        self._languages = tuple(languages)
        self._original = original.snapshot()
        self.working = original.snapshot()
        self.closed = False

    @classmethod
    async def start(
        cls,
        repository: EditableRepository,
        record_id: str | None,
        *,
        languages: Sequence[str],
    ) -> EditSession:
        """Fetch the record and open a session on it."""
        record = await repository.fetch_record(record_id, languages=languages)
        return cls.open(repository, record, record_id=record_id, languages=languages)

    @classmethod
    def open(
        cls,
        repository: EditableRepository,
        record: Record,
        *,
        record_id: str | None,
        languages: Sequence[str],
    ) -> EditSession:
        """Open a session on an already fetched record."""
        record = backfill_translations(record, languages, repository.schema)
        session = cls(
            repository,
            record,
            record_id=record_id if record_id is not None else record.id,
            languages=languages,
        )
        logger.info(
            "Edit session started — session=%s record_type=%s id=%s",
            session.id,
            repository.schema.record_type,
            session.record_id,
        )
        return session

    @property
    def record_id(self) -> str | None:
        return self._record_id

    @property
    def record_type(self) -> str:
        return self._repository.schema.record_type

    @property
    def original(self) -> Record:
        """A copy of the snapshot; the snapshot itself is never handed out."""
        return self._original.snapshot()

    def replace_working(self, record: Record) -> None:
        """Replace the working copy wholesale, e.g. with a submitted form."""
        self.working = backfill_translations(record, self._languages, self._repository.schema)

    def set_field(self, name: str, value: Any) -> None:
        self.working.fields[name] = value

    def set_translation(self, language: str, name: str, value: Any) -> None:
        self.working.translations.setdefault(language, {})[name] = value

    def add_child(self, collection: str, **fields: Any) -> Record:
        """Append a pending child with every language backfilled."""
        child_schema = self._repository.schema.child_schema(collection)
        if child_schema is None:
            raise UnknownCollectionError(collection)
        child = backfill_translations(
            Record(id=new_pending_id(child_schema.pending_prefix), fields=fields),
            self._languages,
            child_schema,
        )
        self.working.children.setdefault(collection, []).append(child)
        return child

    def remove_child(self, collection: str, child_id: str) -> bool:
        """Remove a child from the working copy. Returns False if it was not there.

        When the removed child held the collection's primary flag (the main
        image of a gallery), the first remaining child takes it over.
        """
        child_schema = self._repository.schema.child_schema(collection)
        if child_schema is None:
            raise UnknownCollectionError(collection)
        items = self.working.children.get(collection, [])
        removed = [item for item in items if item.id == child_id]
        if not removed:
            return False
        remaining = [item for item in items if item.id != child_id]
        self.working.children[collection] = remaining

        flag = child_schema.primary_flag
        if (
            flag
            and remaining
            and any(item.fields.get(flag) for item in removed)
            and not any(item.fields.get(flag) for item in remaining)
        ):
            remaining[0].fields[flag] = True
            logger.debug(
                "Primary child reassigned — collection=%s id=%s",
                collection,
                remaining[0].id,
            )
        return True

    def changes(self) -> Changeset:
        return diff(self._original, self.working, self._repository.schema)

    async def reload(self) -> None:
        """Re-fetch the snapshot and reset the working copy to it."""
        record = await self._repository.fetch_record(
            self._record_id, languages=self._languages
        )
        record = backfill_translations(record, self._languages, self._repository.schema)
        self._original = record.snapshot()
        self.working = record.snapshot()

    async def submit(self) -> SubmitResult:
        """Diff and send the changes.

        An empty changeset is reported without calling the backend. A
        rejected submission leaves the working copy untouched for a retry.
        """
        changeset = self.changes()
        label = _RECORD_LABELS.get(self.record_type, self.record_type)
        if changeset.is_empty:
            logger.info("Nothing to save — session=%s", self.id)
            return SubmitResult(notice=notices.no_changes(), changeset=changeset)

        try:
            await self._repository.apply_changeset(self._record_id, changeset)
        except BackendError as exc:
            logger.warning(
                "Changeset rejected — session=%s status=%s error=%s",
                self.id,
                exc.status_code,
                exc.message,
            )
            return SubmitResult(
                notice=notices.failed(exc.message or f"Failed to update {label}"),
                changeset=changeset,
                submitted=True,
            )

        logger.info(
            "Changeset saved — session=%s record_type=%s id=%s %s",
            self.id,
            self.record_type,
            self._record_id,
            changeset.summary(),
        )
        try:
            await self.reload()
        except BackendError:
            logger.warning(
                "Reload after save failed — closing session=%s", self.id, exc_info=True
            )
            self.closed = True
        return SubmitResult(
            notice=notices.saved(label),
            changeset=changeset,
            submitted=True,
            saved=True,
        )


class SessionRegistry:
    """In-memory lookup of open edit sessions by id.

    An editor who navigates away never discards their session, so sessions
    idle for longer than ``ttl_seconds`` are evicted on the next ``add`` or
    ``get``. A ``ttl_seconds`` of 0 or less keeps sessions until discarded.
    """

    def __init__(
        self,
        ttl_seconds: float = 0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: dict[str, EditSession] = {}
        self._last_used: dict[str, float] = {}

    def add(self, session: EditSession) -> EditSession:
        self._evict_expired()
        self._sessions[session.id] = session
        self._last_used[session.id] = self._clock()
        return session

    def get(self, session_id: str) -> EditSession | None:
        self._evict_expired()
        session = self._sessions.get(session_id)
        if session is not None:
            self._last_used[session_id] = self._clock()
        return session

    def discard(self, session_id: str) -> bool:
        """Drop a session; nothing is sent to the backend."""
        session = self._sessions.pop(session_id, None)
        self._last_used.pop(session_id, None)
        if session is None:
            return False
        logger.info("Edit session discarded — session=%s", session_id)
        return True

    def _evict_expired(self) -> None:
        if self._ttl_seconds <= 0:
            return
        cutoff = self._clock() - self._ttl_seconds
        expired = [sid for sid, used in self._last_used.items() if used < cutoff]
        for session_id in expired:
            self._sessions.pop(session_id, None)
            del self._last_used[session_id]
        if expired:
            logger.info("Expired edit sessions evicted — count=%d", len(expired))

    def __len__(self) -> int:
        return len(self._sessions)
