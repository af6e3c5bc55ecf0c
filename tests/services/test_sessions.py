"""Tests for edit sessions and the session registry."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from showcase_admin.backend import BackendError
from showcase_admin.diff import PENDING_PREFIX, Record
from showcase_admin.schemas import ABOUT_US_SCHEMA, PROJECT_SCHEMA
from showcase_admin.services import EditSession, NoticeVariant, SessionRegistry
from showcase_admin.services.sessions import UnknownCollectionError

LANGUAGES = ("en", "fr")


def _record(address: str = "123 Main St") -> Record:
    return Record(
        id="about-us",
        fields={"Address": address},
        translations={"en": {"section_title": "Our Story", "content": "Founded"}},
        children={
            "services": [
                Record(id="s1", translations={"en": {"title": "Design", "content": ""}})
            ]
        },
    )


@pytest.fixture
def repository() -> MagicMock:
    """Create a mock editable repository for the About-Us record."""
    repo = MagicMock()
    repo.schema = ABOUT_US_SCHEMA
    repo.fetch_record = AsyncMock(return_value=_record())
    repo.apply_changeset = AsyncMock(return_value={"ok": True})
    return repo


async def _start(repository: MagicMock) -> EditSession:
    return await EditSession.start(repository, None, languages=LANGUAGES)


class TestEditSession:
    """Test the edit session lifecycle."""

    async def test_start_backfills_languages(self, repository: MagicMock) -> None:
        """Verify the fetched record is backfilled for every language."""
        session = await _start(repository)

        repository.fetch_record.assert_awaited_once_with(None, languages=LANGUAGES)
        assert session.working.translations["fr"] == {"section_title": "", "content": ""}
        assert session.working.child("services", "s1").translations["fr"] == {
            "title": "",
            "content": "",
        }
        assert session.record_id == "about-us"
        assert session.record_type == "about_us"

    async def test_fresh_session_has_no_changes(self, repository: MagicMock) -> None:
        """Verify a just-opened session diffs to nothing."""
        session = await _start(repository)

        assert session.changes().is_empty

    async def test_original_is_read_only(self, repository: MagicMock) -> None:
        """Verify edits to the returned snapshot never reach the session."""
        session = await _start(repository)
        session.original.fields["Address"] = "Changed"

        assert session.original.fields["Address"] == "123 Main St"
        assert session.changes().is_empty

    async def test_submit_without_changes_skips_backend(
        self, repository: MagicMock
    ) -> None:
        """Verify an unchanged working copy reports a no-op without a request."""
        session = await _start(repository)

        result = await session.submit()

        repository.apply_changeset.assert_not_awaited()
        assert result.submitted is False
        assert result.saved is False
        assert result.notice.title == "No changes"
        assert result.notice.variant == NoticeVariant.INFO

    async def test_submit_saves_and_reloads(self, repository: MagicMock) -> None:
        """Verify a change is sent and the snapshot is re-fetched."""
        session = await _start(repository)
        session.set_field("Address", "456 Oak Ave")
        repository.fetch_record.return_value = _record("456 Oak Ave")

        result = await session.submit()

        repository.apply_changeset.assert_awaited_once()
        record_id, changeset = repository.apply_changeset.await_args.args
        assert record_id == "about-us"
        assert [(c.field, c.new_value) for c in changeset.field_changes] == [
            ("Address", "456 Oak Ave")
        ]
        assert result.saved is True
        assert result.notice.description == "About Us updated successfully"
        assert repository.fetch_record.await_count == 2
        assert session.original.fields["Address"] == "456 Oak Ave"
        assert session.changes().is_empty
        assert session.closed is False

    async def test_rejected_submit_keeps_working_copy(
        self, repository: MagicMock
    ) -> None:
        """Verify a backend rejection leaves the edits in place for a retry."""
        session = await _start(repository)
        session.set_translation("fr", "content", "Fondée")
        repository.apply_changeset.side_effect = BackendError(
            "Validation failed", status_code=422
        )

        result = await session.submit()

        assert result.submitted is True
        assert result.saved is False
        assert result.notice.variant == NoticeVariant.DESTRUCTIVE
        assert result.notice.description == "Validation failed"
        assert session.working.translations["fr"]["content"] == "Fondée"
        assert session.original.translations["fr"]["content"] == ""
        assert repository.fetch_record.await_count == 1

    async def test_reload_failure_closes_session(self, repository: MagicMock) -> None:
        """Verify a failed re-fetch after saving closes the session."""
        session = await _start(repository)
        session.set_field("Address", "456 Oak Ave")
        repository.fetch_record.side_effect = BackendError("Gone", status_code=503)

        result = await session.submit()

        assert result.saved is True
        assert session.closed is True

    async def test_add_child(self, repository: MagicMock) -> None:
        """Verify new children get a pending id and every language."""
        session = await _start(repository)

        child = session.add_child("services")

        assert child.id.startswith(PENDING_PREFIX)
        assert child.translations == {
            "en": {"title": "", "content": ""},
            "fr": {"title": "", "content": ""},
        }
        assert session.working.child("services", child.id) is child
        assert session.changes().is_empty

    async def test_added_child_with_title_is_created(
        self, repository: MagicMock
    ) -> None:
        """Verify a filled-in pending child becomes a create."""
        session = await _start(repository)
        child = session.add_child("services")
        child.translations["en"]["title"] = "Build"

        changes = session.changes()

        assert [c.local_id for c in changes.child_creates] == [child.id]

    async def test_unknown_collection(self, repository: MagicMock) -> None:
        """Verify collections the schema does not declare are rejected."""
        session = await _start(repository)

        with pytest.raises(UnknownCollectionError):
            session.add_child("gallery")
        with pytest.raises(UnknownCollectionError):
            session.remove_child("gallery", "x")

    async def test_remove_child(self, repository: MagicMock) -> None:
        """Verify removing a stored child yields a delete."""
        session = await _start(repository)

        assert session.remove_child("services", "s1") is True
        assert session.remove_child("services", "s1") is False
        assert [d.child_id for d in session.changes().child_deletes] == ["s1"]

    async def test_replace_working(self, repository: MagicMock) -> None:
        """Verify a replaced working copy is backfilled before diffing."""
        session = await _start(repository)
        replacement = _record()
        replacement.translations["en"]["content"] = "Founded in 1990"

        session.replace_working(replacement)
        changes = session.changes()

        assert session.working.translations["fr"] == {"section_title": "", "content": ""}
        assert [(t.language, t.changed_fields) for t in changes.translation_changes] == [
            ("en", {"content": "Founded in 1990"})
        ]

    async def test_open_uses_record_id(self, repository: MagicMock) -> None:
        """Verify an explicit record id overrides the record's own id."""
        session = EditSession.open(
            repository, _record(), record_id="slug-id", languages=LANGUAGES
        )

        assert session.record_id == "slug-id"
        repository.fetch_record.assert_not_awaited()


class TestSessionRegistry:
    """Test the in-memory session registry."""

    async def test_add_get_discard(self, repository: MagicMock) -> None:
        """Verify sessions can be registered, found and discarded."""
        registry = SessionRegistry()
        session = registry.add(await _start(repository))

        assert registry.get(session.id) is session
        assert len(registry) == 1
        assert registry.discard(session.id) is True
        assert registry.get(session.id) is None
        assert registry.discard(session.id) is False
        assert len(registry) == 0

    async def test_expired_session_is_evicted(self, repository: MagicMock) -> None:
        """Verify a session idle for longer than the ttl is dropped."""
        now = [100.0]
        registry = SessionRegistry(ttl_seconds=10, clock=lambda: now[0])
        session = registry.add(await _start(repository))

        now[0] += 11

        assert registry.get(session.id) is None
        assert len(registry) == 0

    async def test_get_refreshes_last_use(self, repository: MagicMock) -> None:
        """Verify looking a session up keeps it alive."""
        now = [100.0]
        registry = SessionRegistry(ttl_seconds=10, clock=lambda: now[0])
        session = registry.add(await _start(repository))

        now[0] += 8
        assert registry.get(session.id) is session
        now[0] += 8

        assert registry.get(session.id) is session

    async def test_zero_ttl_keeps_sessions(self, repository: MagicMock) -> None:
        """Verify a ttl of zero disables expiry."""
        now = [0.0]
        registry = SessionRegistry(ttl_seconds=0, clock=lambda: now[0])
        session = registry.add(await _start(repository))

        now[0] += 1_000_000

        assert registry.get(session.id) is session


class TestProjectGallery:
    """Test main image handling when editing a project gallery."""

    @pytest.fixture
    def project_repository(self) -> MagicMock:
        repo = MagicMock()
        repo.schema = PROJECT_SCHEMA
        repo.fetch_record = AsyncMock(
            return_value=Record(
                id="p1",
                fields={"category_id": "c1"},
                children={
                    "images": [
                        Record(id="i1", fields={"url": "a.jpg", "is_main": True}),
                        Record(id="i2", fields={"url": "b.jpg", "is_main": False}),
                    ]
                },
            )
        )
        return repo

    async def test_removing_main_image_promotes_next(
        self, project_repository: MagicMock
    ) -> None:
        """Verify the first remaining image becomes main when the main one goes."""
        session = await EditSession.start(project_repository, "p1", languages=LANGUAGES)

        assert session.remove_child("images", "i1") is True
        changes = session.changes()

        assert session.working.child("images", "i2").fields["is_main"] is True
        assert [d.child_id for d in changes.child_deletes] == ["i1"]
        assert [(u.child_id, u.changed_fields) for u in changes.child_updates] == [
            ("i2", {"is_main": True})
        ]

    async def test_removing_other_image_keeps_main(
        self, project_repository: MagicMock
    ) -> None:
        """Verify removing a non-main image leaves the main flag alone."""
        session = await EditSession.start(project_repository, "p1", languages=LANGUAGES)

        session.remove_child("images", "i2")

        assert session.working.child("images", "i1").fields["is_main"] is True
        assert session.changes().child_updates == []

    async def test_removing_last_image(self, project_repository: MagicMock) -> None:
        """Verify removing every image leaves only deletes."""
        session = await EditSession.start(project_repository, "p1", languages=LANGUAGES)

        session.remove_child("images", "i1")
        session.remove_child("images", "i2")

        changes = session.changes()
        assert sorted(d.child_id for d in changes.child_deletes) == ["i1", "i2"]
        assert changes.child_updates == []
