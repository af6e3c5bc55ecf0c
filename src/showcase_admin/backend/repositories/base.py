"""Base repository — typed access to one endpoint family of the content backend."""

from __future__ import annotations

from collections.abc import Sequence
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Generic,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from pydantic import BaseModel

if TYPE_CHECKING:
    from showcase_admin.backend.client import BackendClient
    from showcase_admin.diff import Changeset, FieldSchema, Record


@runtime_checkable
class EditableRepository(Protocol):
    """Repositories whose records can be edited through a snapshot-diff session."""

    schema: FieldSchema

    async def fetch_record(
        self, record_id: str | None, *, languages: Sequence[str]
    ) -> Record:
        """Fetch the full nested record used as the session snapshot."""
        ...

    async def apply_changeset(self, record_id: str | None, changeset: Changeset) -> Any:
        """Send a non-empty changeset to the backend."""
        ...


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Shared parsing helpers over a ``BackendClient``."""

    model_class: ClassVar[type[BaseModel]]

    def __init__(self, client: BackendClient) -> None:
        self._client = client

    def _parse(self, data: Any) -> T:
        return self.model_class.model_validate(data)  # type: ignore[return-value]

    def _parse_many(self, data: Any) -> list[T]:
        """Parse a list body, also accepting ``{"items": [...]}`` / ``{"data": [...]}``."""
        if isinstance(data, dict):
            data = data.get("items", data.get("data", []))
        if not isinstance(data, list):
            return []
        return [self._parse(item) for item in data]
