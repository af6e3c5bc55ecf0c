"""Edit-session and notice services used by the routes."""

from showcase_admin.services.notices import Notice, NoticeVariant
from showcase_admin.services.sessions import (
    EditSession,
    SessionRegistry,
    SubmitResult,
    UnknownCollectionError,
)

__all__ = [
    "EditSession",
    "Notice",
    "NoticeVariant",
    "SessionRegistry",
    "SubmitResult",
    "UnknownCollectionError",
]
