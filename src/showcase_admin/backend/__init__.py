"""Content backend access — HTTP client, errors and repositories."""

from showcase_admin.backend.client import BackendClient
from showcase_admin.backend.errors import BackendError, BackendUnavailableError

__all__ = ["BackendClient", "BackendError", "BackendUnavailableError"]
