"""Repository modules for each content backend endpoint family."""

from showcase_admin.backend.repositories.about import AboutUsRepository
from showcase_admin.backend.repositories.base import EditableRepository
from showcase_admin.backend.repositories.categories import CategoryRepository
from showcase_admin.backend.repositories.languages import LanguageRepository
from showcase_admin.backend.repositories.messages import MessageRepository
from showcase_admin.backend.repositories.projects import ProjectRepository

__all__ = [
    "AboutUsRepository",
    "CategoryRepository",
    "EditableRepository",
    "LanguageRepository",
    "MessageRepository",
    "ProjectRepository",
]
