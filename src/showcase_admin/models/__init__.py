"""Data models for content backend document types."""

from showcase_admin.models.about import AboutUs, SectionItem, ServiceItem
from showcase_admin.models.category import Category, CategoryDraft
from showcase_admin.models.language import Language, LanguageDraft
from showcase_admin.models.message import ContactMessage
from showcase_admin.models.project import Project, ProjectDraft, ProjectImage

__all__ = [
    "AboutUs",
    "Category",
    "CategoryDraft",
    "ContactMessage",
    "Language",
    "LanguageDraft",
    "Project",
    "ProjectDraft",
    "ProjectImage",
    "SectionItem",
    "ServiceItem",
]
