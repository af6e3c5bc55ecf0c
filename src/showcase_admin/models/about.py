"""About-Us document model — contact info, statistics, story and services."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import Field, field_validator

from showcase_admin.diff import Record
from showcase_admin.models.base import DocumentBase, coerce_translations

ABOUT_US_ID = "about-us"
CONTACT_SECTIONS = ("Address", "Phone", "Email")
STATISTIC_SECTIONS = (
    "Years of Experience",
    "Completed Projects",
    "Professional Team",
    "Locations",
)
SOCIAL_LINKS_SECTION = "Social Links"
OUR_STORY_SECTION = "Our Story"


class SectionItem(DocumentBase):
    """A titled content block (``section_title`` + ``content``)."""

    section_title: str = ""
    content: str | None = ""
    translations: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("content", mode="before")
    @classmethod
    def _number_as_text(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("translations", mode="before")
    @classmethod
    def _clean_translations(cls, value: object) -> dict[str, dict[str, Any]]:
        return coerce_translations(value)


class ServiceItem(SectionItem):
    """A company service; translated fields are ``title`` and ``content``."""

    def to_record(self, default_language: str) -> Record:
        translations = self.translations
        if not translations and (self.section_title or self.content):
            translations = {
                default_language: {"title": self.section_title, "content": self.content}
            }
        return Record(id=self.id, translations=translations)


class AboutUs(DocumentBase):
    """The singleton About-Us document."""

    contact_info: list[SectionItem] = Field(default_factory=list)
    statistics: list[SectionItem] = Field(default_factory=list)
    our_story: list[SectionItem] = Field(default_factory=list)
    services: list[ServiceItem] = Field(default_factory=list)

    @field_validator("contact_info", "statistics", "our_story", "services", mode="before")
    @classmethod
    def _sections_as_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        return value

    def section(self, group: str, title: str) -> SectionItem | None:
        """Find a section by title within a group, e.g. ``("statistics", "Locations")``."""
        items: list[SectionItem] = getattr(self, group)
        return next((item for item in items if item.section_title == title), None)

    def to_record(self, languages: Sequence[str]) -> Record:
        """Flatten the sections into a diffable record.

        Sections missing from the document stay absent from ``fields``.
        """
        default_language = languages[0] if languages else "en"
        fields: dict[str, Any] = {}
        for group, titles in (
            ("contact_info", (*CONTACT_SECTIONS, SOCIAL_LINKS_SECTION)),
            ("statistics", STATISTIC_SECTIONS),
        ):
            for title in titles:
                item = self.section(group, title)
                if item is not None:
                    fields[title] = item.content

        translations: dict[str, dict[str, Any]] = {}
        story = self.section("our_story", OUR_STORY_SECTION)
        if story is None and self.our_story:
            story = self.our_story[0]
        if story is not None:
            translations = story.translations or {
                default_language: {
                    "section_title": story.section_title,
                    "content": story.content,
                }
            }

        return Record(
            id=self.id or ABOUT_US_ID,
            fields=fields,
            translations=translations,
            children={
                "services": [item.to_record(default_language) for item in self.services]
            },
        )
