"""Field schemas for each editable record type served by the content backend."""

from __future__ import annotations

from showcase_admin.diff import FieldSchema

SERVICE_SCHEMA = FieldSchema(
    record_type="service",
    translatable_fields=("title", "content"),
)

ABOUT_US_SCHEMA = FieldSchema(
    record_type="about_us",
    scalar_fields=(
        "Address",
        "Phone",
        "Email",
        "Years of Experience",
        "Completed Projects",
        "Professional Team",
        "Locations",
    ),
    composite_fields=("Social Links",),
    translatable_fields=("section_title", "content"),
    children={"services": SERVICE_SCHEMA},
)

CATEGORY_SCHEMA = FieldSchema(
    record_type="category",
    scalar_fields=("icon_svg_url",),
    translatable_fields=("name", "description"),
)

PROJECT_IMAGE_SCHEMA = FieldSchema(
    record_type="project_image",
    scalar_fields=("url", "is_main", "display_order"),
    placeholder_fields=("display_order",),
    primary_flag="is_main",
)

PROJECT_SCHEMA = FieldSchema(
    record_type="project",
    scalar_fields=("category_id", "creation_date", "country"),
    translatable_fields=("title", "short_description", "extra_description"),
    children={"images": PROJECT_IMAGE_SCHEMA},
)
