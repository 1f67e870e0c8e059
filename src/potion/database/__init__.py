"""Database views: property resolution, grouping and payload building."""

from potion.database.catalog import format_value, ordered_properties, resolve_label, resolve_property_id
from potion.database.grouping import Group, group_by_select
from potion.database.payloads import (
    DatabasePayload,
    EntryPayload,
    PropertyPayloadBuilder,
    ViewPayload,
    build_database_payload,
    build_entry_payload,
    build_property_payload,
    build_view_payload,
    entry_draft_defaults,
    parse_options_text,
    slugify,
)
from potion.database.render import (
    BoardProjection,
    GalleryProjection,
    TableProjection,
    ViewProjection,
    project_view,
)
from potion.database.view_options import normalize_view_options, view_reference

__all__ = [
    "BoardProjection",
    "build_database_payload",
    "build_entry_payload",
    "build_property_payload",
    "build_view_payload",
    "DatabasePayload",
    "entry_draft_defaults",
    "EntryPayload",
    "format_value",
    "GalleryProjection",
    "Group",
    "group_by_select",
    "normalize_view_options",
    "ordered_properties",
    "parse_options_text",
    "project_view",
    "PropertyPayloadBuilder",
    "resolve_label",
    "resolve_property_id",
    "slugify",
    "TableProjection",
    "view_reference",
    "ViewPayload",
    "ViewProjection",
]
