"""Pure builders turning form drafts into database API payloads.

No API calls here. Callers filter out drafts with an empty name before
calling ``PropertyPayloadBuilder.build``; ``build_database_payload`` does
that filtering for the database-create form.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from potion.config import get_settings
from potion.fields import read_field
from potion.ids import IdFactory, new_id
from potion.models.property import OPTION_TYPES, Option, OptionSet, PropertyPayload, PropertyType
from potion.models.view import ViewType

logger = logging.getLogger(__name__)

_NON_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(text: str, max_length: int | None = None, id_factory: IdFactory = new_id) -> str:
    """Derive an option id from free text.

    Lowercase, collapse every run of non ``[a-z0-9]`` characters into one
    hyphen, strip edge hyphens, truncate to ``max_length``. Text with no
    usable characters gets a generated id instead of an empty one.
    """
    if max_length is None:
        max_length = get_settings().slug_max_length
    slug = _NON_SLUG_PATTERN.sub("-", text.lower()).strip("-")[:max_length]
    if not slug:
        slug = id_factory()
        logger.debug("No slug for %r, generated %s", text, slug)
    return slug


def parse_options_text(options_text: str | None, id_factory: IdFactory = new_id) -> OptionSet:
    """Parse a comma-separated option list into an OptionSet.

    Option ids are not de-duplicated: labels that slugify identically share
    an id. Collisions are logged.
    """
    options: list[Option] = []
    seen: set[str] = set()
    for token in (options_text or "").split(","):
        name = token.strip()
        if not name:
            continue
        option_id = slugify(name, id_factory=id_factory)
        if option_id in seen:
            logger.debug("Option id collision: %s (from %r)", option_id, name)
        seen.add(option_id)
        options.append(Option(id=option_id, name=name))
    return OptionSet(options=options)


class PropertyPayloadBuilder:
    """Builds canonical property payloads from drafts.

    ``id_factory`` supplies option ids when a label cannot be slugified.
    """

    def __init__(self, id_factory: IdFactory = new_id):
        self._id_factory = id_factory

    def build(self, draft: Any, position: int) -> PropertyPayload:
        """Copy name/type/position; select types also get their parsed options."""
        prop_type = read_field(draft, "type")
        if isinstance(prop_type, PropertyType):
            prop_type = prop_type.value
        payload = PropertyPayload(
            name=read_field(draft, "name") or "",
            type=prop_type or "",
            position=position,
        )
        if prop_type in OPTION_TYPES:
            payload.options = parse_options_text(_options_text(draft), id_factory=self._id_factory)
        return payload


def _options_text(draft: Any) -> str:
    # Mappings use the wire name, PropertyDraft the attribute name.
    return read_field(draft, "optionsText") or read_field(draft, "options_text") or ""


def build_property_payload(draft: Any, position: int, id_factory: IdFactory = new_id) -> PropertyPayload:
    """Build one property payload with a default builder."""
    return PropertyPayloadBuilder(id_factory=id_factory).build(draft, position)


class ViewPayload(BaseModel):
    """Initial view created alongside a new database."""

    name: str
    type: str
    options: dict[str, str] = {}


class DatabasePayload(BaseModel):
    """Body of the create-database call."""

    title: str
    properties: list[PropertyPayload]
    views: list[ViewPayload]


def build_view_payload(view_draft: Any) -> ViewPayload:
    """Keep only the reference option that applies to the chosen view type."""
    view_type = read_field(view_draft, "type") or ViewType.TABLE.value
    if isinstance(view_type, ViewType):
        view_type = view_type.value
    group_by = read_field(view_draft, "groupBy") or read_field(view_draft, "group_by")
    cover = read_field(view_draft, "coverProperty") or read_field(view_draft, "cover_property")
    options: dict[str, str] = {}
    if view_type == ViewType.KANBAN.value and group_by:
        options["groupBy"] = group_by
    if view_type == ViewType.GALLERY.value and cover:
        options["coverProperty"] = cover
    return ViewPayload(name=read_field(view_draft, "name") or "", type=view_type, options=options)


def build_database_payload(
    title: str,
    property_drafts: Sequence[Any],
    view_draft: Any,
    id_factory: IdFactory = new_id,
) -> DatabasePayload | None:
    """Build the create-database body, or None when no named property remains.

    Drafts with a blank name are dropped; survivors get positions 0..n-1.
    """
    builder = PropertyPayloadBuilder(id_factory=id_factory)
    named = [draft for draft in property_drafts if (read_field(draft, "name") or "").strip()]
    if not named:
        return None
    return DatabasePayload(
        title=title,
        properties=[builder.build(draft, index) for index, draft in enumerate(named)],
        views=[build_view_payload(view_draft)],
    )


class EntryPayload(BaseModel):
    """Body of the create-entry call."""

    title: str
    values: dict[str, Any] = {}


def entry_draft_defaults(properties: Sequence[Any]) -> dict[str, Any]:
    """Empty entry draft: one default value per property id."""
    values: dict[str, Any] = {}
    for prop in properties:
        prop_type = read_field(prop, "type")
        if prop_type == PropertyType.CHECKBOX.value:
            values[read_field(prop, "id")] = False
        elif prop_type == PropertyType.MULTI_SELECT.value:
            values[read_field(prop, "id")] = []
        else:
            values[read_field(prop, "id")] = ""
    return {"title": "", "properties": values}


def build_entry_payload(draft: Any) -> EntryPayload:
    """Create-entry body from an entry draft."""
    return EntryPayload(
        title=read_field(draft, "title") or "",
        values=dict(read_field(draft, "properties") or {}),
    )
