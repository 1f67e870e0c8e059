"""Property reference resolution and value formatting.

Pure functions over a database's property list and its entries. Nothing
here raises for missing or oddly-shaped data: unresolved references pass
through unchanged and any value formats to something displayable.
"""

import json
import logging
from collections.abc import Sequence
from typing import Any

from potion.fields import is_record, read_field, to_plain
from potion.models.property import PropertyId, UnresolvedRef

logger = logging.getLogger(__name__)

# Pseudo-property id that reads the entry's own title.
TITLE_PROPERTY = "title"


def resolve_property_id(properties: Sequence[Any], candidate: UnresolvedRef | str | None) -> PropertyId | str | None:
    """Resolve an id-or-name reference to a property id.

    Exact id match wins, then a case-insensitive name match. Anything else
    (including an empty reference) is returned unchanged so callers can
    render a dangling reference instead of failing.
    """
    if not candidate:
        return candidate
    for prop in properties:
        if read_field(prop, "id") == candidate:
            return PropertyId(candidate)
    wanted = str(candidate).lower()
    for prop in properties:
        if str(read_field(prop, "name") or "").lower() == wanted:
            return PropertyId(read_field(prop, "id"))
    logger.debug("Unresolved property reference: %s", candidate)
    return candidate


def resolve_label(properties: Sequence[Any], property_id: str) -> str:
    """Return the property's display name, or the raw id for a stale reference."""
    for prop in properties:
        if read_field(prop, "id") == property_id:
            return str(read_field(prop, "name") or "")
    return str(property_id)


def ordered_properties(properties: Sequence[Any]) -> list[Any]:
    """Properties in display order (``position``, ties keep list order)."""
    indexed = list(enumerate(properties))
    indexed.sort(key=lambda pair: (_position(pair[1], pair[0]), pair[0]))
    return [prop for _, prop in indexed]


def _position(prop: Any, fallback: int) -> int:
    position = read_field(prop, "position")
    return position if isinstance(position, int) and not isinstance(position, bool) else fallback


def _dump(value: Any) -> str:
    return json.dumps(to_plain(value), default=str, separators=(",", ":"))


def _format_item(item: Any) -> Any:
    """One element of a multi-valued property."""
    if item is None:
        return ""
    if is_record(item):
        return read_field(item, "name") or _dump(item)
    return item


def format_value(entry: Any, property_id: str) -> Any:
    """Format an entry's value for ``property_id`` for display.

    - ``"title"`` reads the entry title
    - missing / null -> ``""``
    - booleans -> ``"Yes"`` / ``"No"``
    - lists -> comma-joined element names
    - objects -> ``name``, else ``title``, else a JSON dump
    - other scalars are returned as-is for the caller to stringify
    """
    if entry is None:
        return ""
    if property_id == TITLE_PROPERTY:
        return read_field(entry, "title") or ""
    value = (read_field(entry, "properties") or {}).get(property_id)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(_format_item(item)) for item in value)
    if is_record(value):
        return read_field(value, "name") or read_field(value, "title") or _dump(value)
    return value
