"""Render-ready projections of a database view.

Turns (database, view, entries) into the structure a table, kanban board
or gallery renderer draws, without knowing anything about the markup.
"""

from collections.abc import Sequence
from typing import Any, Literal, Union

from pydantic import BaseModel

from potion.database.catalog import format_value, ordered_properties, resolve_label
from potion.database.grouping import group_by_select
from potion.database.view_options import normalize_view_options, view_reference
from potion.fields import read_field
from potion.models.view import ViewType


class Column(BaseModel):
    property_id: str
    label: str


class Row(BaseModel):
    entry_id: str
    title: str
    cells: list[Any] = []


class Card(BaseModel):
    entry_id: str
    title: str
    detail: Any = None


class BoardColumn(BaseModel):
    key: str
    label: str
    cards: list[Card] = []


class TableProjection(BaseModel):
    kind: Literal["table"] = "table"
    columns: list[Column] = []
    rows: list[Row] = []
    is_empty: bool = False


class BoardProjection(BaseModel):
    kind: Literal["kanban"] = "kanban"
    group_by: str | None = None
    columns: list[BoardColumn] = []
    is_empty: bool = False


class GalleryProjection(BaseModel):
    kind: Literal["gallery"] = "gallery"
    cover_property: str | None = None
    cards: list[Card] = []
    is_empty: bool = False


ViewProjection = Union[TableProjection, BoardProjection, GalleryProjection]


def _card(entry: Any, property_id: str | None) -> Card:
    return Card(
        entry_id=read_field(entry, "id") or "",
        title=read_field(entry, "title") or "",
        detail=format_value(entry, property_id) if property_id else None,
    )


def project_view(database: Any, view: Any, entries: Sequence[Any] | None) -> ViewProjection | None:
    """Project ``entries`` through ``view`` of ``database``.

    Returns None when either database or view is missing. Unknown view
    types render as a table.
    """
    if database is None or view is None:
        return None
    entries = list(entries or [])
    properties = read_field(database, "properties") or []
    view = normalize_view_options(view, properties)
    view_type = read_field(view, "type")
    if isinstance(view_type, ViewType):
        view_type = view_type.value

    if view_type == ViewType.KANBAN.value:
        group_key = view_reference(view)
        columns = [
            BoardColumn(
                key=group.key,
                label=group.label,
                cards=[_card(entry, group_key) for entry in group.items],
            )
            for group in group_by_select(entries, group_key)
        ]
        return BoardProjection(group_by=group_key, columns=columns, is_empty=not entries)

    if view_type == ViewType.GALLERY.value:
        cover_key = view_reference(view)
        return GalleryProjection(
            cover_property=cover_key,
            cards=[_card(entry, cover_key) for entry in entries],
            is_empty=not entries,
        )

    # A property without an id cannot hold entry values; leave it out.
    property_ids = [pid for pid in (read_field(prop, "id") for prop in ordered_properties(properties)) if pid]
    return TableProjection(
        columns=[Column(property_id=pid, label=resolve_label(properties, pid)) for pid in property_ids],
        rows=[
            Row(
                entry_id=read_field(entry, "id") or "",
                title=read_field(entry, "title") or "",
                cells=[format_value(entry, pid) for pid in property_ids],
            )
            for entry in entries
        ],
        is_empty=not entries,
    )
