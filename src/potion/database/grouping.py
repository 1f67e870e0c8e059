"""Board grouping: bucket entries by a select / multi_select property.

Buckets are created in first-seen order and never re-sorted, so columns
stay put across renders of unchanged data.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from potion.fields import is_record, read_field
from potion.models.property import PropertyId

DEFAULT_GROUP_KEY = "default"
UNSORTED_KEY = "unsorted"


class Group(BaseModel):
    """One kanban column."""

    key: str
    label: str
    items: list[Any] = Field(default_factory=list)


def _bucket_for(value: Any, in_list: bool = False) -> tuple[str, str]:
    """Return (key, label) for a single grouping value.

    Bare scalars label their bucket when they are the whole value; inside a
    multi-select list they are "Untitled" like any nameless element.
    """
    if value is None and not in_list:
        return UNSORTED_KEY, "Unsorted"
    if is_record(value):
        value_id = read_field(value, "id")
        name = read_field(value, "name")
        key = value_id or name or UNSORTED_KEY
        return str(key), str(name) if name else "Untitled"
    # Bare scalar (or null list element): no id to key on.
    if in_list or not value:
        return UNSORTED_KEY, "Untitled"
    return UNSORTED_KEY, str(value)


def group_by_select(entries: Sequence[Any], property_id: PropertyId | str | None) -> list[Group]:
    """Group entries into ordered buckets by the value of ``property_id``.

    Multi-valued (list) values put the entry in one bucket per element.
    Without a property id every entry lands in a single "Ungrouped" group;
    if nothing produced a bucket, a single "Unsorted" group holds all entries.
    """
    if not property_id:
        return [Group(key=DEFAULT_GROUP_KEY, label="Ungrouped", items=list(entries))]

    buckets: dict[str, Group] = {}

    def _add(value: Any, entry: Any, in_list: bool = False) -> None:
        key, label = _bucket_for(value, in_list)
        if key not in buckets:
            buckets[key] = Group(key=key, label=label)
        buckets[key].items.append(entry)

    for entry in entries:
        value = (read_field(entry, "properties") or {}).get(property_id)
        if isinstance(value, (list, tuple)):
            for item in value:
                _add(item, entry, in_list=True)
        else:
            _add(value, entry)

    if not buckets:
        return [Group(key=UNSORTED_KEY, label="Unsorted", items=list(entries))]
    return list(buckets.values())
