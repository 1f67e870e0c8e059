"""Normalize a view's stored property references into property ids.

Kanban ``groupBy`` and gallery ``coverProperty`` may have been typed as a
property name. Grouping and formatting only accept ids, so views go
through ``normalize_view_options`` before either consumes them.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from potion.database.catalog import resolve_property_id
from potion.fields import read_field
from potion.models.view import View, ViewType

# view type -> (wire key, model attribute) of the reference it carries
_REFERENCE_FIELDS = {
    ViewType.KANBAN.value: ("groupBy", "group_by"),
    ViewType.GALLERY.value: ("coverProperty", "cover_property"),
}


def normalize_view_options(view: Any, properties: Sequence[Any]) -> Any:
    """Return a shallow copy of ``view`` with its property reference resolved.

    Accepts a ``View`` model or a plain mapping and returns the same kind.
    ``None`` is returned unchanged. View types without a reference are
    copied as-is.
    """
    if view is None:
        return view
    reference = _REFERENCE_FIELDS.get(_view_type(view))

    if isinstance(view, View):
        options = view.options.model_copy()
        if reference:
            attr = reference[1]
            current = getattr(options, attr)
            if current:
                setattr(options, attr, resolve_property_id(properties, current))
        return view.model_copy(update={"options": options})

    copy = dict(view)
    options = dict(read_field(view, "options") or {})
    if reference:
        key = reference[0]
        if options.get(key):
            options[key] = resolve_property_id(properties, options[key])
    copy["options"] = options
    return copy


def _view_type(view: Any) -> str | None:
    view_type = read_field(view, "type")
    return view_type.value if isinstance(view_type, ViewType) else view_type


def view_reference(view: Any) -> str | None:
    """The property reference a view carries (group-by or cover), if any."""
    reference = _REFERENCE_FIELDS.get(_view_type(view))
    if view is None or reference is None:
        return None
    options = read_field(view, "options")
    if isinstance(options, Mapping) or options is None:
        return (options or {}).get(reference[0])
    return getattr(options, reference[1], None)
