"""Links from page blocks to other pages and to database views."""

from collections.abc import Mapping, Sequence
from typing import Any

from potion.fields import read_field, to_plain
from potion.models.block import BlockType


def _block_type(block: Any) -> str | None:
    block_type = read_field(block, "type")
    return block_type.value if isinstance(block_type, BlockType) else block_type


def extract_linked_pages(block: Any) -> list[str]:
    """Page ids a single block links to.

    A pageLink block links to its ``targetPageId``; any block may also list
    extra targets under ``data.linkedPageIds``. Empty ids are skipped.
    """
    data = to_plain(read_field(block, "data"))
    if not isinstance(data, Mapping):
        data = {}
    results = []
    if _block_type(block) == BlockType.PAGE_LINK.value:
        target = data.get("targetPageId")
        if isinstance(target, str) and target:
            results.append(target)
    linked = data.get("linkedPageIds")
    if isinstance(linked, (list, tuple)):
        results.extend(page_id for page_id in linked if isinstance(page_id, str) and page_id)
    return results


def linked_page_ids(blocks: Sequence[Any]) -> list[str]:
    """Distinct page ids linked from ``blocks``, in first-seen order."""
    seen: dict[str, None] = {}
    for block in blocks:
        for page_id in extract_linked_pages(block):
            seen.setdefault(page_id, None)
    return list(seen)


def resolve_embedded_view(database: Any, view_id: str | None) -> Any:
    """The view a databaseView block should render.

    An explicit ``view_id`` must match one of the database's views (None
    otherwise); without one the database's first view is used.
    """
    views = read_field(database, "views") or []
    if view_id:
        for view in views:
            if read_field(view, "id") == view_id:
                return view
        return None
    return views[0] if views else None
