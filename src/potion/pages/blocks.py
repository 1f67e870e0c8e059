"""Page block defaults and save-time serialization.

``prepare_blocks_for_save`` assigns ids to new blocks, recomputes
positions from list order and reduces block data to plain JSON values.
The caller handles the replace-blocks API call itself.
"""

import logging
import math
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from potion.fields import read_field, to_plain
from potion.ids import IdFactory, new_id
from potion.models.block import (
    BlockType,
    DatabaseViewBlock,
    HeadingBlock,
    MarkdownBlock,
    PageLinkBlock,
    PersistableBlock,
)

logger = logging.getLogger(__name__)

_DEFAULTS = {
    BlockType.MARKDOWN: MarkdownBlock,
    BlockType.HEADING: HeadingBlock,
    BlockType.PAGE_LINK: PageLinkBlock,
    BlockType.DATABASE_VIEW: DatabaseViewBlock,
}

# Marker for values that have no JSON representation.
_DROP = object()


def block_defaults(block_type: BlockType | str) -> MarkdownBlock | HeadingBlock | PageLinkBlock | DatabaseViewBlock:
    """Return an empty block of ``block_type`` with id and position unset.

    Unknown types fall back to a markdown block.
    """
    try:
        model = _DEFAULTS[BlockType(block_type)]
    except ValueError:
        model = MarkdownBlock
    return model()


def _clone(value: Any, active: set[int], dropped: list[str]) -> Any:
    """Structural copy limited to JSON value kinds; ``_DROP`` for anything else.

    ``active`` holds the containers on the current path (cycle detection),
    ``dropped`` collects the type names of discarded values.
    """
    if isinstance(value, Enum):
        value = value.value
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, mode="json")
    if isinstance(value, (Mapping, list, tuple)) and id(value) in active:
        dropped.append("cycle")
        return _DROP
    if isinstance(value, Mapping):
        active.add(id(value))
        result = {}
        for key, item in value.items():
            if isinstance(key, Enum):
                key = key.value
            if isinstance(key, bool) or not isinstance(key, (str, int)):
                dropped.append(type(key).__name__)
                continue
            cloned = _clone(item, active, dropped)
            if cloned is not _DROP:
                result[str(key)] = cloned
        active.discard(id(value))
        return result
    if isinstance(value, (list, tuple)):
        active.add(id(value))
        items = []
        for item in value:
            cloned = _clone(item, active, dropped)
            # Keep indexes stable: an unrepresentable element becomes null.
            items.append(None if cloned is _DROP else cloned)
        active.discard(id(value))
        return items
    dropped.append(type(value).__name__)
    return _DROP


def sanitize_data(data: Any) -> dict[str, Any]:
    """Deep-copy block data keeping only plain JSON values.

    Non-mapping input yields ``{}``. Values that cannot be represented
    (callables, arbitrary objects, cyclic references) are dropped.
    """
    data = to_plain(data)
    if not isinstance(data, Mapping):
        return {}
    dropped: list[str] = []
    cleaned = _clone(data, set(), dropped)
    if dropped:
        logger.warning("Dropped non-serializable block data: %s", ", ".join(dropped))
    return cleaned


def prepare_blocks_for_save(blocks: Sequence[Any], id_factory: IdFactory = new_id) -> list[PersistableBlock]:
    """Map draft blocks to persistable blocks.

    Existing ids are kept, missing ids are generated. ``position`` is the
    index in ``blocks``; any previously stored position is ignored.
    """
    prepared = []
    for index, block in enumerate(blocks):
        block_id = read_field(block, "id")
        if not block_id:
            block_id = id_factory()
            logger.debug("Assigned id %s to new block at position %d", block_id, index)
        block_type = read_field(block, "type")
        if isinstance(block_type, Enum):
            block_type = block_type.value
        prepared.append(
            PersistableBlock(
                id=block_id,
                type=block_type or "",
                position=index,
                data=sanitize_data(read_field(block, "data") or {}),
            )
        )
    return prepared


def build_blocks_payload(blocks: Sequence[Any], id_factory: IdFactory = new_id) -> dict[str, list[dict]]:
    """Body of the replace-page-blocks call."""
    return {"blocks": [block.model_dump() for block in prepare_blocks_for_save(blocks, id_factory=id_factory)]}
