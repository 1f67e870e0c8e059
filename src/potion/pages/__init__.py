"""Page content: block defaults, save serialization and page links."""

from potion.pages.blocks import block_defaults, build_blocks_payload, prepare_blocks_for_save, sanitize_data
from potion.pages.links import extract_linked_pages, linked_page_ids, resolve_embedded_view

__all__ = [
    "block_defaults",
    "build_blocks_payload",
    "extract_linked_pages",
    "linked_page_ids",
    "prepare_blocks_for_save",
    "resolve_embedded_view",
    "sanitize_data",
]
