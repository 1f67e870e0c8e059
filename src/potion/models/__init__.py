"""Data models for databases, views, entries and page blocks."""

from potion.models.block import (
    Block,
    BlockType,
    DatabaseViewBlock,
    DatabaseViewData,
    HeadingBlock,
    HeadingData,
    MarkdownBlock,
    MarkdownData,
    PageLinkBlock,
    PageLinkData,
    PersistableBlock,
)
from potion.models.database import Database, Entry
from potion.models.property import (
    OPTION_TYPES,
    Option,
    OptionSet,
    Property,
    PropertyDraft,
    PropertyId,
    PropertyPayload,
    PropertyType,
    UnresolvedRef,
)
from potion.models.view import View, ViewDraft, ViewOptions, ViewType

__all__ = [
    "Block",
    "BlockType",
    "DatabaseViewBlock",
    "DatabaseViewData",
    "HeadingBlock",
    "HeadingData",
    "MarkdownBlock",
    "MarkdownData",
    "PageLinkBlock",
    "PageLinkData",
    "PersistableBlock",
    "Database",
    "Entry",
    "OPTION_TYPES",
    "Option",
    "OptionSet",
    "Property",
    "PropertyDraft",
    "PropertyId",
    "PropertyPayload",
    "PropertyType",
    "UnresolvedRef",
    "View",
    "ViewDraft",
    "ViewOptions",
    "ViewType",
]
