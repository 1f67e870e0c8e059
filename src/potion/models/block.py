"""Page content blocks as a closed tagged union.

Block data is opaque to the core: keys beyond the declared fields (e.g.
``linkedPageIds``) are kept so a validated block re-saves unchanged.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """Supported block types."""

    MARKDOWN = "markdown"
    HEADING = "heading"
    PAGE_LINK = "pageLink"
    DATABASE_VIEW = "databaseView"


class MarkdownData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    text: str = ""


class HeadingData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    text: str = ""


class PageLinkData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    target_page_id: str = Field(default="", alias="targetPageId")
    alias: str = ""


class DatabaseViewData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    database_id: str = Field(default="", alias="databaseId")
    view_id: str = Field(default="", alias="viewId")


class MarkdownBlock(BaseModel):
    id: str | None = None
    position: int | None = None
    type: Literal["markdown"] = "markdown"
    data: MarkdownData = Field(default_factory=MarkdownData)


class HeadingBlock(BaseModel):
    id: str | None = None
    position: int | None = None
    type: Literal["heading"] = "heading"
    data: HeadingData = Field(default_factory=HeadingData)


class PageLinkBlock(BaseModel):
    id: str | None = None
    position: int | None = None
    type: Literal["pageLink"] = "pageLink"
    data: PageLinkData = Field(default_factory=PageLinkData)


class DatabaseViewBlock(BaseModel):
    id: str | None = None
    position: int | None = None
    type: Literal["databaseView"] = "databaseView"
    data: DatabaseViewData = Field(default_factory=DatabaseViewData)


Block = Annotated[
    Union[MarkdownBlock, HeadingBlock, PageLinkBlock, DatabaseViewBlock],
    Field(discriminator="type"),
]


class PersistableBlock(BaseModel):
    """A block ready for the replace-blocks call: id and position always set."""

    id: str
    type: str
    position: int
    data: dict[str, Any] = {}
