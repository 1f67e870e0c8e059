"""Database view models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ViewType(str, Enum):
    """How a view renders its entries."""

    TABLE = "table"
    KANBAN = "kanban"
    GALLERY = "gallery"


class ViewOptions(BaseModel):
    """Stored view options. groupBy / coverProperty hold unresolved references."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    group_by: str | None = Field(default=None, alias="groupBy")
    cover_property: str | None = Field(default=None, alias="coverProperty")


class View(BaseModel):
    """A named projection over a database's entries."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    type: ViewType = ViewType.TABLE
    options: ViewOptions = Field(default_factory=ViewOptions)
    position: int = 0
    database_id: str | None = Field(default=None, alias="databaseId")


class ViewDraft(BaseModel):
    """View as configured in the database form, before it is created."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = "Default view"
    type: str = ViewType.TABLE.value
    group_by: str = Field(default="", alias="groupBy")
    cover_property: str = Field(default="", alias="coverProperty")
