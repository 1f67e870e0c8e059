"""Database and entry models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from potion.models.property import Property
from potion.models.view import View


class Database(BaseModel):
    """A structured collection: schema (properties) plus saved views."""

    id: str
    title: str = ""
    description: str = ""
    icon: str = ""
    properties: list[Property] = []  # position defines display order
    views: list[View] = []


class Entry(BaseModel):
    """One row of a database. Values are keyed by property id."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    title: str = ""
    properties: dict[str, Any] = {}
    database_id: str | None = Field(default=None, alias="databaseId")
