"""Property (database column) models and the draft/payload shapes around them."""

from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field, model_serializer

# A reference as stored on a view: may be a property id or a display name.
UnresolvedRef = NewType("UnresolvedRef", str)
# A reference that went through resolve_property_id.
PropertyId = NewType("PropertyId", str)


class PropertyType(str, Enum):
    """Supported property types."""

    TITLE = "title"
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    DATE = "date"
    CHECKBOX = "checkbox"


# Types whose definition carries an OptionSet.
OPTION_TYPES = frozenset({PropertyType.SELECT.value, PropertyType.MULTI_SELECT.value})


class Option(BaseModel):
    """One choice of a select / multi_select property."""

    id: str
    name: str


class OptionSet(BaseModel):
    """Ordered option list, stored as {"options": [...]} on the property."""

    options: list[Option] = []


class Property(BaseModel):
    """A typed column definition in a database schema."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str = ""
    type: PropertyType
    options: OptionSet | None = None
    position: int = 0
    database_id: str | None = Field(default=None, alias="databaseId")


class PropertyDraft(BaseModel):
    """Property as edited in the database form, before it has an id."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: str = PropertyType.TEXT.value
    options_text: str = Field(default="", alias="optionsText")


class PropertyPayload(BaseModel):
    """Canonical schema payload sent when creating a database."""

    name: str
    type: str
    position: int
    options: OptionSet | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_options(self, handler):
        # Only select types send an option set; others leave the key out.
        data = handler(self)
        if self.options is None:
            data.pop("options", None)
        return data
