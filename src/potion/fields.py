"""Field access shared by models and plain JSON-decoded mappings.

The core accepts either the pydantic models or the raw dicts the HTTP
layer decodes. Missing fields read as the default instead of raising.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


def read_field(obj: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping or an object, ``default`` when absent."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def is_record(value: Any) -> bool:
    """True for object-like values (JSON objects or models), as opposed to scalars."""
    return isinstance(value, (Mapping, BaseModel))


def to_plain(value: Any) -> Any:
    """Dump a model to its JSON-shaped dict; other values pass through."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    return value
