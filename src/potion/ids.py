"""Identifier generation.

Components that mint ids take an ``IdFactory`` so callers (and tests) can
supply deterministic ids. ``new_id`` is the default.
"""

import secrets
from collections.abc import Callable

from potion.config import get_settings

IdFactory = Callable[[], str]

# URL-safe alphabet, same as nanoid's default.
_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"


def new_id(size: int | None = None) -> str:
    """Return a random URL-safe identifier (``generated_id_length`` chars by default)."""
    size = size or get_settings().generated_id_length
    return "".join(secrets.choice(_ALPHABET) for _ in range(size))


def sequential_ids(prefix: str = "id") -> IdFactory:
    """Return a factory yielding ``prefix-1``, ``prefix-2``, ... for reproducible output."""
    counter = 0

    def factory() -> str:
        nonlocal counter
        counter += 1
        return f"{prefix}-{counter}"

    return factory
