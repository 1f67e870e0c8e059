"""Shared test fixtures."""

import pytest

from potion.ids import sequential_ids


@pytest.fixture
def properties() -> list[dict]:
    """A small task-tracker schema, shaped as the HTTP layer decodes it."""
    return [
        {
            "id": "p1",
            "name": "Status",
            "type": "select",
            "position": 1,
            "options": {"options": [{"id": "todo", "name": "To Do"}, {"id": "done", "name": "Done"}]},
        },
        {"id": "p2", "name": "Tags", "type": "multi_select", "position": 2},
        {"id": "p3", "name": "Finished", "type": "checkbox", "position": 3},
        {"id": "p4", "name": "Estimate", "type": "number", "position": 0},
    ]


@pytest.fixture
def entries() -> list[dict]:
    """Three entries over the ``properties`` schema."""
    return [
        {
            "id": "a",
            "title": "One",
            "properties": {
                "p1": {"id": "todo", "name": "To Do"},
                "p2": [{"id": "t1", "name": "Home"}],
                "p3": False,
                "p4": 3,
            },
        },
        {
            "id": "b",
            "title": "Two",
            "properties": {
                "p1": {"id": "done", "name": "Done"},
                "p2": [{"id": "t1", "name": "Home"}, {"id": "t2", "name": "Work"}],
                "p3": True,
            },
        },
        {
            "id": "c",
            "title": "Three",
            "properties": {
                "p1": {"id": "todo", "name": "To Do"},
                "p2": [],
            },
        },
    ]


@pytest.fixture
def id_factory():
    """Deterministic ids: gen-1, gen-2, ..."""
    return sequential_ids("gen")
