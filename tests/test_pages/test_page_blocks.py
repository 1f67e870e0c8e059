"""Tests for block defaults and save-time serialization."""

import logging
from datetime import date

import pytest
from pydantic import TypeAdapter

from potion.models import Block, BlockType, DatabaseViewBlock, HeadingBlock, MarkdownBlock, PageLinkBlock, PageLinkData
from potion.pages.blocks import block_defaults, build_blocks_payload, prepare_blocks_for_save, sanitize_data


@pytest.mark.parametrize(
    ("block_type", "model", "data"),
    [
        ("markdown", MarkdownBlock, {"text": ""}),
        ("heading", HeadingBlock, {"text": ""}),
        ("pageLink", PageLinkBlock, {"targetPageId": "", "alias": ""}),
        (BlockType.DATABASE_VIEW, DatabaseViewBlock, {"databaseId": "", "viewId": ""}),
    ],
)
def test_block_defaults(block_type, model, data):
    """Each type gets an empty block with id and position unset."""
    block = block_defaults(block_type)
    assert isinstance(block, model)
    assert block.id is None
    assert block.position is None
    assert block.data.model_dump(by_alias=True) == data


def test_block_defaults_unknown_type_is_markdown():
    """Unknown types fall back to markdown."""
    assert block_defaults("table").type == "markdown"


def test_prepare_assigns_ids_and_positions(id_factory):
    """New blocks get ids, existing ids are kept, positions follow list order."""
    blocks = [
        {"type": "markdown", "data": {"text": "Hello"}},
        {"id": "custom", "type": "heading", "data": {"text": "World"}},
    ]
    prepared = prepare_blocks_for_save(blocks, id_factory=id_factory)
    assert [(b.id, b.type, b.position) for b in prepared] == [("gen-1", "markdown", 0), ("custom", "heading", 1)]
    assert prepared[0].data == {"text": "Hello"}


def test_prepare_ignores_stored_positions(id_factory):
    """Stale positions from a reordered draft are replaced by the list index."""
    blocks = [
        {"id": "b", "type": "heading", "position": 4, "data": {}},
        {"id": "a", "type": "markdown", "position": 0, "data": {}},
    ]
    assert [b.position for b in prepare_blocks_for_save(blocks, id_factory=id_factory)] == [0, 1]


def test_prepare_is_idempotent(id_factory):
    """Preparing an already-prepared list keeps ids and positions."""
    first = prepare_blocks_for_save([block_defaults("markdown"), block_defaults("heading")], id_factory=id_factory)
    second = prepare_blocks_for_save(first, id_factory=id_factory)
    assert [(b.id, b.position) for b in second] == [(b.id, b.position) for b in first] == [("gen-1", 0), ("gen-2", 1)]


def test_prepare_generates_distinct_ids_by_default():
    """The default generator gives every new block its own id."""
    prepared = prepare_blocks_for_save([{"type": "markdown"} for _ in range(5)])
    assert len({b.id for b in prepared}) == 5
    assert all(b.data == {} for b in prepared)


def test_prepare_model_blocks_use_wire_names(id_factory):
    """Block models serialize their data with camelCase keys."""
    block = PageLinkBlock(data=PageLinkData(target_page_id="page-2", alias="Next"))
    prepared = prepare_blocks_for_save([block], id_factory=id_factory)
    assert prepared[0].type == "pageLink"
    assert prepared[0].data == {"targetPageId": "page-2", "alias": "Next"}


def test_prepare_does_not_share_data(id_factory):
    """The payload holds a copy; later edits to the draft do not leak into it."""
    data = {"text": "Hello", "meta": {"tags": ["a"]}}
    prepared = prepare_blocks_for_save([{"type": "markdown", "data": data}], id_factory=id_factory)
    data["meta"]["tags"].append("b")
    assert prepared[0].data == {"text": "Hello", "meta": {"tags": ["a"]}}


def test_sanitize_drops_non_serializable(caplog):
    """Callables and arbitrary objects are dropped, list slots become null."""
    data = {"text": "x", "callback": lambda: None, "items": [1, object(), "two"], "when": date(2026, 1, 2)}
    with caplog.at_level(logging.WARNING, logger="potion.pages.blocks"):
        cleaned = sanitize_data(data)
    assert cleaned == {"text": "x", "items": [1, None, "two"], "when": "2026-01-02"}
    assert "non-serializable" in caplog.text


def test_sanitize_breaks_cycles():
    """Cyclic references are dropped instead of recursing forever."""
    data = {"text": "x"}
    data["self"] = data
    nested = [1]
    nested.append(nested)
    data["list"] = nested
    assert sanitize_data(data) == {"text": "x", "list": [1, None]}


def test_sanitize_keeps_shared_non_cyclic_values():
    """The same object referenced twice is not a cycle."""
    shared = {"id": "p1"}
    assert sanitize_data({"a": shared, "b": shared}) == {"a": {"id": "p1"}, "b": {"id": "p1"}}


def test_sanitize_non_mapping_is_empty():
    """Non-object data becomes an empty mapping."""
    assert sanitize_data(None) == {}
    assert sanitize_data("text") == {}
    assert sanitize_data(["a"]) == {}


def test_sanitize_json_number_rules():
    """Non-finite floats become null and integer keys become strings."""
    assert sanitize_data({"n": float("nan"), 1: "one", "ok": 1.5}) == {"n": None, "1": "one", "ok": 1.5}


def test_build_blocks_payload(id_factory):
    """The replace-blocks body wraps plain block dicts."""
    payload = build_blocks_payload([{"type": "heading", "data": {"text": "Intro"}}], id_factory=id_factory)
    assert payload == {"blocks": [{"id": "gen-1", "type": "heading", "position": 0, "data": {"text": "Intro"}}]}


def test_validated_blocks_resave_extra_data(id_factory):
    """Data keys outside the declared fields survive validation and save."""
    adapter = TypeAdapter(Block)
    stored = [
        {"id": "m1", "type": "markdown", "data": {"markdown": "# Legacy", "linkedPageIds": ["p2"]}},
        {"id": "v1", "type": "databaseView", "data": {"databaseId": "db1", "viewId": "", "height": 300}},
    ]
    blocks = [adapter.validate_python(raw) for raw in stored]
    prepared = prepare_blocks_for_save(blocks, id_factory=id_factory)
    assert prepared[0].data == {"text": "", "markdown": "# Legacy", "linkedPageIds": ["p2"]}
    assert prepared[1].data == {"databaseId": "db1", "viewId": "", "height": 300}
