"""
Unit Tests for the JSON Collection Loader.

This test suite validates array loading, JSON -> Markdown linking through
contentPath, and the errors raised for malformed sources.
"""
import json

import pytest

from contentkit import ContentError
from contentkit.loaders import load_json_collection


def test_loads_array_in_order(write_file):
    items = [{"id": str(i), "n": i} for i in range(10)]
    path = write_file("items.json", json.dumps(items))

    assert load_json_collection(path) == items


def test_linked_markdown_becomes_body(products_json):
    records = load_json_collection(products_json)

    assert records[0] == {
        "id": "p1",
        "name": "Widget",
        "contentPath": "docs/p1.md",
        "body": "Body text",
    }


def test_order_is_preserved_with_links(products_json):
    records = load_json_collection(products_json)

    assert [r["id"] for r in records] == ["p1", "p2", "p3", "p4"]


def test_records_without_usable_link_are_unchanged(products_json):
    records = load_json_collection(products_json)

    assert records[1] == {"id": "p2", "name": "Gadget"}
    assert records[2] == {"id": "p3", "name": "Empty link", "contentPath": ""}
    assert records[3] == {"id": "p4", "name": "Numeric link", "contentPath": 42}


def test_whitespace_link_is_ignored(write_file):
    path = write_file("items.json", json.dumps([{"id": "a", "contentPath": "   "}]))

    assert load_json_collection(path) == [{"id": "a", "contentPath": "   "}]


def test_non_object_items_pass_through(write_file):
    path = write_file("mixed.json", json.dumps([1, "two", None, [3], {"id": "x"}]))

    assert load_json_collection(path) == [1, "two", None, [3], {"id": "x"}]


def test_link_is_relative_to_json_file_not_working_directory(products_json, tmp_path, monkeypatch):
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    records = load_json_collection("../data/products.json")

    assert records[0]["body"] == "Body text"


def test_link_can_point_to_mdx(write_file):
    write_file("site/pages/intro.mdx", "<Intro />")
    path = write_file("site/pages.json", json.dumps([{"id": "intro", "contentPath": "pages/intro.mdx"}]))

    assert load_json_collection(path)[0]["body"] == "<Intro />"


def test_custom_content_path_field(write_file):
    write_file("site/about.md", "About us")
    path = write_file("site/pages.json", json.dumps([
        {"id": "about", "source": "about.md", "contentPath": "ignored.md"},
    ]))

    records = load_json_collection(path, content_path_field="source")

    assert records[0]["body"] == "About us"


def test_missing_linked_file_fails_whole_load(write_file, tmp_path):
    write_file("data/docs/ok.md", "fine")
    path = write_file("data/items.json", json.dumps([
        {"id": "ok", "contentPath": "docs/ok.md"},
        {"id": "broken", "contentPath": "docs/missing.md"},
        {"id": "never-reached", "contentPath": "docs/also-missing.md"},
    ]))

    with pytest.raises(ContentError) as exc_info:
        load_json_collection(path)

    err = exc_info.value
    assert err.item_index == 1
    assert err.file_path == str(path)
    assert err.message.startswith("Failed to load markdown content for item at index 1:")
    assert "Markdown file not found" in err.message
    assert "missing.md" in err.message
    assert isinstance(err.__cause__, ContentError)


def test_missing_json_file(tmp_path):
    with pytest.raises(ContentError) as exc_info:
        load_json_collection(tmp_path / "missing.json")

    assert "JSON file not found" in exc_info.value.message
    assert exc_info.value.file_path == str(tmp_path / "missing.json")


def test_invalid_json(write_file):
    path = write_file("bad.json", '[{"id": "a",]')

    with pytest.raises(ContentError) as exc_info:
        load_json_collection(path)

    assert exc_info.value.message.startswith("Failed to parse JSON:")
    assert exc_info.value.file_path == str(path)


@pytest.mark.parametrize("payload,type_name", [
    ({"id": "a"}, "object"),
    ("text", "string"),
    (3, "number"),
    (True, "boolean"),
    (None, "null"),
])
def test_top_level_must_be_array(write_file, payload, type_name):
    path = write_file("not-array.json", json.dumps(payload))

    with pytest.raises(ContentError) as exc_info:
        load_json_collection(path)

    assert exc_info.value.message == f"Expected JSON file to contain an array, got {type_name}"


def test_directory_instead_of_file(tmp_path):
    folder = tmp_path / "folder.json"
    folder.mkdir()

    with pytest.raises(ContentError, match="Failed to read file"):
        load_json_collection(folder)


def test_empty_array(write_file):
    path = write_file("empty.json", "[]")

    assert load_json_collection(path) == []
