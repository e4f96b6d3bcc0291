"""
Unit Tests for Configuration Module.

This test suite validates manifest loading and the CollectionConfig objects
built from it.
"""
import json
from pathlib import Path

import pytest

from contentkit import ContentError, load_collections
from contentkit.config import (
    get_collection_config,
    get_collection_configs,
    get_default_config,
    load_config,
)
from contentkit.schema import JsonSchema


@pytest.fixture
def site(write_file, tmp_path, posts_dir, products_json):
    """A manifest next to the posts directory and products file."""
    write_file("schemas/post.schema.json", json.dumps({
        "type": "object",
        "required": ["id", "title"],
        "properties": {"draft": {"type": "boolean", "default": False}},
    }))
    write_file("collections.yml", """
collections:
  posts:
    path: posts
    schema: schemas/post.schema.json
  products:
    path: data/products.json
    format: json
""")
    return tmp_path


def test_get_default_config():
    """Test default configuration values."""
    config = get_default_config()

    assert config["collections"] == {}
    assert "config_dir" in config


def test_load_config_with_explicit_path(site):
    """Test loading a manifest from an explicit path."""
    config = load_config(str(site / "collections.yml"))

    assert list(config["collections"]) == ["posts", "products"]
    assert config["config_dir"] == str(site.resolve())


def test_load_config_searches_parent_directories(site, monkeypatch):
    """Test that the manifest is found from a nested working directory."""
    nested = site / "posts"
    monkeypatch.chdir(nested)

    config = load_config()

    assert "posts" in config["collections"]


def test_load_config_without_manifest_uses_defaults(tmp_path, monkeypatch):
    """Test the fallback when no collections.yml exists anywhere."""
    monkeypatch.setattr("contentkit.config.find_config_file", lambda start=None: None)

    assert load_config()["collections"] == {}


def test_load_config_explicit_path_not_found(tmp_path):
    """Test that a named manifest must exist."""
    with pytest.raises(ContentError, match="Configuration file not found"):
        load_config(str(tmp_path / "nope.yml"))


def test_load_config_invalid_yaml(write_file):
    """Test that malformed YAML is reported."""
    path = write_file("collections.yml", "collections: [unclosed\n")

    with pytest.raises(ContentError, match="Error parsing configuration file"):
        load_config(str(path))


def test_load_config_root_must_be_mapping(write_file):
    path = write_file("collections.yml", "- just\n- a list\n")

    with pytest.raises(ContentError, match="Configuration root must be a mapping"):
        load_config(str(path))


def test_empty_manifest(write_file):
    path = write_file("collections.yml", "")

    assert load_config(str(path))["collections"] == {}


def test_collection_configs_resolve_paths(site):
    configs = get_collection_configs(load_config(str(site / "collections.yml")))

    assert Path(configs["posts"].path) == (site / "posts").resolve()
    assert isinstance(configs["posts"].schema, JsonSchema)
    assert configs["products"].format == "json"
    assert configs["products"].schema is None
    assert configs["products"].content_path_field == "contentPath"


@pytest.mark.parametrize("options,message", [
    ("content/posts", "must be a mapping"),
    ({"format": "md"}, "needs a non-empty 'path'"),
    ({"path": "posts", "colour": "blue"}, "unknown options: colour"),
    ({"path": "posts", "schema": 5}, "schema must be a path"),
    ({"path": "posts", "content_path_field": ""}, "content_path_field must be a non-empty string"),
])
def test_malformed_collection_entries(tmp_path, options, message):
    with pytest.raises(ContentError) as exc_info:
        get_collection_config("posts", options, str(tmp_path))

    assert "Collection 'posts'" in exc_info.value.message
    assert message in exc_info.value.message


def test_missing_schema_file(tmp_path):
    with pytest.raises(ContentError, match="Schema file not found"):
        get_collection_config("posts", {"path": "posts", "schema": "missing.json"}, str(tmp_path))


def test_load_collections(site):
    collections = load_collections(load_config(str(site / "collections.yml")))

    assert list(collections) == ["posts", "products"]
    assert collections["posts"].get_by_id("hello")["draft"] is False
    assert collections["products"].get_by_id("p1")["body"] == "Body text"
