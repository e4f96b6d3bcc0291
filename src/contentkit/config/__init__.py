"""
Configuration Module for contentkit.

This module loads collection manifests. A manifest is a YAML file
(collections.yml by default) naming the collections a build uses:

    collections:
      posts:
        path: content/posts            # directory of Markdown files
        schema: schemas/post.schema.json
      products:
        path: data/products.json
        content_path_field: contentPath

Relative ``path`` and ``schema`` values are resolved against the directory
holding the manifest, so a build behaves the same from any working
directory.

Usage:
    >>> from contentkit.config import load_config, get_collection_configs
    >>> config = load_config()
    >>> for name, collection_config in get_collection_configs(config).items():
    ...     print(name, collection_config.path)
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from contentkit.errors import ContentError
from contentkit.schema import JsonSchema, load_schema
from contentkit.types import DEFAULT_CONTENT_PATH_FIELD, CollectionConfig


logger = logging.getLogger(__name__)
DEFAULT_CONFIG_FILENAME = "collections.yml"

# Keys accepted on a single collection entry
COLLECTION_KEYS = {"path", "format", "schema", "content_path_field"}


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Search ``start`` (default: working directory) and its parents for a manifest."""
    current = start or Path.cwd()
    for parent in [current] + list(current.parents):
        candidate = parent / DEFAULT_CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load a collection manifest.

    Args:
        config_path: Path to the manifest. If None, looks for
                    collections.yml in the current directory and parent
                    directories.

    Returns:
        Dictionary with a ``collections`` mapping and the ``config_dir`` the
        manifest was read from

    Raises:
        ContentError: If an explicit ``config_path`` does not exist, the file
            is not valid YAML, or its root is not a mapping

    Example:
        >>> config = load_config("site/collections.yml")
        >>> sorted(config["collections"])
        ['posts', 'products']
    """
    if config_path is None:
        found = find_config_file()
        if found is None:
            logger.warning(f"{DEFAULT_CONFIG_FILENAME} not found, using default configuration")
            return get_default_config()
        config_path = str(found)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ContentError(f"Configuration file not found: {config_path}", config_path) from e
    except OSError as e:
        raise ContentError(f"Failed to read configuration file: {e}", config_path) from e
    except yaml.YAMLError as e:
        raise ContentError(f"Error parsing configuration file: {e}", config_path) from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ContentError("Configuration root must be a mapping", config_path)

    collections = config.get("collections") or {}
    if not isinstance(collections, dict):
        raise ContentError("'collections' must be a mapping of name to options", config_path)

    config["collections"] = collections
    config["config_dir"] = str(Path(config_path).resolve().parent)
    logger.info(f"Loaded configuration from {config_path}")
    return config


def get_default_config() -> Dict[str, Any]:
    """Return the configuration used when no manifest is available.

    Returns:
        Dictionary with no collections, rooted at the working directory
    """
    return {
        "collections": {},
        "config_dir": os.getcwd(),
    }


def _resolve(value: str, config_dir: str) -> str:
    return str(Path(config_dir, value))


def get_collection_config(name: str, options: Any, config_dir: str) -> CollectionConfig:
    """Build the CollectionConfig for one manifest entry.

    Args:
        name: Collection name, used in error messages
        options: The entry's mapping from the manifest
        config_dir: Directory relative paths are resolved against

    Returns:
        CollectionConfig with absolute ``path`` and a loaded schema, if any

    Raises:
        ContentError: If the entry is malformed or its schema file cannot
            be loaded
    """
    if not isinstance(options, dict):
        raise ContentError(f"Collection '{name}' must be a mapping of options")

    unknown = sorted(set(options) - COLLECTION_KEYS)
    if unknown:
        raise ContentError(f"Collection '{name}' has unknown options: {', '.join(unknown)}")

    path = options.get("path")
    if not isinstance(path, str) or not path.strip():
        raise ContentError(f"Collection '{name}' needs a non-empty 'path'")

    schema = None
    schema_path = options.get("schema")
    if schema_path is not None:
        if not isinstance(schema_path, str):
            raise ContentError(f"Collection '{name}' schema must be a path to a JSON Schema file")
        schema = JsonSchema(load_schema(_resolve(schema_path, config_dir)))

    content_path_field = options.get("content_path_field", DEFAULT_CONTENT_PATH_FIELD)
    if not isinstance(content_path_field, str) or not content_path_field:
        raise ContentError(f"Collection '{name}' content_path_field must be a non-empty string")

    return CollectionConfig(
        path=_resolve(path, config_dir),
        format=options.get("format"),
        schema=schema,
        content_path_field=content_path_field,
    )


def get_collection_configs(config: Dict[str, Any]) -> Dict[str, CollectionConfig]:
    """Return a CollectionConfig per manifest entry, in manifest order."""
    config_dir = config.get("config_dir") or os.getcwd()
    return {
        name: get_collection_config(name, options, config_dir)
        for name, options in config.get("collections", {}).items()
    }
