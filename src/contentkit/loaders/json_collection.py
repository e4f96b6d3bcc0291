"""
JSON Collection Loader.

Loads a JSON file whose top level is an array; each element becomes one
record, in array order.

Optional JSON -> Markdown Linking:
    A record carrying a non-blank string in its content path field
    (``contentPath`` unless configured otherwise) gets the referenced
    Markdown file merged in as ``body``. The path is resolved relative to
    the directory of the JSON file, not the working directory. Records
    whose field is missing, not a string, or blank pass through unchanged.

    One missing or unreadable linked file fails the whole load, with the
    offending record's index attached to the error.

Example:
    products.json:
        [{"id": "p1", "contentPath": "docs/p1.md"}, {"id": "p2"}]

    >>> load_json_collection("products.json")
    [{'id': 'p1', 'contentPath': 'docs/p1.md', 'body': '# P1\\n'}, {'id': 'p2'}]
"""
import json
import logging
from typing import Any, List

from contentkit.errors import ContentError
from contentkit.types import DEFAULT_CONTENT_PATH_FIELD
from contentkit.loaders.markdown_file import load_markdown_file
from contentkit.loaders.paths import describe_os_error, resolve_path

logger = logging.getLogger(__name__)


def json_type_name(value: Any) -> str:
    """Name of the JSON type a parsed value came from."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def load_json(file_path) -> Any:
    """Read and parse a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Parsed JSON value

    Raises:
        ContentError: If the path cannot be resolved, the file is missing
            or unreadable, or the content is not valid JSON
    """
    resolved = resolve_path(file_path, "file")

    try:
        with open(resolved, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError as e:
        raise ContentError(
            f"JSON file not found: {file_path}",
            str(resolved),
        ) from e
    except (OSError, ValueError) as e:
        raise ContentError(
            f"Failed to read file: {describe_os_error(e)}",
            str(resolved),
        ) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ContentError(
            f"Failed to parse JSON: {e}",
            str(resolved),
        ) from e


def _linked_path(item: Any, field: str):
    """Return the usable link value of a record, or None."""
    if not isinstance(item, dict):
        return None
    value = item.get(field)
    if isinstance(value, str) and value.strip():
        return value
    return None


def load_json_collection(file_path, content_path_field: str = DEFAULT_CONTENT_PATH_FIELD) -> List[Any]:
    """Load a JSON array as records, merging linked Markdown bodies.

    Args:
        file_path: Path to a JSON file containing an array
        content_path_field: Record field naming a Markdown file to load
            into ``body``

    Returns:
        Array elements in input order; linked records are new dicts with
        an added ``body`` field

    Raises:
        ContentError: If the file cannot be loaded, is not an array, or a
            linked Markdown file cannot be read
    """
    data = load_json(file_path)
    resolved = resolve_path(file_path, "file")

    if not isinstance(data, list):
        raise ContentError(
            f"Expected JSON file to contain an array, got {json_type_name(data)}",
            str(resolved),
        )

    base_dir = resolved.parent

    items = []
    linked = 0
    for index, item in enumerate(data):
        content_path = _linked_path(item, content_path_field)
        if content_path is None:
            items.append(item)
            continue

        try:
            markdown_path = resolve_path(content_path, "markdown file", base=base_dir)
            body = load_markdown_file(markdown_path)
        except ContentError as e:
            raise ContentError(
                f"Failed to load markdown content for item at index {index}: {e.message}",
                str(resolved),
                index,
            ) from e

        items.append({**item, "body": body})
        linked += 1

    logger.debug(f"Loaded {len(items)} items from {resolved} ({linked} with linked markdown)")
    return items
