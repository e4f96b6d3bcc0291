"""
Collection Assembly.

This module is the public entry point of contentkit. It turns a
CollectionConfig into a read-only Collection, synchronously, at build time.

Pipeline:
    1. Infer the format from the path unless given explicitly
       (".json" in any case -> JSON file, anything else -> Markdown directory)
    2. Load records with the matching loader
    3. Validate every record against the schema, if one is configured
    4. Apply the transform, if one is configured
    5. Freeze the result into a Collection

Every failure raises ContentError and aborts the whole collection; there is
no partially loaded result. Nothing is cached: each call reads the
filesystem again and returns a new Collection.

Example:
    >>> posts = define_collection("content/posts", schema=POST_SCHEMA)
    >>> posts.get_by_id("hello")["title"]
    'Hello'
    >>> [post["id"] for post in posts.all()]
    ['hello', 'second-post']
"""
import copy
import logging
import os
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional

from contentkit.config import get_collection_configs
from contentkit.errors import ContentError
from contentkit.loaders.json_collection import load_json_collection
from contentkit.loaders.markdown_collection import load_markdown_collection
from contentkit.schema import JsonSchema
from contentkit.types import (
    DEFAULT_CONTENT_PATH_FIELD,
    FORMAT_JSON,
    FORMAT_MARKDOWN,
    FORMATS,
    CollectionConfig,
    Transform,
)
from contentkit.validate import validate_items

logger = logging.getLogger(__name__)


def _record_id(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get("id")
    return getattr(record, "id", None)


class Collection:
    """Immutable, ordered set of records with lookup by ``id``.

    Records are copied on the way in and handed out as deep copies, so
    neither the caller that built the collection nor a reader can change it.
    """

    def __init__(self, items):
        self._items = tuple(copy.deepcopy(list(items)))

    def all(self) -> List[Any]:
        """Return every record, in collection order."""
        return copy.deepcopy(list(self._items))

    def get_by_id(self, id: str) -> Optional[Any]:
        """Return the first record whose ``id`` equals ``id``, or None.

        Only string ids match. Lookup is a linear scan; no index is kept.
        """
        for record in self._items:
            record_id = _record_id(record)
            if isinstance(record_id, str) and record_id == id:
                return copy.deepcopy(record)
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"Collection({len(self._items)} items)"


def infer_format(path) -> str:
    """Guess the source format from a path without touching the filesystem."""
    try:
        raw = os.fspath(path)
    except TypeError:
        raw = str(path)
    if isinstance(raw, bytes):
        raw = os.fsdecode(raw)
    return FORMAT_JSON if os.path.splitext(raw)[1].lower() == ".json" else FORMAT_MARKDOWN


def _coerce_schema(schema: Any, path: str):
    if isinstance(schema, Mapping):
        return JsonSchema(dict(schema))
    if not callable(getattr(schema, "validate", None)):
        raise ContentError(
            f"Schema must provide a validate() method, got {type(schema).__name__}",
            path,
        )
    return schema


def build_collection(config: CollectionConfig) -> Collection:
    """Load, validate and transform one collection.

    Args:
        config: Source path and the optional format, schema, transform and
            content path field

    Returns:
        Frozen Collection

    Raises:
        ContentError: If the format is unknown, the source cannot be loaded,
            a record fails validation, or the transform does not return
            an iterable of records
    """
    path = config.path
    origin = str(path)

    fmt = config.format if config.format is not None else infer_format(path)
    if fmt not in FORMATS:
        raise ContentError(
            f"Unsupported collection format: {fmt!r} (expected one of {', '.join(FORMATS)})",
            origin,
        )

    schema = _coerce_schema(config.schema, origin) if config.schema is not None else None

    if fmt == FORMAT_JSON:
        items = load_json_collection(path, content_path_field=config.content_path_field)
    else:
        items = load_markdown_collection(path)

    if schema is not None:
        items = validate_items(items, schema, origin)

    if config.transform is not None:
        transformed = config.transform(items)
        try:
            items = list(transformed)
        except TypeError as e:
            raise ContentError(
                f"Transform must return a sequence of records, got {type(transformed).__name__}",
                origin,
            ) from e

    logger.info(f"Built {fmt} collection from {origin} with {len(items)} items")
    return Collection(items)


def define_collection(
    path,
    *,
    format: Optional[str] = None,
    schema: Any = None,
    transform: Optional[Transform] = None,
    content_path_field: str = DEFAULT_CONTENT_PATH_FIELD,
) -> Collection:
    """Define a content collection from a JSON file or Markdown directory.

    Args:
        path: JSON file holding an array, or directory of .md/.mdx files;
            relative to the working directory or absolute
        format: "json" or "md"; inferred from ``path`` when omitted
        schema: Object with ``validate(value) -> SchemaResult`` or a JSON
            Schema mapping, applied to every record
        transform: Called once with all validated records; its return
            value becomes the collection
        content_path_field: JSON record field naming a Markdown file to
            merge in as ``body``

    Returns:
        Collection with ``all()`` and ``get_by_id()``

    Raises:
        ContentError: On any loading, validation or configuration failure

    Example:
        >>> products = define_collection(
        ...     "data/products.json",
        ...     transform=lambda items: sorted(items, key=lambda p: p["price"]),
        ... )
        >>> products.get_by_id("missing") is None
        True
    """
    return build_collection(CollectionConfig(
        path=path,
        format=format,
        schema=schema,
        transform=transform,
        content_path_field=content_path_field,
    ))


def load_collections(config: Dict[str, Any]) -> Dict[str, Collection]:
    """Build every collection named in a loaded manifest, in manifest order."""
    return {
        name: build_collection(collection_config)
        for name, collection_config in get_collection_configs(config).items()
    }
