"""contentkit - File-Backed Content Collections.

This package loads structured content at build time from either a JSON file
holding an array or a directory of Markdown files with YAML frontmatter,
optionally validates every record against a schema, optionally reshapes the
records with a transform, and exposes the result as a read-only Collection.

JSON records can link to Markdown files through a ``contentPath`` field;
the linked file's raw text is merged in as ``body``.

Exported Names:
    define_collection: Build a collection from a path and options
    build_collection: Build a collection from a CollectionConfig
    load_collections: Build every collection in a loaded manifest
    Collection: The read-only result, with all() and get_by_id()
    CollectionConfig: Options for one collection
    ContentError: The single error type raised for every failure
    FieldError, SchemaResult, Schema: The schema capability types

Example:
    >>> from contentkit import define_collection
    >>> posts = define_collection("content/posts")
    >>> posts.get_by_id("hello")["body"]
    'First post.'
"""
from .errors import ContentError
from .types import CollectionConfig, FieldError, Schema, SchemaResult
from .collection import Collection, build_collection, define_collection, load_collections

__version__ = "0.1.0"

__all__ = [
    "Collection",
    "CollectionConfig",
    "ContentError",
    "FieldError",
    "Schema",
    "SchemaResult",
    "build_collection",
    "define_collection",
    "load_collections",
]
