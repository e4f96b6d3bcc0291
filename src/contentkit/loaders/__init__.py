"""Loaders Package - Reading Content Sources From Disk.

This package turns files on disk into lists of records. Every loader is
synchronous and raises ContentError for any failure; none of them validate
or transform records, that happens in contentkit.collection.

Available Loaders:
    load_markdown_file: One Markdown/MDX file as raw text
    load_markdown_collection: A directory of Markdown files with frontmatter,
        one record per file
    load_json_collection: A JSON array file, with optional per-record
        Markdown linking through a content path field

Usage:
    from contentkit.loaders import load_json_collection
    records = load_json_collection("data/products.json")
"""
from .markdown_file import load_markdown_file
from .markdown_collection import MARKDOWN_EXTENSIONS, load_markdown_collection
from .json_collection import load_json_collection

__all__ = [
    "MARKDOWN_EXTENSIONS",
    "load_json_collection",
    "load_markdown_collection",
    "load_markdown_file",
]
