"""
Pytest configuration and shared fixtures for all tests.

This module provides fixtures that lay out content sources on disk:
- write_file: write a text file under tmp_path, creating parent directories
- posts_dir: a directory of Markdown posts with frontmatter
- products_json: a JSON array where some records link to Markdown files
"""
import json

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Return a helper that writes ``content`` to ``tmp_path / relative``."""
    def _write(relative, content):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def posts_dir(write_file, tmp_path):
    """Directory with two Markdown posts, an MDX post and a stray text file."""
    write_file("posts/hello.md", "---\nid: hello\ntitle: Hello\n---\nFirst post.")
    write_file("posts/second.md", "---\nid: second\ntitle: Second\ntags:\n  - news\n---\nSecond post.")
    write_file("posts/interactive.mdx", "---\nid: interactive\ntitle: Interactive\n---\n<Chart />")
    write_file("posts/notes.txt", "not content")
    return tmp_path / "posts"


@pytest.fixture
def products_json(write_file, tmp_path):
    """JSON array with linked, unlinked and non-object items."""
    write_file("data/docs/p1.md", "Body text")
    products = [
        {"id": "p1", "name": "Widget", "contentPath": "docs/p1.md"},
        {"id": "p2", "name": "Gadget"},
        {"id": "p3", "name": "Empty link", "contentPath": ""},
        {"id": "p4", "name": "Numeric link", "contentPath": 42},
    ]
    return write_file("data/products.json", json.dumps(products))
