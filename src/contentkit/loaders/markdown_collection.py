"""
Markdown Collection Loader.

Loads every Markdown file directly inside one directory (no recursion) and
turns each into a record: the YAML frontmatter fields plus a ``body`` field
holding the Markdown after the frontmatter block.

Process:
    1. Resolve the directory path
    2. Check it exists and is a directory
    3. List entries in filesystem order
    4. Keep regular files with a .md or .mdx extension (case-insensitive);
       entries that cannot be stat-ed are skipped
    5. Fail if nothing is left
    6. Read each file and split it with the python-frontmatter YAML handler;
       the body keeps its whitespace, only the line break closing the
       frontmatter block is removed

Record Shape:
    {**frontmatter, "body": "<markdown after frontmatter>"}

    A frontmatter key named ``body`` is overwritten by the parsed body.

Example:
    >>> records = load_markdown_collection("content/posts")
    >>> records[0]
    {'id': 'hello', 'title': 'Hello', 'body': 'First post.'}
"""
import logging
import os
import stat
from typing import Any, Dict, List

import frontmatter
import yaml

from contentkit.errors import ContentError
from contentkit.loaders.paths import describe_os_error, resolve_path

logger = logging.getLogger(__name__)

# Extensions recognized as content files, compared lower-cased
MARKDOWN_EXTENSIONS = (".md", ".mdx")

_YAML_HANDLER = frontmatter.YAMLHandler()


def _is_content_file(path) -> bool:
    """Check extension and file type, treating stat failures as "no"."""
    if os.path.splitext(path.name)[1].lower() not in MARKDOWN_EXTENSIONS:
        return False
    try:
        return path.is_file()
    except OSError as e:
        logger.debug(f"Skipping {path}: cannot stat ({describe_os_error(e)})")
        return False


def _split_frontmatter(content: str):
    """Return the raw frontmatter block and the body, or None without frontmatter.

    The body starts on the line after the closing ``---``; nothing else is
    trimmed from it.
    """
    boundaries = _YAML_HANDLER.FM_BOUNDARY.finditer(content)
    opening = next(boundaries, None)
    if opening is None or opening.start() != 0:
        return None

    closing = next(boundaries, None)
    if closing is None:
        raise ValueError("frontmatter block is not closed")

    line_end = content.find("\n", closing.start())
    body = "" if line_end == -1 else content[line_end + 1:]
    return content[opening.end():closing.start()], body


def _parse_markdown(content: str, file_path: str) -> Dict[str, Any]:
    # The YAML handler is used directly: frontmatter.parse() strips the body
    # and drops frontmatter that is not a mapping.
    if content.startswith("\ufeff"):
        content = content[1:]

    try:
        parts = _split_frontmatter(content)
        if parts is None:
            return {"body": content}
        raw, body = parts
        metadata = _YAML_HANDLER.load(raw)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        raise ContentError(
            f"Failed to parse frontmatter: {e}",
            file_path,
        ) from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ContentError(
            f"Failed to parse frontmatter: frontmatter must be a mapping, got {type(metadata).__name__}",
            file_path,
        )

    record = dict(metadata)
    record["body"] = body
    return record


def load_markdown_collection(dir_path) -> List[Dict[str, Any]]:
    """Load all Markdown files in a directory as records.

    Args:
        dir_path: Directory containing .md/.mdx files, relative to the
            working directory or absolute

    Returns:
        One record per file, in directory listing order

    Raises:
        ContentError: If the directory cannot be resolved, accessed or
            listed, is not a directory, holds no Markdown files, or any
            file cannot be read or has malformed frontmatter
    """
    resolved = resolve_path(dir_path, "directory")

    try:
        stats = resolved.stat()
    except (OSError, ValueError) as e:
        raise ContentError(
            f"Failed to access directory: {describe_os_error(e)}",
            str(resolved),
        ) from e

    if not stat.S_ISDIR(stats.st_mode):
        raise ContentError(
            f"Path is not a directory: {resolved}",
            str(resolved),
        )

    try:
        names = os.listdir(resolved)
    except OSError as e:
        raise ContentError(
            f"Failed to read directory: {describe_os_error(e)}",
            str(resolved),
        ) from e

    markdown_files = [resolved / name for name in names if _is_content_file(resolved / name)]

    if not markdown_files:
        raise ContentError(
            f"No .md or .mdx files found in directory: {resolved}",
            str(resolved),
        )

    logger.debug(f"Found {len(markdown_files)} markdown files in {resolved}")

    items = []
    for file_path in markdown_files:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, ValueError) as e:
            raise ContentError(
                f"Failed to read file: {describe_os_error(e)}",
                str(file_path),
            ) from e

        items.append(_parse_markdown(content, str(file_path)))

    return items
