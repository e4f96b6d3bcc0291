"""
Single Markdown File Reader.

Reads one Markdown (``.md``) or MDX (``.mdx``) file as raw text. Nothing is
parsed: frontmatter, if present, stays in the returned string and MDX is not
compiled. The JSON loader uses this to merge linked Markdown bodies into
records; it is also usable on its own.

Error Handling:
    - Unusable path value: "Failed to resolve markdown file path: ..."
    - Missing file: "Markdown file not found: ..."
    - Any other I/O or decoding failure: "Failed to read markdown file: ..."
    All are raised as ContentError with the resolved path attached.
"""
import logging

from contentkit.errors import ContentError
from contentkit.loaders.paths import describe_os_error, resolve_path

logger = logging.getLogger(__name__)


def load_markdown_file(file_path) -> str:
    """Load a Markdown or MDX file as a raw string.

    Args:
        file_path: Path to the file, relative to the working directory or
            absolute

    Returns:
        Full file content, unmodified

    Raises:
        ContentError: If the path cannot be resolved, the file does not
            exist, or it cannot be read as UTF-8 text

    Example:
        >>> load_markdown_file("docs/intro.md")
        '---\\ntitle: Intro\\n---\\n# Intro\\n'
    """
    resolved = resolve_path(file_path, "markdown file")

    try:
        # newline="" keeps line endings exactly as stored
        with open(resolved, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except FileNotFoundError as e:
        raise ContentError(
            f"Markdown file not found: {file_path}",
            str(resolved),
        ) from e
    except (OSError, ValueError) as e:
        raise ContentError(
            f"Failed to read markdown file: {describe_os_error(e)}",
            str(resolved),
        ) from e

    logger.debug(f"Read {len(content)} characters from {resolved}")
    return content
