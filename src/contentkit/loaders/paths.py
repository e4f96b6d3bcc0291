"""Path helpers shared by the loaders."""
import os
from pathlib import Path
from typing import Optional

from contentkit.errors import ContentError


def resolve_path(path, description: str, base: Optional[Path] = None) -> Path:
    """Resolve ``path`` to an absolute path without touching the filesystem.

    Relative paths are resolved against ``base`` when given, otherwise
    against the process working directory.

    Args:
        path: Path-like value to resolve
        description: Noun used in the error message, e.g. "file" or
            "markdown file"
        base: Optional directory to resolve relative paths against

    Returns:
        Absolute, normalized Path

    Raises:
        ContentError: If the value is not a usable path
    """
    try:
        raw = os.fspath(path)
        if base is not None:
            raw = os.path.join(os.fspath(base), raw)
        return Path(os.path.abspath(raw))
    except (TypeError, ValueError, OSError) as e:
        raise ContentError(
            f"Failed to resolve {description} path: {path}",
            None if path is None else str(path),
        ) from e


def describe_os_error(error: BaseException) -> str:
    """Short reason for an I/O failure, without the repeated file name."""
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error) or error.__class__.__name__
