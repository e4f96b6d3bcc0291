"""
Content Error Model.

Every failure raised while loading, validating or assembling a collection
surfaces as a ContentError. There is deliberately one error type: callers
branch on the context fields that are present rather than on subclasses.

Attributes carried by every error:
    message: Human-readable description of what went wrong
    file_path: File or directory the failure originated from (optional)
    item_index: Position of the offending item (optional). For JSON sources
        this is the array index; index 0 is a real position.

Example:
    >>> err = ContentError("Validation failed: title: Required", "posts.json", 2)
    >>> print(err)
    Validation failed: title: Required
      File: posts.json
      Item index: 2
"""
from typing import Optional


class ContentError(Exception):
    """Raised when content cannot be loaded, parsed or validated."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        item_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.file_path = None if file_path is None else str(file_path)
        self.item_index = item_index

    def __str__(self) -> str:
        rendered = self.message
        if self.file_path:
            rendered += f"\n  File: {self.file_path}"
        if self.item_index is not None:
            rendered += f"\n  Item index: {self.item_index}"
        return rendered

    def __repr__(self) -> str:
        return (
            f"ContentError({self.message!r}, file_path={self.file_path!r}, "
            f"item_index={self.item_index!r})"
        )
