"""
Shared types for contentkit.

Records are plain mappings from field name to JSON/YAML value. Schemas are
any object with a ``validate(value)`` method returning a SchemaResult, so
callers can plug in whichever validation library fits (the bundled
``schema.JsonSchema`` adapter wraps jsonschema).
"""
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Tuple, Union, runtime_checkable


Record = Dict[str, Any]
Transform = Callable[[List[Any]], Iterable[Any]]

FORMAT_JSON = "json"
FORMAT_MARKDOWN = "md"
FORMATS = (FORMAT_JSON, FORMAT_MARKDOWN)

DEFAULT_CONTENT_PATH_FIELD = "contentPath"


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure.

    Attributes:
        path: Keys and indexes leading to the failing field, empty for the root
        message: What constraint was violated
    """
    path: Tuple[Union[str, int], ...]
    message: str

    def render(self) -> str:
        """``"<path>: <message>"``, or just the message for the root."""
        if not self.path:
            return self.message
        path_str = ".".join(str(p) for p in self.path)
        return f"{path_str}: {self.message}"


@dataclass(frozen=True)
class SchemaResult:
    """Outcome of applying a schema to one candidate value.

    On success ``value`` holds the normalized value and ``errors`` is empty.
    """
    value: Any = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@runtime_checkable
class Schema(Protocol):
    """Anything that can normalize a value or report field-level errors."""

    def validate(self, value: Any) -> SchemaResult:
        ...


@dataclass(frozen=True)
class CollectionConfig:
    """Options for assembling one collection.

    Attributes:
        path: JSON file or Markdown directory
        format: "json" or "md"; inferred from ``path`` when None
        schema: Schema object or JSON Schema mapping applied to every record
        transform: Called once with the validated records, its result
            replaces them
        content_path_field: Field on JSON records naming a Markdown file
            to merge in as ``body``
    """
    path: Union[str, "os.PathLike[str]"]
    format: Optional[str] = None
    schema: Optional[Any] = None
    transform: Optional[Transform] = None
    content_path_field: str = DEFAULT_CONTENT_PATH_FIELD
