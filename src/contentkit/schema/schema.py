"""
JSON Schema Validation Module.

This module adapts the jsonschema library to the schema capability that
contentkit collections expect: ``validate(value)`` returning a SchemaResult
with either a normalized value or a list of field-level errors.

Validator Selection:
    The validator class is picked from the document's ``$schema`` keyword
    (jsonschema.validators.validator_for), falling back to Draft 7 when the
    keyword is absent. The schema document itself is checked once, at
    construction time.

Normalization:
    jsonschema only reports errors; it never changes the instance. On
    success JsonSchema returns a deep copy of the record with every missing
    property that declares a ``default`` filled in, recursively through
    nested ``properties`` and array ``items``. The caller's record is never
    modified.

Error Reporting:
    Every jsonschema error for the record becomes one FieldError, keyed by
    the absolute path of the failing field. For example a record missing
    "title" yields:
        FieldError(path=(), message="'title' is a required property")
"""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict

from jsonschema import Draft7Validator, SchemaError, validators

from contentkit.errors import ContentError
from contentkit.types import FieldError, SchemaResult

logger = logging.getLogger(__name__)


def _apply_defaults(value: Any, schema: Dict[str, Any]) -> Any:
    """Fill declared defaults into ``value`` in place and return it."""
    if not isinstance(schema, dict):
        return value

    if isinstance(value, dict):
        for name, subschema in schema.get("properties", {}).items():
            if not isinstance(subschema, dict):
                continue
            if name not in value and "default" in subschema:
                value[name] = copy.deepcopy(subschema["default"])
            if name in value:
                _apply_defaults(value[name], subschema)
    elif isinstance(value, list) and isinstance(schema.get("items"), dict):
        for element in value:
            _apply_defaults(element, schema["items"])

    return value


class JsonSchema:
    """Schema capability backed by a JSON Schema document.

    Args:
        schema: JSON Schema document as a mapping
        apply_defaults: Fill in ``default`` values for missing properties
            on successfully validated records

    Raises:
        ContentError: If ``schema`` is not a valid JSON Schema document

    Example:
        >>> schema = JsonSchema({
        ...     "type": "object",
        ...     "properties": {"draft": {"type": "boolean", "default": False}},
        ...     "required": ["id"],
        ... })
        >>> schema.validate({"id": "a"}).value
        {'id': 'a', 'draft': False}
        >>> schema.validate({}).errors
        [FieldError(path=(), message="'id' is a required property")]
    """

    def __init__(self, schema: Dict[str, Any], apply_defaults: bool = True):
        validator_cls = validators.validator_for(schema, default=Draft7Validator)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as e:
            raise ContentError(f"Invalid JSON schema: {e.message}") from e

        self.schema = schema
        self.apply_defaults = apply_defaults
        self._validator = validator_cls(schema)

    def validate(self, value: Any) -> SchemaResult:
        errors = [
            FieldError(tuple(error.absolute_path), error.message)
            for error in self._validator.iter_errors(value)
        ]
        if errors:
            return SchemaResult(errors=errors)

        normalized = copy.deepcopy(value)
        if self.apply_defaults:
            normalized = _apply_defaults(normalized, self.schema)
        return SchemaResult(value=normalized)

    def __repr__(self) -> str:
        title = self.schema.get("title") if isinstance(self.schema, dict) else None
        return f"JsonSchema({title or self._validator.__class__.__name__})"


def load_schema(schema_path) -> Dict[str, Any]:
    """
    Load a JSON Schema document from disk.

    Args:
        schema_path: Path to a JSON file holding the schema document

    Returns:
        Parsed schema as a dictionary, ready for JsonSchema

    Raises:
        ContentError: If the file does not exist, cannot be read, does not
            contain valid JSON, or its top level is not an object

    Example:
        >>> schema = load_schema("schemas/post.schema.json")
        >>> schema["$schema"]
        'http://json-schema.org/draft-07/schema#'
    """
    path = Path(schema_path)

    if not path.exists():
        raise ContentError(f"Schema file not found: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in schema file: {e}", str(path)) from e
    except (OSError, ValueError) as e:
        raise ContentError(f"Failed to read schema file: {e}", str(path)) from e

    if not isinstance(schema, dict):
        raise ContentError("Schema file must contain a JSON object", str(path))

    logger.debug(f"Loaded schema from {path}")
    return schema
