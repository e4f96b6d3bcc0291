"""
Record validation.

Runs every loaded record through a schema and keeps the schema's normalized
output. Validation is fail-fast: the first invalid record raises a
ContentError carrying its index and every field error for that record, and
later records are never looked at.
"""
import logging
from typing import Any, List, Sequence

from contentkit.errors import ContentError
from contentkit.types import Schema

logger = logging.getLogger(__name__)


def format_field_errors(errors) -> str:
    """Join field errors as ``"<path>: <message>"`` separated by commas."""
    return ", ".join(error.render() for error in errors)


def validate_items(items: Sequence[Any], schema: Schema, file_path: str) -> List[Any]:
    """Validate records in order and return their normalized values.

    Args:
        items: Candidate records as loaded from the source
        schema: Object exposing ``validate(value) -> SchemaResult``
        file_path: Source the records came from, used as error context

    Returns:
        Normalized records, same order and length as ``items``

    Raises:
        ContentError: On the first record the schema rejects, with
            ``item_index`` set to that record's position
    """
    validated = []

    for index, item in enumerate(items):
        try:
            result = schema.validate(item)
        except ContentError:
            raise
        except Exception as e:
            raise ContentError(
                f"Schema raised an error: {e}",
                file_path,
                index,
            ) from e

        if not result.ok:
            raise ContentError(
                f"Validation failed: {format_field_errors(result.errors)}",
                file_path,
                index,
            )

        validated.append(result.value)

    logger.debug(f"Validated {len(validated)} items from {file_path}")
    return validated
