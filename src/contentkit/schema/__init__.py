"""Schema Package - JSON Schema Loading and Validation.

This package provides the jsonschema-backed implementation of the schema
capability used by contentkit collections, plus a loader for JSON Schema
documents stored on disk.

The collection pipeline itself only needs an object with a
``validate(value) -> SchemaResult`` method; JsonSchema is the bundled one.
A plain JSON Schema mapping passed as a collection's ``schema`` is wrapped
in JsonSchema automatically.

Available Helpers:
    JsonSchema: Validates records against a JSON Schema document and fills
        in declared ``default`` values
    load_schema: Reads a JSON Schema document from a file

Usage Patterns:
    # From a mapping:
    from contentkit.schema import JsonSchema
    schema = JsonSchema({"type": "object", "required": ["id"]})

    # From a file:
    from contentkit.schema import load_schema
    schema = JsonSchema(load_schema("schemas/post.schema.json"))

Error Handling:
    Missing or invalid schema files, and schema documents that are not valid
    JSON Schema, raise ContentError with the offending path attached.
"""
from .schema import JsonSchema, load_schema

__all__ = ["JsonSchema", "load_schema"]
