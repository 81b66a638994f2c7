"""
Schema Validation Utilities

Validates catalog item records against the item schema.

The catalog collaborator hands over cards in one of two shapes:

1. Display shape (what a UI already holds): ``id``, ``name`` and optional
   display attributes, with ``cardSetId`` or ``card_set_id``.
2. Catalog shape (raw database rows): ``card_set_id``, ``card_name`` and
   ``card_*`` prefixed attributes.

Basic checks run on every record and fail fast; full JSON Schema
validation runs when ``strict=True``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constant
ITEM_SCHEMA_VERSION = 1

DISPLAY_SHAPE = "display"
CATALOG_SHAPE = "catalog"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def detect_record_shape(data: dict[str, Any]) -> str:
    """
    Decide which record shape a catalog dict uses.

    Returns:
        "display" if the record carries ``name``, otherwise "catalog"
    """
    return DISPLAY_SHAPE if "name" in data else CATALOG_SHAPE


def validate_item_record(data: Any, *, strict: bool = False, path: str = "") -> None:
    """
    Validate a catalog item record.

    Args:
        data: Record dictionary to validate
        strict: If True, also validate against item.schema.json
        path: Location of the record for error messages (e.g. "[3]")

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Item record must be an object, got {type(data).__name__}",
            path=path,
        )

    shape = detect_record_shape(data)
    if shape == DISPLAY_SHAPE:
        required = ["id", "name"]
    else:
        required = ["card_set_id", "card_name"]

    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    for field_name in required:
        value = data[field_name]
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(
                f"Field {field_name!r} must be non-empty",
                path=_join(path, field_name),
            )

    if strict:
        schema = _load_schema("item")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=_join(path, ".".join(str(p) for p in e.absolute_path)),
                errors=[e.message]
            ) from e


def _join(prefix: str, field_name: str) -> str:
    if not prefix:
        return field_name
    if not field_name:
        return prefix
    return f"{prefix}.{field_name}"
