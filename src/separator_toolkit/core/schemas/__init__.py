"""
Schema Validation Package

Validates catalog item records before they are turned into Item models.
"""

from .validator import (
    ITEM_SCHEMA_VERSION,
    ValidationError,
    detect_record_shape,
    validate_item_record,
)

__all__ = [
    "ITEM_SCHEMA_VERSION",
    "ValidationError",
    "detect_record_shape",
    "validate_item_record",
]
