"""
Core Utilities Package

Serialization helpers for the catalog and renderer boundaries.
"""

from .serialization import (
    serialize_item,
    deserialize_item,
    items_from_records,
    load_items_json,
    serialize_pair,
    serialize_page,
    serialize_pages,
)

__all__ = [
    "serialize_item",
    "deserialize_item",
    "items_from_records",
    "load_items_json",
    "serialize_pair",
    "serialize_page",
    "serialize_pages",
]
