"""
Serialization Utilities

Provides to/from JSON utilities for the separator models.

Two boundaries are covered:

- Inbound: catalog records (display or catalog shape) become ``Item``
  instances. Numeric cost/power are rendered as strings and missing
  display attributes become "".
- Outbound: ``Page`` records become plain dictionaries for the external
  renderer. Cells keep raster order; nothing is padded.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from ..models.items import Item
from ..models.pages import Page
from ..models.separators import SeparatorPair
from ..schemas.validator import (
    CATALOG_SHAPE,
    ValidationError,
    detect_record_shape,
    validate_item_record,
)

logger = logging.getLogger(__name__)

# Catalog shape column -> Item attribute
_CATALOG_FIELDS = {
    "card_image_url": "image",
    "card_color": "color",
    "card_type": "type",
    "card_cost": "cost",
    "card_power": "power",
    "rarity": "rarity",
    "attribute": "attribute",
}

_DISPLAY_FIELDS = ("cost", "power", "image", "color", "type", "rarity", "attribute")


# ─────────────────────────────────────────────────────────────────────────────
# Item Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_item(item: Item) -> dict[str, Any]:
    """Serialize an Item to a dictionary (display shape)."""
    return item.to_dict()


def deserialize_item(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
    path: str = "",
) -> Item:
    """
    Deserialize an Item from either record shape.

    Args:
        data: Record dictionary from the catalog
        validate: Whether to validate before parsing
        strict: Use full JSON Schema validation
        path: Location of the record for error messages

    Returns:
        Item instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_item_record(data, strict=strict, path=path)

    if detect_record_shape(data) == CATALOG_SHAPE:
        card_set_id = _text(data["card_set_id"])
        return Item(
            id=card_set_id,
            card_set_id=card_set_id,
            name=_text(data["card_name"]),
            **{attr: _text(data.get(column)) for column, attr in _CATALOG_FIELDS.items()},
        )

    item_id = _text(data["id"])
    card_set_id = data.get("cardSetId", data.get("card_set_id")) or item_id
    return Item(
        id=item_id,
        card_set_id=_text(card_set_id),
        name=_text(data["name"]),
        **{attr: _text(data.get(attr)) for attr in _DISPLAY_FIELDS},
    )


def _text(value: Any) -> str:
    """Render a scalar record value as display text."""
    if value is None:
        return ""
    return str(value)


def items_from_records(
    records: Iterable[dict[str, Any]],
    *,
    strict: bool = False,
) -> list[Item]:
    """
    Convert catalog records to Items, preserving order.

    Raises:
        ValidationError: On the first invalid record, with its index in path
    """
    return [
        deserialize_item(record, strict=strict, path=f"[{i}]")
        for i, record in enumerate(records)
    ]


def load_items_json(path: Path, *, strict: bool = False) -> list[Item]:
    """
    Load an ordered item list from a JSON file.

    Accepts a top-level array of records, or an object with a ``cards``
    (or ``items``) array as returned by the catalog API.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON structure is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Items file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in {path}: {e}", path=str(path)) from e

    if isinstance(payload, dict):
        records = payload.get("cards", payload.get("items"))
    else:
        records = payload

    if not isinstance(records, list):
        raise ValidationError(
            f"Expected a list of item records in {path}",
            path=str(path),
        )

    items = items_from_records(records, strict=strict)
    logger.debug(f"Loaded {len(items)} items from {path}")
    return items


# ─────────────────────────────────────────────────────────────────────────────
# Layout Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_pair(pair: SeparatorPair) -> dict[str, Any]:
    """Serialize a SeparatorPair to a dictionary."""
    return {
        "position": pair.position,
        "front": serialize_item(pair.front),
        "back": serialize_item(pair.back),
    }


def serialize_page(page: Page) -> dict[str, Any]:
    """
    Serialize a Page for the renderer.

    Returns:
        ``{"kind", "index", "sheet", "cells"}`` with cells in raster order
    """
    return {
        "kind": page.kind.value,
        "index": page.index,
        "sheet": page.sheet,
        "cells": [serialize_item(cell) for cell in page.cells],
    }


def serialize_pages(pages: Sequence[Page]) -> list[dict[str, Any]]:
    """Serialize an ordered page run."""
    return [serialize_page(page) for page in pages]
