"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .page_sizes import (
    PageSize,
    PageDimensions,
    CardDimensions,
    PAGE_SIZES,
    DEFAULT_CARD_DIMENSIONS,
    resolve_page_dimensions,
)

__all__ = [
    "PageSize",
    "PageDimensions",
    "CardDimensions",
    "PAGE_SIZES",
    "DEFAULT_CARD_DIMENSIONS",
    "resolve_page_dimensions",
]
