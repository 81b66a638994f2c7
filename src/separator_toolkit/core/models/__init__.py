"""
Core Models Package

Immutable data models shared by every stage of the separator pipeline.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while pages are being composed
2. Safe to pass between threads (the pipeline holds no shared state)
3. Can be used as dict keys or in sets (renderers cache on items)
4. The blank boundary sentinel compares by value like any other item
"""

from .items import Item, BLANK_ITEM, create_blank_item, is_blank
from .separators import SeparatorPair
from .pages import Page, PageKind

__all__ = [
    "Item",
    "BLANK_ITEM",
    "create_blank_item",
    "is_blank",
    "SeparatorPair",
    "Page",
    "PageKind",
]
