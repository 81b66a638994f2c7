"""
Module: common.page_sizes

Purpose:
    Physical page and card dimensions in millimetres. The layout
    calculator derives the cell grid (cells per row, rows per page)
    from these.

Key Functions:
    - resolve_page_dimensions(): Dimensions for a named or custom page size

Key Classes:
    - PageSize: Named paper sizes
    - PageDimensions: Page width/height
    - CardDimensions: Separator card width/height plus tab height

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.config: SeparatorConfig
    - builder.layout.config: calculate_cells_per_page
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PageSize(Enum):
    """Supported paper sizes."""

    A4 = "a4"
    LETTER = "letter"
    LEGAL = "legal"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: "PageSize | str") -> "PageSize":
        """Accept an enum member or its case-insensitive string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown page size {value!r} (expected one of: {valid})") from e


@dataclass(frozen=True)
class PageDimensions:
    """Page size in millimetres (immutable)."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"page width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"page height must be positive: {self.height}")


@dataclass(frozen=True)
class CardDimensions:
    """
    Separator card size in millimetres (immutable).

    Attributes:
        width: Card width
        height: Card height including the tab
        tab_height: Height of the labelled tab strip
    """

    width: float
    height: float
    tab_height: float = 0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"card width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"card height must be positive: {self.height}")
        if not (0 <= self.tab_height < self.height):
            raise ValueError(
                f"tab_height must be in [0, height): {self.tab_height} (height {self.height})"
            )


# Standard trading card separator: 65 x 95 mm with a 10 mm tab
DEFAULT_CARD_DIMENSIONS = CardDimensions(width=65, height=95, tab_height=10)

PAGE_SIZES: dict[PageSize, PageDimensions] = {
    PageSize.A4: PageDimensions(210, 297),
    PageSize.LETTER: PageDimensions(216, 279),
    PageSize.LEGAL: PageDimensions(216, 356),
    PageSize.CUSTOM: PageDimensions(210, 297),  # A4 until overridden
}


def resolve_page_dimensions(
    page_size: PageSize | str,
    custom: Optional[PageDimensions] = None,
) -> PageDimensions:
    """
    Resolve the physical dimensions of a page size.

    Args:
        page_size: Named size (enum or string value)
        custom: Explicit dimensions, used only for PageSize.CUSTOM

    Returns:
        PageDimensions for the size

    Example:
        >>> resolve_page_dimensions("letter")
        PageDimensions(width=216, height=279)
    """
    size = PageSize.parse(page_size)
    if size is PageSize.CUSTOM and custom is not None:
        return custom
    return PAGE_SIZES[size]
