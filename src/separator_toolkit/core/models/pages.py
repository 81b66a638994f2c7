"""
Module: pages

Purpose:
    Printable page records handed to the external renderer. Each page is
    an ordered tuple of cells in row-major raster order.

Key Classes:
    - PageKind: Front or back face of a printed sheet
    - Page: One printable page

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.layout.composer: Creates pages
    - core.utils.serialization: Page hand-off format
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .items import Item


class PageKind(Enum):
    """Which face of a printed sheet a page represents."""

    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class Page:
    """
    A single printable page (immutable).

    Attributes:
        kind: FRONT or BACK
        cells: Cells in row-major order; shorter than capacity only on the
            last sheet of a run
        index: Position in the emitted page sequence (0-indexed)
        sheet: Physical sheet number; a back page shares its front's sheet

    Example:
        >>> page = Page(PageKind.FRONT, cells=(item1, item2, item3), index=0, sheet=0)
        >>> [len(row) for row in page.rows(2)]
        [2, 1]
    """

    kind: PageKind
    cells: tuple[Item, ...]
    index: int = 0
    sheet: int = 0

    @property
    def cell_count(self) -> int:
        """Number of cells on this page."""
        return len(self.cells)

    @property
    def is_front(self) -> bool:
        return self.kind is PageKind.FRONT

    @property
    def is_back(self) -> bool:
        return self.kind is PageKind.BACK

    def rows(self, cells_per_row: int) -> list[tuple[Item, ...]]:
        """
        Split cells into raster rows.

        The final row is ragged when the page is not full.

        Raises:
            ValueError: If cells_per_row is not positive
        """
        if cells_per_row <= 0:
            raise ValueError(f"cells_per_row must be positive: {cells_per_row}")
        return [
            self.cells[start:start + cells_per_row]
            for start in range(0, len(self.cells), cells_per_row)
        ]
