"""
Module: builder.layout.models

Purpose:
    Result model for a composed separator layout.

Key Classes:
    - LayoutResult: Ordered pages plus diagnostics

Dependencies:
    - dataclasses (std)
    - core.models: Page

Used By:
    - builder.layout.composer: Creates LayoutResult
    - builder.controller: BuildResult
"""

from __future__ import annotations

from dataclasses import dataclass, field

from separator_toolkit.core.models import Page


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Pages in print order (front, back, front, back, ... when duplex)
        sheet_count: Number of physical sheets (chunks)
        warnings: List of warning messages

    Example:
        >>> result = compose_pages(pairs, LayoutConfig(6, 3, duplex=True))
        >>> result.page_count, result.sheet_count
        (2, 1)
    """

    pages: tuple[Page, ...]
    sheet_count: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def front_pages(self) -> tuple[Page, ...]:
        return tuple(p for p in self.pages if p.is_front)

    @property
    def back_pages(self) -> tuple[Page, ...]:
        return tuple(p for p in self.pages if p.is_back)

    @property
    def total_cells(self) -> int:
        """Total number of cells across all pages."""
        return sum(p.cell_count for p in self.pages)
