"""
Module: builder.layout.config

Purpose:
    Configuration for the separator page layout engine.
    Defines page capacity, grid width, flip edge and duplex mode, and the
    calculation that derives the grid from physical dimensions.

Key Functions:
    - calculate_cells_per_page(): Grid metrics from page and card size
    - require_positive(): Capacity validation shared by the layout stages

Key Classes:
    - LayoutConfig: Immutable layout configuration
    - GridMetrics: Columns, rows and cells per page
    - InvalidPageCapacity: Raised for non-positive capacities

Dependencies:
    - dataclasses (std)
    - common.page_sizes: PageDimensions, CardDimensions

Used By:
    - builder.layout.paginator: Chunk capacity
    - builder.layout.flip: Row width
    - builder.layout.composer: Page composition
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from separator_toolkit.common.page_sizes import CardDimensions, PageDimensions

from .flip_edge import FlipEdge


class InvalidPageCapacity(ValueError):
    """A page capacity or row width was zero or negative."""

    def __init__(self, field: str, value: int):
        super().__init__(f"{field} must be positive: {value}")
        self.field = field
        self.value = value


def require_positive(field: str, value: int) -> int:
    """
    Validate a capacity-like argument before any output is produced.

    Raises:
        InvalidPageCapacity: If value <= 0
    """
    if value <= 0:
        raise InvalidPageCapacity(field, value)
    return value


@dataclass(frozen=True)
class GridMetrics:
    """
    Cell grid of one printed page.

    Attributes:
        cells_per_row: Columns across the page
        rows_per_page: Rows down the page
    """

    cells_per_row: int
    rows_per_page: int

    @property
    def cells_per_page(self) -> int:
        """Page capacity (columns x rows)."""
        return self.cells_per_row * self.rows_per_page

    @property
    def is_usable(self) -> bool:
        """False when the card does not fit on the page at all."""
        return self.cells_per_page > 0


def calculate_cells_per_page(page: PageDimensions, card: CardDimensions) -> GridMetrics:
    """
    Derive the page grid from physical dimensions.

    Cards are placed edge to edge with no gutter, so the grid is the
    floor of page size over card size in each direction.

    Example:
        >>> calculate_cells_per_page(PageDimensions(210, 297), CardDimensions(65, 95, 10))
        GridMetrics(cells_per_row=3, rows_per_page=3)
    """
    return GridMetrics(
        cells_per_row=math.floor(page.width / card.width),
        rows_per_page=math.floor(page.height / card.height),
    )


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for separator page layout (immutable).

    Attributes:
        page_capacity: Separators per printed page
        cells_per_row: Row width of the page grid
        flip_edge: Edge the sheet is flipped along when duplex
        duplex: Emit a back page after every front page

    Example:
        >>> config = LayoutConfig(page_capacity=9, cells_per_row=3)
        >>> config.rows_per_page
        3
    """

    page_capacity: int
    cells_per_row: int
    flip_edge: FlipEdge = FlipEdge.LONG
    duplex: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        require_positive("page_capacity", self.page_capacity)
        require_positive("cells_per_row", self.cells_per_row)
        if not isinstance(self.flip_edge, FlipEdge):
            object.__setattr__(self, "flip_edge", FlipEdge.parse(self.flip_edge))

    @property
    def rows_per_page(self) -> int:
        """Rows needed for a full page (last row may be partial)."""
        return math.ceil(self.page_capacity / self.cells_per_row)

    @classmethod
    def from_grid(
        cls,
        grid: GridMetrics,
        *,
        flip_edge: FlipEdge = FlipEdge.LONG,
        duplex: bool = False,
    ) -> "LayoutConfig":
        """
        Build a layout config from grid metrics.

        Raises:
            InvalidPageCapacity: If the grid holds no cells
        """
        return cls(
            page_capacity=grid.cells_per_page,
            cells_per_row=grid.cells_per_row,
            flip_edge=flip_edge,
            duplex=duplex,
        )

    @classmethod
    def from_dimensions(
        cls,
        page: PageDimensions,
        card: CardDimensions,
        *,
        flip_edge: FlipEdge = FlipEdge.LONG,
        duplex: bool = False,
    ) -> "LayoutConfig":
        """Build a layout config straight from physical dimensions."""
        return cls.from_grid(
            calculate_cells_per_page(page, card),
            flip_edge=flip_edge,
            duplex=duplex,
        )
