"""
Module: builder.layout.flip

Purpose:
    Reorder the back face of a duplex sheet so that, once the printed
    sheet is turned over, each back image sits behind its front image.

Key Functions:
    - apply_flip_transformation(): Reorder one page of back faces
    - split_rows(): Row-major slicing with a ragged final row

Algorithm:
    LONG edge (book flip): the sheet turns around its vertical axis, so
    every row is mirrored independently. Rows stay in order and a partial
    last row is mirrored over its own cells only; no padding is added.

        [A B C]      [C B A]
        [D E]    ->  [E D]

    SHORT edge (calendar flip): the whole page is reversed as one flat
    list, whatever the row width.

        [A B]        [D C]
        [C D]    ->  [B A]

    Both transformations are involutions.

Dependencies:
    - builder.layout.config: require_positive
    - builder.layout.flip_edge: FlipEdge

Used By:
    - builder.layout.composer: Back page composition
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from .config import require_positive
from .flip_edge import FlipEdge

T = TypeVar("T")


def split_rows(cells: Sequence[T], cells_per_row: int) -> List[List[T]]:
    """
    Slice cells into raster rows of `cells_per_row`.

    Raises:
        InvalidPageCapacity: If cells_per_row <= 0
    """
    require_positive("cells_per_row", cells_per_row)
    return [
        list(cells[start:start + cells_per_row])
        for start in range(0, len(cells), cells_per_row)
    ]


def apply_flip_transformation(
    back_cells: Sequence[T],
    flip_edge: FlipEdge | str,
    cells_per_row: int,
) -> List[T]:
    """
    Apply the duplex flip to one page of back faces.

    Args:
        back_cells: Back faces in row-major order, before flipping
        flip_edge: LONG (book flip) or SHORT (calendar flip)
        cells_per_row: Row width of the page grid

    Returns:
        New list with the same elements, reordered

    Raises:
        InvalidPageCapacity: If cells_per_row <= 0
        ValueError: If flip_edge is not a known edge
    """
    require_positive("cells_per_row", cells_per_row)
    edge = FlipEdge.parse(flip_edge)

    if edge is FlipEdge.LONG:
        flipped: List[T] = []
        for row in split_rows(back_cells, cells_per_row):
            flipped.extend(reversed(row))
        return flipped

    # SHORT: a flat reversal, not a row-order swap
    return list(reversed(back_cells))
