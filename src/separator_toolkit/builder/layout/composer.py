"""
Module: builder.layout.composer

Purpose:
    Compose separator pairs into the final ordered run of printable pages,
    alternating front and back pages when printing duplex.

Key Functions:
    - generate_print_pages(): Pages from explicit layout parameters
    - compose_pages(): Pages plus diagnostics from a LayoutConfig

Algorithm:
    1. Chunk the pairs by page capacity (one chunk per sheet)
    2. For each chunk, emit a FRONT page of the front faces in chunk order
    3. If duplex, flip the chunk's back faces and emit a BACK page
       directly after its front page

Dependencies:
    - builder.layout.paginator: chunk_separators
    - builder.layout.flip: apply_flip_transformation
    - core.models: Page, PageKind, SeparatorPair

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from separator_toolkit.core.models import Page, PageKind, SeparatorPair

from .config import LayoutConfig, require_positive
from .flip import apply_flip_transformation
from .flip_edge import FlipEdge
from .models import LayoutResult
from .paginator import chunk_separators

logger = logging.getLogger(__name__)


def generate_print_pages(
    separators: Sequence[SeparatorPair],
    separators_per_page: int,
    flip_edge: FlipEdge | str,
    cells_per_row: int,
    double_sided: bool,
) -> List[Page]:
    """
    Generate print pages from separator pairs.

    Args:
        separators: Full separator run from generate_separator_pairs()
        separators_per_page: Page capacity
        flip_edge: Edge the sheet is flipped along (duplex only)
        cells_per_row: Row width of the page grid
        double_sided: Emit a flipped back page after every front page

    Returns:
        Pages in print order. Empty input gives an empty list.

    Raises:
        InvalidPageCapacity: If separators_per_page or cells_per_row <= 0
    """
    require_positive("page_capacity", separators_per_page)
    require_positive("cells_per_row", cells_per_row)
    edge = FlipEdge.parse(flip_edge)

    pages: List[Page] = []
    for sheet, chunk in enumerate(chunk_separators(separators, separators_per_page)):
        # Front page: front face of each separator, unmodified
        pages.append(Page(
            kind=PageKind.FRONT,
            cells=tuple(sep.front for sep in chunk),
            index=len(pages),
            sheet=sheet,
        ))

        if double_sided:
            back_cells = [sep.back for sep in chunk]
            pages.append(Page(
                kind=PageKind.BACK,
                cells=tuple(apply_flip_transformation(back_cells, edge, cells_per_row)),
                index=len(pages),
                sheet=sheet,
            ))

    return pages


def compose_pages(
    separators: Sequence[SeparatorPair],
    config: LayoutConfig,
) -> LayoutResult:
    """
    Compose a full layout from a LayoutConfig.

    Args:
        separators: Full separator run
        config: Validated layout configuration

    Returns:
        LayoutResult with pages, sheet count and warnings
    """
    pages = generate_print_pages(
        separators,
        config.page_capacity,
        config.flip_edge,
        config.cells_per_row,
        config.duplex,
    )

    sheet_count = sum(1 for page in pages if page.is_front)
    warnings: List[str] = []

    if pages:
        empty_cells = config.page_capacity - pages[-1].cell_count
        if empty_cells > 0:
            warnings.append(
                f"Last sheet has {empty_cells} empty cell(s) "
                f"({pages[-1].cell_count}/{config.page_capacity} used)"
            )

    logger.info(
        f"Composed {len(separators)} separators onto {sheet_count} sheet(s), "
        f"{len(pages)} page(s) ({'duplex ' + config.flip_edge.value + ' edge' if config.duplex else 'simplex'})"
    )

    return LayoutResult(
        pages=tuple(pages),
        sheet_count=sheet_count,
        warnings=warnings,
    )
