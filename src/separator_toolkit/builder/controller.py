"""
Module: builder.controller

Purpose:
    Orchestrate the complete separator building pipeline.
    Items → Pair → Grid → Chunk → Flip → Pages

Key Functions:
    - build_separators(): Main entry point for building a separator set

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.config: SeparatorConfig
    - builder.layout: Pairing, pagination and composition
    - core.utils.serialization: Hand-off format

Used By:
    - cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, List, Sequence

from separator_toolkit import __version__
from separator_toolkit.core.models import Item, SeparatorPair
from separator_toolkit.core.utils.serialization import serialize_pages

from .config import SeparatorConfig
from .layout import (
    GridMetrics,
    InvalidPageCapacity,
    LayoutResult,
    compose_pages,
    generate_separator_pairs,
)

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        layout: Composed pages in print order
        pairs: The N+1 separator pairs the pages were built from
        grid: Page grid derived from the physical dimensions
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_separators(items, SeparatorConfig(double_sided=True))
        >>> print(f"Generated {result.page_count} pages for {len(result.pairs)} separators")
    """
    layout: LayoutResult
    pairs: tuple[SeparatorPair, ...]
    grid: GridMetrics
    metadata: dict
    warnings: tuple[str, ...]

    @property
    def page_count(self) -> int:
        return self.layout.page_count

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dictionary handed to the renderer."""
        return {
            "metadata": dict(self.metadata),
            "warnings": list(self.warnings),
            "pages": serialize_pages(self.layout.pages),
        }


def build_separators(items: Sequence[Item], config: SeparatorConfig) -> BuildResult:
    """
    Build a separator set from start to finish.

    Pipeline:
    1. Generate N+1 separator pairs from the ordered items
    2. Derive the page grid from page and card dimensions
    3. Chunk pairs into sheets and compose front (and back) pages

    Args:
        items: Ordered catalog items for one set
        config: Build configuration

    Returns:
        BuildResult with pages and metadata

    Raises:
        BuildError: If the card does not fit on the page

    Example:
        >>> config = SeparatorConfig(set_id="OP-01", double_sided=True)
        >>> result = build_separators(items, config)
        >>> print(f"Generated {result.page_count} pages")
    """
    warnings: List[str] = []
    start_time = time.perf_counter()

    logger.info(
        f"Starting build for {config.set_id}: {len(items)} items, "
        f"{'double' if config.double_sided else 'single'}-sided"
    )

    # 1. Pair items
    pairs = generate_separator_pairs(items)
    if not pairs:
        logger.warning(f"No items for {config.set_id}; nothing to print")
        warnings.append("No items supplied; layout is empty")

    # 2. Page grid
    grid = config.grid
    try:
        layout_config = config.to_layout_config()
    except InvalidPageCapacity as e:
        card = config.card_dimensions
        page = config.page_dimensions
        raise BuildError(
            f"Card {card.width}x{card.height}mm does not fit on "
            f"{config.page_size.value} page {page.width}x{page.height}mm: {e}"
        ) from e

    logger.info(
        f"Grid: {grid.cells_per_row} per row x {grid.rows_per_page} rows "
        f"= {grid.cells_per_page} separators per page"
    )

    # 3. Compose pages
    layout = compose_pages(pairs, layout_config)
    warnings.extend(layout.warnings)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Separator layout completed in {elapsed:.3f}s")

    metadata = _build_metadata(config, items, pairs, grid, layout, elapsed)

    return BuildResult(
        layout=layout,
        pairs=tuple(pairs),
        grid=grid,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _build_metadata(
    config: SeparatorConfig,
    items: Sequence[Item],
    pairs: Sequence[SeparatorPair],
    grid: GridMetrics,
    layout: LayoutResult,
    elapsed: float,
) -> dict:
    """
    Build metadata dictionary for a generated layout.

    Returns:
        Metadata dictionary ready for JSON serialization
    """
    from datetime import datetime

    return {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "version": __version__,
        "set_id": config.set_id,
        "item_count": len(items),
        "separator_count": len(pairs),
        "page_count": layout.page_count,
        "sheet_count": layout.sheet_count,
        "double_sided": config.double_sided,
        "flip_edge": config.flip_edge.value,
        "cells_per_row": grid.cells_per_row,
        "rows_per_page": grid.rows_per_page,
        "cells_per_page": grid.cells_per_page,
        "elapsed_seconds": round(elapsed, 4),
        "config": config.to_dict(),
    }
