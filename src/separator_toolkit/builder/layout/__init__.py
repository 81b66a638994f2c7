"""
Module: builder.layout

Purpose:
    Separator pairing, pagination and duplex page composition.
    Converts an ordered item sequence into printable front/back pages.

Key Functions:
    - generate_separator_pairs(): N items -> N+1 separators
    - chunk_sequence(): Fixed-capacity, order-preserving pages
    - apply_flip_transformation(): Back-face reordering for duplex
    - compose_pages(): Main entry point for layout

Key Classes:
    - LayoutConfig: Configuration for page layout
    - FlipEdge: Long/short edge flip
    - LayoutResult: Composed pages plus diagnostics

Used By:
    - builder.controller: Main build controller
"""

from .config import (
    GridMetrics,
    InvalidPageCapacity,
    LayoutConfig,
    calculate_cells_per_page,
    require_positive,
)
from .flip_edge import FlipEdge
from .models import LayoutResult
from .pairs import generate_separator_pairs
from .paginator import chunk_sequence, chunk_separators
from .flip import apply_flip_transformation, split_rows
from .composer import compose_pages, generate_print_pages

__all__ = [
    # Config
    "LayoutConfig",
    "GridMetrics",
    "FlipEdge",
    "InvalidPageCapacity",
    "calculate_cells_per_page",
    "require_positive",
    # Models
    "LayoutResult",
    # Functions
    "generate_separator_pairs",
    "chunk_sequence",
    "chunk_separators",
    "apply_flip_transformation",
    "split_rows",
    "compose_pages",
    "generate_print_pages",
]
