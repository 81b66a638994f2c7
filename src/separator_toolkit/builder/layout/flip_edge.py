"""
Module: builder.layout.flip_edge

Purpose:
    Enum naming the physical axis a duplex sheet is turned over on.

Key Classes:
    - FlipEdge: Long-edge (book) or short-edge (calendar) flip

Used By:
    - builder.layout.config: LayoutConfig
    - builder.layout.flip: apply_flip_transformation
    - builder.config: SeparatorConfig
"""

from __future__ import annotations

from enum import Enum


class FlipEdge(Enum):
    """
    Edge a printed sheet is flipped along for its back side.

    Attributes:
        LONG: Book-style flip along the long (vertical) edge. Each row of
              the back page is mirrored left-to-right.
        SHORT: Calendar-style flip along the short edge. The back page is
               reversed as one flat sequence.

    Example:
        >>> FlipEdge.parse("Short")
        <FlipEdge.SHORT: 'short'>
    """

    LONG = "long"
    SHORT = "short"

    @classmethod
    def parse(cls, value: "FlipEdge | str") -> "FlipEdge":
        """Accept an enum member or its case-insensitive string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise ValueError(f"Unknown flip edge {value!r} (expected 'long' or 'short')") from e
