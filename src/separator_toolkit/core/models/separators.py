"""
Module: separators

Purpose:
    Provides the SeparatorPair dataclass - one physical divider tab with the
    partition it introduces on its front face and the previous partition on
    its back face.

Key Classes:
    - SeparatorPair: Two-faced separator at a given position

Dependencies:
    - dataclasses (std)
    - .items.Item

Used By:
    - builder.layout.pairs: Creates pairs
    - builder.layout.composer: Splits pairs into front/back pages
"""

from __future__ import annotations

from dataclasses import dataclass

from .items import Item


@dataclass(frozen=True)
class SeparatorPair:
    """
    One double-sided separator tab (immutable).

    For a collection of N items there are N+1 pairs laid out as
    ``|1 1|2 2|3 ... N|``: pair i shows items[i] on its front and
    items[i-1] on its back, with the blank sentinel facing outside the
    collection at both ends.

    Attributes:
        position: 0-indexed position in the separator run
        front: Item printed on the front face
        back: Item printed on the back face

    Example:
        >>> pair = SeparatorPair(position=0, front=item1, back=BLANK_ITEM)
        >>> pair.has_blank_back
        True
    """

    position: int
    front: Item
    back: Item

    def __post_init__(self) -> None:
        """Validate pair on construction."""
        if self.position < 0:
            raise ValueError(f"position must be non-negative: {self.position}")

    @property
    def has_blank_front(self) -> bool:
        """True for the closing separator after the last partition."""
        return self.front.is_blank

    @property
    def has_blank_back(self) -> bool:
        """True for the opening separator before the first partition."""
        return self.back.is_blank
