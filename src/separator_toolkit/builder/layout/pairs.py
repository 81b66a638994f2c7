"""
Module: builder.layout.pairs

Purpose:
    Turn an ordered item sequence into the N+1 double-sided separators
    that partition it.

Key Functions:
    - generate_separator_pairs(): Main pairing function

Algorithm:
    Physical layout: |1 1|2 2|3 3|4 4|5

    For index i in [0, N]:
    - front = items[i] if i < N, else the blank sentinel
    - back = items[i-1] if i > 0, else the blank sentinel

    Each partition is therefore enclosed by a separator showing it on the
    front (before it) and one showing it on the back (after it).

Dependencies:
    - core.models: Item, SeparatorPair, BLANK_ITEM

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from separator_toolkit.core.models import BLANK_ITEM, Item, SeparatorPair

logger = logging.getLogger(__name__)


def generate_separator_pairs(items: Sequence[Item]) -> List[SeparatorPair]:
    """
    Generate separator pairs for N items.

    Args:
        items: Ordered catalog items (not modified)

    Returns:
        N+1 SeparatorPairs, or an empty list when there are no items.
        Faces reference the input objects; no item is copied.

    Example:
        >>> pairs = generate_separator_pairs([card1, card2])
        >>> [(p.front.name, p.back.name) for p in pairs]
        [('Card 1', 'Collection Boundary'), ('Card 2', 'Card 1'), ('Collection Boundary', 'Card 2')]
    """
    count = len(items)
    if count == 0:
        return []

    pairs = [
        SeparatorPair(
            position=i,
            front=items[i] if i < count else BLANK_ITEM,
            back=items[i - 1] if i > 0 else BLANK_ITEM,
        )
        for i in range(count + 1)
    ]

    logger.debug(f"Generated {len(pairs)} separators for {count} items")
    return pairs
