"""
Module: builder.layout.paginator

Purpose:
    Split an ordered sequence into fixed-capacity pages.

Key Functions:
    - chunk_sequence(): Generic order-preserving chunker
    - chunk_separators(): Chunk separator pairs into sheets

Invariants:
    - Concatenating the chunks reproduces the input exactly
    - Every chunk except the last holds exactly `capacity` elements
    - The chunk count is ceil(len / capacity); empty input gives no chunks

Dependencies:
    - builder.layout.config: require_positive

Used By:
    - builder.layout.composer: Page composition
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from separator_toolkit.core.models import SeparatorPair

from .config import require_positive

T = TypeVar("T")


def chunk_sequence(sequence: Sequence[T], capacity: int) -> List[List[T]]:
    """
    Split a sequence into consecutive chunks of at most `capacity`.

    Args:
        sequence: Ordered input (not modified)
        capacity: Elements per chunk

    Returns:
        List of chunks; the last may be shorter

    Raises:
        InvalidPageCapacity: If capacity <= 0

    Example:
        >>> [len(c) for c in chunk_sequence(list(range(11)), 4)]
        [4, 4, 3]
    """
    require_positive("page_capacity", capacity)
    return [
        list(sequence[start:start + capacity])
        for start in range(0, len(sequence), capacity)
    ]


def chunk_separators(
    separators: Sequence[SeparatorPair],
    separators_per_page: int,
) -> List[List[SeparatorPair]]:
    """Chunk separator pairs into one group per printed sheet."""
    return chunk_sequence(separators, separators_per_page)
