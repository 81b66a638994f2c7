"""
Unit tests for the order-preserving chunker.
"""

import pytest

from separator_toolkit.builder.layout import (
    InvalidPageCapacity,
    chunk_separators,
    chunk_sequence,
    generate_separator_pairs,
)


class TestChunkSequence:
    """Tests for chunk_sequence()."""

    def test_when_eleven_items_capacity_four_then_four_four_three(self):
        chunks = chunk_sequence(list(range(11)), 4)

        assert [len(c) for c in chunks] == [4, 4, 3]

    def test_when_exact_division_then_all_chunks_full(self):
        chunks = chunk_sequence(list(range(9)), 3)

        assert [len(c) for c in chunks] == [3, 3, 3]

    def test_when_empty_input_then_no_chunks(self):
        assert chunk_sequence([], 4) == []

    def test_when_capacity_exceeds_length_then_single_chunk(self):
        assert chunk_sequence(["a", "b"], 9) == [["a", "b"]]

    @pytest.mark.parametrize("length, capacity", [
        (1, 1), (7, 1), (7, 2), (10, 3), (12, 4), (13, 9), (100, 9),
    ])
    def test_when_chunked_then_concatenation_reproduces_input(self, length, capacity):
        data = [f"x{i}" for i in range(length)]

        chunks = chunk_sequence(data, capacity)

        assert [x for chunk in chunks for x in chunk] == data
        assert len(chunks) == -(-length // capacity)  # ceil
        assert all(len(c) == capacity for c in chunks[:-1])
        assert len(chunks[-1]) == ((length - 1) % capacity) + 1

    @pytest.mark.parametrize("capacity", [0, -1, -9])
    def test_when_capacity_not_positive_then_raises(self, capacity):
        with pytest.raises(InvalidPageCapacity, match="page_capacity must be positive"):
            chunk_sequence([1, 2, 3], capacity)

    def test_when_capacity_invalid_then_raised_even_for_empty_input(self):
        with pytest.raises(InvalidPageCapacity):
            chunk_sequence([], 0)

    def test_invalid_capacity_is_value_error(self):
        with pytest.raises(ValueError):
            chunk_sequence([1], 0)


class TestChunkSeparators:
    """Tests for chunk_separators()."""

    def test_when_ten_cards_then_eleven_separators_in_three_chunks(self, cards_factory):
        separators = generate_separator_pairs(cards_factory(10))

        chunks = chunk_separators(separators, 4)

        assert [len(c) for c in chunks] == [4, 4, 3]
        assert [p.position for c in chunks for p in c] == list(range(11))
