"""
Unit tests for core models: Item, blank sentinel, SeparatorPair, Page.
"""

import pytest

from separator_toolkit.core.models import (
    BLANK_ITEM,
    Item,
    Page,
    PageKind,
    SeparatorPair,
    create_blank_item,
    is_blank,
)


class TestItem:
    """Tests for Item dataclass."""

    def test_init_when_minimal_then_display_fields_empty(self):
        item = Item(id="OP01-001", card_set_id="OP01-001", name="Roronoa Zoro")

        assert item.cost == ""
        assert item.image == ""
        assert not item.is_blank

    def test_init_when_name_empty_then_raises(self):
        with pytest.raises(ValueError, match="name must be non-empty"):
            Item(id="OP01-001", card_set_id="OP01-001", name="")

    def test_init_when_id_empty_then_raises(self):
        with pytest.raises(ValueError, match="id must be non-empty"):
            Item(id="", card_set_id="", name="Nobody")

    def test_item_is_immutable(self, card_factory):
        item = card_factory("OP01-001", "Card 1")

        with pytest.raises(AttributeError):
            item.name = "Other"  # type: ignore[misc]

    def test_item_is_hashable(self, card_factory):
        item = card_factory("OP01-001", "Card 1")

        assert {item: 1}[item] == 1

    def test_to_dict_from_dict_preserves_fields(self, card_factory):
        item = card_factory("OP01-001", "Card 1")

        restored = Item.from_dict(item.to_dict())

        assert restored == item


class TestBlankSentinel:
    """Tests for the Collection Boundary sentinel."""

    def test_blank_has_fixed_name_and_empty_attributes(self):
        assert BLANK_ITEM.name == "Collection Boundary"
        assert BLANK_ITEM.id == "---"
        assert BLANK_ITEM.cost == BLANK_ITEM.power == BLANK_ITEM.image == ""

    def test_create_blank_item_returns_sentinel(self):
        assert create_blank_item() is BLANK_ITEM

    def test_blank_compared_by_value(self):
        """An equal record built elsewhere is still the boundary."""
        rebuilt = Item(id="---", card_set_id="---", name="Collection Boundary")

        assert is_blank(rebuilt)
        assert rebuilt.is_blank

    def test_real_item_is_not_blank(self, card_factory):
        assert not is_blank(card_factory("OP01-001", "Card 1"))


class TestSeparatorPair:
    """Tests for SeparatorPair dataclass."""

    def test_init_when_negative_position_then_raises(self, card_factory):
        card = card_factory("OP01-001", "Card 1")

        with pytest.raises(ValueError, match="position must be non-negative"):
            SeparatorPair(position=-1, front=card, back=card)

    def test_blank_face_flags(self, card_factory):
        card = card_factory("OP01-001", "Card 1")

        opening = SeparatorPair(0, front=card, back=BLANK_ITEM)
        closing = SeparatorPair(1, front=BLANK_ITEM, back=card)

        assert opening.has_blank_back and not opening.has_blank_front
        assert closing.has_blank_front and not closing.has_blank_back


class TestPage:
    """Tests for Page dataclass."""

    def test_rows_when_ragged_then_last_row_short(self, cards_factory):
        page = Page(PageKind.FRONT, cells=tuple(cards_factory(5)))

        rows = page.rows(3)

        assert [len(r) for r in rows] == [3, 2]
        assert page.cell_count == 5

    def test_rows_when_not_positive_then_raises(self, cards_factory):
        page = Page(PageKind.BACK, cells=tuple(cards_factory(2)))

        with pytest.raises(ValueError):
            page.rows(0)

    def test_kind_flags(self):
        assert Page(PageKind.FRONT, cells=()).is_front
        assert Page(PageKind.BACK, cells=()).is_back
