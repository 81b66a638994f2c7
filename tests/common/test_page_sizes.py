"""
Unit tests for physical page and card dimensions.
"""

import pytest

from separator_toolkit.common.page_sizes import (
    DEFAULT_CARD_DIMENSIONS,
    CardDimensions,
    PageDimensions,
    PageSize,
    resolve_page_dimensions,
)


class TestResolvePageDimensions:
    """Tests for resolve_page_dimensions()."""

    @pytest.mark.parametrize("size, expected", [
        ("a4", (210, 297)),
        ("letter", (216, 279)),
        ("legal", (216, 356)),
        (PageSize.A4, (210, 297)),
    ])
    def test_when_named_size_then_known_dimensions(self, size, expected):
        page = resolve_page_dimensions(size)

        assert (page.width, page.height) == expected

    def test_when_custom_without_dimensions_then_a4(self):
        assert resolve_page_dimensions(PageSize.CUSTOM) == PageDimensions(210, 297)

    def test_when_custom_with_dimensions_then_used(self):
        custom = PageDimensions(300, 400)

        assert resolve_page_dimensions("custom", custom) is custom

    def test_when_named_size_then_custom_ignored(self):
        assert resolve_page_dimensions("letter", PageDimensions(1, 1)) == PageDimensions(216, 279)

    def test_when_unknown_size_then_raises(self):
        with pytest.raises(ValueError, match="Unknown page size"):
            resolve_page_dimensions("a3")


class TestDimensions:
    """Tests for dimension validation."""

    def test_default_card_dimensions(self):
        assert DEFAULT_CARD_DIMENSIONS == CardDimensions(65, 95, 10)

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10)])
    def test_page_when_not_positive_then_raises(self, width, height):
        with pytest.raises(ValueError, match="must be positive"):
            PageDimensions(width, height)

    def test_card_when_tab_taller_than_card_then_raises(self):
        with pytest.raises(ValueError, match="tab_height"):
            CardDimensions(65, 95, 95)
