import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import separator_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from separator_toolkit.core.models import Item


def make_card(card_id: str, name: str) -> Item:
    """Create a test card the way the catalog would hand it over."""
    return Item(
        id=card_id,
        card_set_id=card_id,
        name=name,
        cost="1",
        power="1000",
        image=f"https://example.com/{card_id}.jpg",
    )


def make_cards(count: int) -> list[Item]:
    """Cards OP01-001 .. OP01-NNN named "Card 1" .. "Card N"."""
    return [make_card(f"OP01-{i + 1:03d}", f"Card {i + 1}") for i in range(count)]


# Common test fixtures
@pytest.fixture
def card_factory():
    """Return the single-card factory."""
    return make_card


@pytest.fixture
def cards_factory():
    """Return the N-card factory."""
    return make_cards


@pytest.fixture
def five_cards():
    """Five cards: |1 1|2 2|3 3|4 4|5"""
    return make_cards(5)


@pytest.fixture
def sample_records():
    """Catalog records in both shapes."""
    return [
        {
            "id": 77,
            "card_set_id": "OP01-077",
            "card_name": "Perona",
            "set_id": "OP-01",
            "set_name": "Romance Dawn",
            "card_image_url": "https://example.com/OP01-077.png",
            "card_color": "Green",
            "card_type": "CHARACTER",
            "card_cost": 1,
            "card_power": 2000,
            "rarity": "UC",
            "attribute": "Special",
        },
        {
            "id": "OP01-078",
            "cardSetId": "OP01-078",
            "name": "Boa Hancock",
            "cost": "5",
            "power": "6000",
        },
    ]
