"""
Module: items

Purpose:
    Provides the Item dataclass - one entry of the ordered catalog that the
    separators partition - and the well-known blank sentinel that stands in
    for "no adjacent partition" at both ends of the collection.

Key Functions:
    - create_blank_item(): Return the Collection Boundary sentinel
    - is_blank(): Value comparison against the sentinel
    - Item.to_dict() / Item.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.separators.SeparatorPair
    - core.utils.serialization
    - builder.layout.pairs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


BLANK_ID = "---"
BLANK_NAME = "Collection Boundary"

# Display attributes carried through to the renderer untouched
DISPLAY_FIELDS = ("cost", "power", "image", "color", "type", "rarity", "attribute")


@dataclass(frozen=True)
class Item:
    """
    A single catalog item shown on a separator face (immutable).

    Items are owned by the catalog that produced them. The layout pipeline
    never copies them: every separator face and page cell references the
    same object that was passed in.

    Attributes:
        id: Stable identity like "OP01-001"
        card_set_id: Collectors number within the set like "OP01-001"
        name: Display name
        cost: Display cost ("" when unknown)
        power: Display power ("" when unknown)
        image: Image reference resolved later by the image proxy
        color: Card color
        type: Card type (Leader, Character, Event, ...)
        rarity: Rarity code
        attribute: Card attribute

    Example:
        >>> item = Item(id="OP01-001", card_set_id="OP01-001", name="Roronoa Zoro")
        >>> item.is_blank
        False
    """

    id: str
    card_set_id: str
    name: str
    cost: str = ""
    power: str = ""
    image: str = ""
    color: str = ""
    type: str = ""
    rarity: str = ""
    attribute: str = ""

    def __post_init__(self) -> None:
        """Validate item on construction."""
        if not self.id:
            raise ValueError("Item id must be non-empty")
        if not self.name:
            raise ValueError(f"Item name must be non-empty: {self.id!r}")

    @property
    def is_blank(self) -> bool:
        """True if this item is the collection boundary sentinel."""
        return self == BLANK_ITEM

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary (display shape)."""
        data: dict[str, Any] = {
            "id": self.id,
            "card_set_id": self.card_set_id,
            "name": self.name,
        }
        for name in DISPLAY_FIELDS:
            data[name] = getattr(self, name)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Create from a display-shape dictionary produced by to_dict()."""
        return cls(
            id=str(data["id"]),
            card_set_id=str(data.get("card_set_id", data["id"])),
            name=str(data["name"]),
            **{name: str(data.get(name) or "") for name in DISPLAY_FIELDS},
        )


BLANK_ITEM = Item(id=BLANK_ID, card_set_id=BLANK_ID, name=BLANK_NAME)


def create_blank_item() -> Item:
    """Return the Collection Boundary sentinel."""
    return BLANK_ITEM


def is_blank(cell: Item) -> bool:
    """Check whether a page cell is the blank boundary sentinel."""
    return cell == BLANK_ITEM
