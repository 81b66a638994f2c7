"""
Unit Tests for Serialization Utilities

Tests for catalog record parsing and page hand-off serialization.
"""

import json

import pytest

from separator_toolkit.builder.layout import (
    FlipEdge,
    generate_print_pages,
    generate_separator_pairs,
)
from separator_toolkit.core.models import BLANK_ITEM, Item
from separator_toolkit.core.schemas.validator import ValidationError
from separator_toolkit.core.utils.serialization import (
    deserialize_item,
    items_from_records,
    load_items_json,
    serialize_item,
    serialize_page,
    serialize_pages,
    serialize_pair,
)


class TestDeserializeItem:
    """Tests for deserialize_item()."""

    def test_when_catalog_shape_then_columns_mapped(self, sample_records):
        item = deserialize_item(sample_records[0])

        assert item == Item(
            id="OP01-077",
            card_set_id="OP01-077",
            name="Perona",
            cost="1",
            power="2000",
            image="https://example.com/OP01-077.png",
            color="Green",
            type="CHARACTER",
            rarity="UC",
            attribute="Special",
        )

    def test_when_display_shape_then_fields_copied(self, sample_records):
        item = deserialize_item(sample_records[1])

        assert item.id == "OP01-078"
        assert item.card_set_id == "OP01-078"
        assert item.name == "Boa Hancock"
        assert (item.cost, item.power) == ("5", "6000")
        assert item.color == ""

    def test_when_display_without_set_id_then_id_used(self):
        item = deserialize_item({"id": "ST01-001", "name": "Monkey D. Luffy"})

        assert item.card_set_id == "ST01-001"

    def test_when_null_attributes_then_empty_strings(self):
        item = deserialize_item({"id": "X", "name": "Y", "cost": None, "image": None})

        assert item.cost == "" and item.image == ""

    def test_when_invalid_then_raises(self):
        with pytest.raises(ValidationError):
            deserialize_item({"cost": "1"})


class TestItemsFromRecords:

    def test_when_records_given_then_order_preserved(self, sample_records):
        items = items_from_records(sample_records)

        assert [i.name for i in items] == ["Perona", "Boa Hancock"]

    def test_when_one_record_invalid_then_path_has_index(self, sample_records):
        records = sample_records + [{"id": "OP01-079"}]

        with pytest.raises(ValidationError) as excinfo:
            items_from_records(records)

        assert excinfo.value.path == "[2]"


class TestLoadItemsJson:
    """Tests for load_items_json()."""

    def test_when_array_then_loaded(self, tmp_path, sample_records):
        path = tmp_path / "cards.json"
        path.write_text(json.dumps(sample_records), encoding="utf-8")

        items = load_items_json(path)

        assert len(items) == 2

    def test_when_api_envelope_then_cards_unwrapped(self, tmp_path, sample_records):
        path = tmp_path / "cards.json"
        path.write_text(json.dumps({"set_id": "OP-01", "cards": sample_records}), encoding="utf-8")

        items = load_items_json(path, strict=True)

        assert [i.id for i in items] == ["OP01-077", "OP01-078"]

    def test_when_empty_list_then_no_items(self, tmp_path):
        path = tmp_path / "cards.json"
        path.write_text("[]", encoding="utf-8")

        assert load_items_json(path) == []

    def test_when_missing_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_items_json(tmp_path / "nope.json")

    def test_when_malformed_json_then_validation_error(self, tmp_path):
        path = tmp_path / "cards.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_items_json(path)

    def test_when_object_without_list_then_validation_error(self, tmp_path):
        path = tmp_path / "cards.json"
        path.write_text('{"set_id": "OP-01"}', encoding="utf-8")

        with pytest.raises(ValidationError, match="Expected a list"):
            load_items_json(path)


class TestLayoutSerialization:
    """Tests for pair and page serialization."""

    def test_serialize_item_when_blank_then_boundary_record(self):
        data = serialize_item(BLANK_ITEM)

        assert data["name"] == "Collection Boundary"
        assert data["image"] == ""

    def test_serialize_pair(self, card_factory):
        card = card_factory("OP01-001", "Card 1")
        pair = generate_separator_pairs([card])[0]

        data = serialize_pair(pair)

        assert data["position"] == 0
        assert data["front"]["id"] == "OP01-001"
        assert data["back"]["name"] == "Collection Boundary"

    def test_serialize_page_when_back_page_then_kind_and_cells(self, five_cards):
        pages = generate_print_pages(
            generate_separator_pairs(five_cards), 6, FlipEdge.LONG, 3, True
        )

        data = serialize_page(pages[1])

        assert data["kind"] == "back"
        assert data["index"] == 1
        assert data["sheet"] == 0
        assert [c["name"] for c in data["cells"]] == [
            "Card 2", "Card 1", "Collection Boundary", "Card 5", "Card 4", "Card 3",
        ]

    def test_serialize_pages_is_json_compatible(self, five_cards):
        pages = generate_print_pages(
            generate_separator_pairs(five_cards), 4, FlipEdge.SHORT, 2, True
        )

        encoded = json.dumps(serialize_pages(pages))

        assert [p["kind"] for p in json.loads(encoded)] == ["front", "back", "front", "back"]
