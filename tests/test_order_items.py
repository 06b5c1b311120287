"""
Tests for rewriting spoken order line names to menu item names.
"""
import logging

import pytest

from voice_menu.menu import enrich_menu_items_with_variants
from voice_menu.voice.order_items import normalize_order_items


@pytest.fixture
def restaurant_menu(catalog):
    """A restaurant menu enriched from the catalog."""
    rows = [
        {"id": "m1", "name": "Pav Bhaji"},
        {"id": "m2", "name": "Vada Pav"},
        {"id": "m3", "name": "Uttapam"},
    ]
    return enrich_menu_items_with_variants(rows, catalog)


class TestNormalizeOrderItems:
    """Tests for normalize_order_items()."""

    def test_spoken_name_rewritten(self, restaurant_menu):
        items = [{"name": "pow bhajee", "quantity": 2, "price": 5.0}]

        result = normalize_order_items(items, restaurant_menu)

        assert result == [{
            "name": "Pav Bhaji",
            "original_name": "pow bhajee",
            "quantity": 2,
            "price": 5.0,
        }]

    def test_unmatched_line_unchanged(self, restaurant_menu):
        items = [{"name": "Butter Chicken", "quantity": 1}]

        result = normalize_order_items(items, restaurant_menu)

        assert result == [{"name": "Butter Chicken", "quantity": 1}]

    def test_input_not_mutated(self, restaurant_menu):
        items = [{"name": "wada pow"}]

        result = normalize_order_items(items, restaurant_menu)

        assert result[0]["name"] == "Vada Pav"
        assert items == [{"name": "wada pow"}]
        assert result[0] is not items[0]

    def test_order_preserved(self, restaurant_menu):
        items = [{"name": "wada pow"}, {"name": "Samosa"}, {"name": "pav bhaji"}]

        result = normalize_order_items(items, restaurant_menu)

        assert [item["name"] for item in result] == ["Vada Pav", "Samosa", "Pav Bhaji"]

    def test_lines_without_name_pass_through(self, restaurant_menu):
        items = [{"quantity": 3}, {"name": None}, {"name": ""}]

        assert normalize_order_items(items, restaurant_menu) == items

    def test_lenient_default_threshold(self, restaurant_menu):
        """'utapan' is about 0.71 similar to 'uttapam': accepted at 0.7, not at 0.75."""
        lenient = normalize_order_items([{"name": "utapan"}], restaurant_menu)
        strict = normalize_order_items([{"name": "utapan"}], restaurant_menu, threshold=0.75)

        assert lenient[0]["name"] == "Uttapam"
        assert strict[0]["name"] == "utapan"

    def test_name_with_quantity_words_uses_first_match(self, restaurant_menu):
        result = normalize_order_items([{"name": "two pav bhaji and vada pav"}], restaurant_menu)

        assert result[0]["name"] == "Pav Bhaji"
        assert result[0]["original_name"] == "two pav bhaji and vada pav"

    def test_rename_logged(self, restaurant_menu, caplog):
        with caplog.at_level(logging.INFO, logger="voice_menu"):
            normalize_order_items([{"name": "pow bhajee"}], restaurant_menu)

        assert "Normalized item: 'pow bhajee' -> 'Pav Bhaji'" in caplog.text

    def test_empty_order(self, restaurant_menu):
        assert normalize_order_items([], restaurant_menu) == []
