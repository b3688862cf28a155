# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from fitplan.shopping.aggregator import aggregate_meals, current_week
from fitplan.shopping.pricing import SPICE_FLAT_PRICE, estimate_price


class TestEstimatePrice(unittest.TestCase):
    def test_count_priced_items(self) -> None:
        self.assertEqual(estimate_price("onion", 3, "item"), 0.9)

    def test_count_priced_by_weight_uses_piece_weight(self) -> None:
        # 400 g of onion is three 150 g onions.
        self.assertEqual(estimate_price("onion", 400, "g"), 0.9)

    def test_weight_and_volume(self) -> None:
        self.assertEqual(estimate_price("chicken breast", 500, "g"), 4.5)
        self.assertEqual(estimate_price("olive oil", 30, "ml"), 0.24)

    def test_weight_priced_counted_in_items(self) -> None:
        # Two sweet potatoes at 200 g each, priced per kg.
        self.assertEqual(estimate_price("sweet potato", 2, "item"), 0.8)

    def test_small_spice_amount_is_flat(self) -> None:
        self.assertEqual(estimate_price("cinnamon", 10, "g"), SPICE_FLAT_PRICE)
        self.assertEqual(estimate_price("cinnamon", 100, "g"), 2.0)

    def test_unknown_ingredient_uses_defaults(self) -> None:
        self.assertEqual(estimate_price("xyzzy", 2, "item"), 3.0)
        self.assertEqual(estimate_price("xyzzy", 500, "g"), 2.5)

    def test_amount_is_clamped(self) -> None:
        self.assertEqual(estimate_price("chicken breast", 100000, "g"), 450.0)


class TestAggregateMeals(unittest.TestCase):
    def _items(self, categories: dict) -> list:
        return [item for bucket in categories.values() for item in bucket]

    def test_merges_by_name_and_kind(self) -> None:
        categories = aggregate_meals(
            [
                {"name": "Oats A", "ingredients": ["100g rolled oats", "1 banana"]},
                {"name": "Oats B", "ingredients": ["50 g rolled oats", "2 bananas", "Salt", ""]},
            ]
        )
        self.assertEqual(list(categories), ["Produce", "Grains & Bakery", "Pantry & Spices"])

        oats = categories["Grains & Bakery"][0]
        self.assertEqual(oats["name"], "rolled oat")
        self.assertEqual(oats["standard_quantity"], 150)
        self.assertEqual((oats["quantity"], oats["unit"]), (150.0, "g"))
        self.assertEqual(oats["occurrences"], 2)
        self.assertEqual(oats["meals"], ["Oats A", "Oats B"])

        banana = categories["Produce"][0]
        self.assertEqual((banana["quantity"], banana["unit"]), (3, "item"))
        self.assertEqual(banana["estimated_price"], 3.0)

        salt = categories["Pantry & Spices"][0]
        self.assertEqual((salt["quantity"], salt["unit"]), (1, "item"))

    def test_structured_ingredients_take_precedence(self) -> None:
        categories = aggregate_meals(
            [
                {
                    "name": "Edited",
                    "ingredients": ["1 xyzzy"],
                    "structured_ingredients": [{"name": "Chicken breast", "quantity": 0.5, "unit": "kg"}],
                },
                {"name": "Plain", "ingredients": ["250g chicken breast"]},
            ]
        )
        items = self._items(categories)
        self.assertEqual(len(items), 1)
        chicken = items[0]
        self.assertEqual(chicken["category"], "Meat & Seafood")
        self.assertEqual((chicken["quantity"], chicken["unit"]), (750.0, "g"))
        self.assertEqual(chicken["estimated_price"], 6.75)

    def test_weights_and_counts_stay_separate(self) -> None:
        categories = aggregate_meals(
            [{"name": "Mixed", "ingredients": ["2 chicken breasts", "300g chicken breast"]}]
        )
        names = [item["name"] for item in self._items(categories)]
        self.assertEqual(names.count("chicken breast"), 2)

    def test_large_totals_switch_units(self) -> None:
        categories = aggregate_meals([{"name": "Bulk", "ingredients": ["1.2kg potatoes", "600ml milk", "600ml milk"]}])
        items = {item["name"]: item for item in self._items(categories)}
        self.assertEqual((items["potato"]["quantity"], items["potato"]["unit"]), (1.2, "kg"))
        self.assertEqual((items["milk"]["quantity"], items["milk"]["unit"]), (1.2, "l"))


class TestCurrentWeek(unittest.TestCase):
    def test_sunday_to_saturday(self) -> None:
        self.assertEqual(current_week(date(2026, 10, 21)), (date(2026, 10, 18), date(2026, 10, 24)))
        self.assertEqual(current_week(date(2026, 10, 18)), (date(2026, 10, 18), date(2026, 10, 24)))
        self.assertEqual(current_week(date(2026, 10, 24)), (date(2026, 10, 18), date(2026, 10, 24)))


if __name__ == "__main__":
    unittest.main()
