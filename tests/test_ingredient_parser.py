# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fitplan.ingredients.lookup import category_for, find_ingredient
from fitplan.ingredients.parser import (
    MeasureKind,
    canonical_name,
    from_standard,
    measure_kind,
    normalize_unit,
    parse_ingredient,
    parse_number,
    singularize,
    to_standard,
)


class TestParseIngredient(unittest.TestCase):
    def _parts(self, text: str):
        parsed = parse_ingredient(text)
        return parsed.quantity, parsed.unit, parsed.name

    def test_leading_quantity_with_attached_unit(self) -> None:
        self.assertEqual(self._parts("250g chicken breast"), (250.0, "g", "chicken breast"))

    def test_unicode_mixed_fraction_and_of(self) -> None:
        self.assertEqual(self._parts("1½ cups of rolled oats"), (1.5, "cup", "rolled oats"))

    def test_size_word_counts_as_item(self) -> None:
        self.assertEqual(self._parts("2 large eggs"), (2.0, "item", "eggs"))

    def test_range_uses_upper_bound(self) -> None:
        self.assertEqual(self._parts("2-3 apples"), (3.0, "item", "apples"))

    def test_parenthetical_quantity(self) -> None:
        self.assertEqual(self._parts("Lean steak (8oz)"), (8.0, "oz", "lean steak"))

    def test_trailing_quantity(self) -> None:
        self.assertEqual(self._parts("chicken breast - 200g"), (200.0, "g", "chicken breast"))

    def test_leading_size_word_without_number(self) -> None:
        self.assertEqual(self._parts("Small potato"), (1.0, "item", "potato"))

    def test_no_quantity(self) -> None:
        self.assertEqual(self._parts("Mixed greens"), (None, None, "mixed greens"))
        self.assertEqual(self._parts("Salt and pepper, to taste"), (None, None, "salt and pepper"))

    def test_zero_denominator_drops_quantity_and_unit(self) -> None:
        self.assertEqual(self._parts("1/0 cup milk"), (None, None, "milk"))

    def test_original_text_is_kept(self) -> None:
        self.assertEqual(parse_ingredient("  200ml milk ").original, "200ml milk")

    def test_empty_input_rejected(self) -> None:
        with self.assertRaises(ValueError):
            parse_ingredient("   ")
        with self.assertRaises(ValueError):
            parse_ingredient(None)  # type: ignore[arg-type]


class TestUnits(unittest.TestCase):
    def test_parse_number(self) -> None:
        self.assertEqual(parse_number("1 1/2"), 1.5)
        self.assertEqual(parse_number("3/4"), 0.75)
        self.assertEqual(parse_number("0,5"), 0.5)
        self.assertIsNone(parse_number("1/0"))
        self.assertIsNone(parse_number("abc"))
        self.assertIsNone(parse_number(""))

    def test_normalize_unit(self) -> None:
        self.assertEqual(normalize_unit("Tablespoons"), "tbsp")
        self.assertEqual(normalize_unit("fl. oz"), "fl oz")
        self.assertEqual(normalize_unit("tins"), "can")
        self.assertIsNone(normalize_unit("bushel"))
        self.assertIsNone(normalize_unit(None))

    def test_measure_kind(self) -> None:
        self.assertIs(measure_kind("kg"), MeasureKind.WEIGHT)
        self.assertIs(measure_kind("cup"), MeasureKind.VOLUME)
        self.assertIs(measure_kind("clove"), MeasureKind.COUNT)
        self.assertIs(measure_kind(None), MeasureKind.COUNT)

    def test_to_standard(self) -> None:
        value, unit = to_standard(2, "cup")
        self.assertAlmostEqual(value, 473.176, places=3)
        self.assertEqual(unit, "ml")
        value, unit = to_standard(1, "lb")
        self.assertAlmostEqual(value, 453.592, places=3)
        self.assertEqual(unit, "g")
        self.assertEqual(to_standard(3, "clove"), (3, "item"))

    def test_from_standard(self) -> None:
        self.assertEqual(from_standard(1500, "g"), (1.5, "kg"))
        self.assertEqual(from_standard(250, "g"), (250.0, "g"))
        self.assertEqual(from_standard(2500, "ml"), (2.5, "l"))
        self.assertEqual(from_standard(3, "item"), (3, "item"))

    def test_canonical_name(self) -> None:
        self.assertEqual(canonical_name("Fresh chopped tomatoes"), "tomato")
        self.assertEqual(canonical_name("Chicken Breasts"), "chicken breast")
        self.assertEqual(singularize("berries"), "berry")
        self.assertEqual(singularize("peaches"), "peach")
        self.assertEqual(singularize("glass"), "glass")
        self.assertEqual(singularize("hummus"), "hummus")


class TestLookup(unittest.TestCase):
    def test_exact_match(self) -> None:
        info = find_ingredient("Chicken Breasts")
        self.assertIsNotNone(info)
        self.assertEqual(info.key, "chicken breast")
        self.assertEqual(info.category, "Meat & Seafood")

    def test_contained_key_match(self) -> None:
        info = find_ingredient("baby spinach")
        self.assertIsNotNone(info)
        self.assertEqual(info.key, "spinach")

    def test_single_shared_word_is_not_a_match(self) -> None:
        self.assertIsNone(find_ingredient("coconut milk"))
        self.assertIsNone(find_ingredient("grilled salmon fillet"))
        self.assertEqual(category_for("coconut milk"), "Dairy")

    def test_unknown(self) -> None:
        self.assertIsNone(find_ingredient("xyzzy"))
        self.assertEqual(category_for("xyzzy"), "Other")

    def test_category_keywords(self) -> None:
        self.assertEqual(category_for("fresh basil"), "Produce")
        self.assertEqual(category_for("rolled oats"), "Grains & Bakery")


if __name__ == "__main__":
    unittest.main()
