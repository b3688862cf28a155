# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fitplan.preferences.generator import (
    build_week_cycle,
    matches_diet,
    matches_lifestyle,
    meals_per_day,
    preference_score,
    select_meals,
)
from fitplan.workouts.generator import build_week, frequency_label, select_exercises, workout_days


def _meal(meal_id: str, calories: float = 400, **extra) -> dict:
    meal = {
        "id": meal_id,
        "name": meal_id.title(),
        "timing": "Lunch",
        "calories": calories,
        "protein": 30,
        "carbs": 40,
        "fats": 10,
        "dietary_tags": [],
        "nutritional_tags": [],
        "suitable_for": [],
        "contains": [],
        "preparation": {"time": 10, "difficulty": "beginner", "meal_prep_friendly": False},
        "budget_tier": "budget",
        "cuisine": "american",
    }
    meal.update(extra)
    return meal


PREFS = {
    "diet_type": "omnivore",
    "cooking_time": "moderate",
    "cooking_skill": "intermediate",
    "budget": "moderate",
    "health_conditions": [],
    "cuisine_preferences": [],
    "excluded_ingredients": [],
    "meal_prep": False,
}


class TestDietFilters(unittest.TestCase):
    def test_dietary_tag_diets(self) -> None:
        prefs = dict(PREFS, diet_type="vegan")
        self.assertFalse(matches_diet(_meal("a", dietary_tags=["vegetarian"]), prefs))
        self.assertTrue(matches_diet(_meal("b", dietary_tags=["vegetarian", "vegan"]), prefs))

    def test_nutritional_tag_diets_relax(self) -> None:
        prefs = dict(PREFS, diet_type="keto")
        plain = _meal("a")
        self.assertFalse(matches_diet(plain, prefs))
        self.assertTrue(matches_diet(plain, prefs, strict=False))
        self.assertTrue(matches_diet(_meal("b", nutritional_tags=["low-carb"]), prefs))

    def test_excluded_ingredients(self) -> None:
        prefs = dict(PREFS, excluded_ingredients=["dairy"])
        self.assertFalse(matches_diet(_meal("a", contains=["dairy", "gluten"]), prefs))
        self.assertFalse(matches_diet(_meal("a", contains=["dairy"]), prefs, strict=False))
        self.assertTrue(matches_diet(_meal("b", contains=["gluten"]), prefs))

    def test_lifestyle(self) -> None:
        self.assertTrue(matches_lifestyle(_meal("a"), PREFS))
        hard = _meal("b", preparation={"time": 10, "difficulty": "advanced"})
        self.assertFalse(matches_lifestyle(hard, PREFS))
        slow = _meal("c", preparation={"time": 45, "difficulty": "beginner"})
        self.assertFalse(matches_lifestyle(slow, PREFS))
        pricey = _meal("d", budget_tier="premium")
        self.assertFalse(matches_lifestyle(pricey, PREFS))

        diabetic = dict(PREFS, health_conditions=["diabetes"])
        self.assertFalse(matches_lifestyle(_meal("e"), diabetic))
        self.assertTrue(matches_lifestyle(_meal("f", suitable_for=["diabetes-friendly"]), diabetic))

    def test_preference_score(self) -> None:
        prefs = dict(PREFS, cuisine_preferences=["italian"], meal_prep=True, health_conditions=["diabetes"])
        meal = _meal(
            "a",
            cuisine="italian",
            suitable_for=["diabetes-friendly"],
            preparation={"time": 10, "difficulty": "beginner", "meal_prep_friendly": True},
        )
        self.assertEqual(preference_score(meal, prefs), 6.5)
        self.assertEqual(preference_score(_meal("b"), prefs), 0)


class TestSelectMeals(unittest.TestCase):
    def test_relaxes_when_few_meals_match(self) -> None:
        prefs = dict(PREFS, diet_type="keto", cuisine_preferences=["italian"])
        catalog = [
            _meal("a", nutritional_tags=["low-carb"]),
            _meal("b"),
            _meal("c", cuisine="italian"),
            _meal("d", nutritional_tags=["low-carb"], budget_tier="premium"),
        ]
        selected = select_meals(catalog, prefs)
        self.assertEqual([m["id"] for m in selected], ["c", "a", "b", "d"])

    def test_strict_matches_only_when_enough(self) -> None:
        prefs = dict(PREFS, diet_type="vegetarian")
        catalog = [_meal(f"veg-{i}", dietary_tags=["vegetarian"]) for i in range(21)]
        catalog.append(_meal("veg-slow", dietary_tags=["vegetarian"], preparation={"time": 90}))
        catalog.append(_meal("steak"))
        ids = {m["id"] for m in select_meals(catalog, prefs)}
        self.assertEqual(len(ids), 21)
        self.assertNotIn("steak", ids)
        self.assertNotIn("veg-slow", ids)


class TestWeekCycle(unittest.TestCase):
    def test_meals_per_day(self) -> None:
        self.assertEqual(meals_per_day(2600), 5)
        self.assertEqual(meals_per_day(2000), 4)
        self.assertEqual(meals_per_day(1800), 3)

    def test_cycle_shape_and_variety(self) -> None:
        catalog = [_meal("a", 400), _meal("b", 500), _meal("c", 600), _meal("d", 700)]
        cycle = build_week_cycle(catalog, 1800)
        self.assertEqual(len(cycle), 14)
        for day in cycle:
            self.assertEqual(len(day), 3)
            sources = [slot["source_meal_id"] for slot in day]
            self.assertEqual(len(set(sources)), 3)
            for slot in day:
                self.assertTrue(slot["id"].startswith("slot-"))
        ids = [slot["id"] for day in cycle for slot in day]
        self.assertEqual(len(ids), len(set(ids)))

    def test_single_meal_catalog_repeats(self) -> None:
        cycle = build_week_cycle([_meal("only", 500)], 2000, days=2)
        self.assertEqual([len(day) for day in cycle], [4, 4])
        self.assertEqual({slot["source_meal_id"] for day in cycle for slot in day}, {"only"})


class TestWorkoutGenerator(unittest.TestCase):
    def _library(self) -> list:
        easy = [
            {"name": f"Easy {i}", "difficulty": "beginner", "equipment": ["dumbbell"], "type": "strength"}
            for i in range(10)
        ]
        hard = [
            {"name": f"Hard {i}", "difficulty": "advanced", "equipment": ["barbell"], "type": "strength"}
            for i in range(5)
        ]
        return easy + hard

    def test_workout_days(self) -> None:
        self.assertEqual(workout_days(3), [0, 2, 4])
        self.assertEqual(workout_days(4), [0, 1, 3, 5])
        self.assertEqual(workout_days(0), [0])
        self.assertEqual(workout_days(9), [0, 1, 2, 3, 4, 5])

    def test_frequency_label(self) -> None:
        self.assertEqual(frequency_label(3), "3day")
        self.assertEqual(frequency_label(6), "4day")
        self.assertEqual(frequency_label(0), "1day")

    def test_select_by_level_or_equipment(self) -> None:
        library = self._library()
        beginner = select_exercises(library, fitness_level="beginner", available_equipment=[])
        self.assertEqual({e["name"] for e in beginner}, {f"Easy {i}" for i in range(10)})
        with_barbell = select_exercises(library, fitness_level="beginner", available_equipment=["barbell"])
        self.assertEqual(len(with_barbell), 15)

    def test_select_falls_back_to_library(self) -> None:
        library = self._library()[10:]
        selected = select_exercises(library, fitness_level="beginner", available_equipment=[])
        self.assertEqual(len(selected), 5)

    def test_build_week(self) -> None:
        week = build_week(self._library()[:12], 3)
        self.assertEqual([d["day_number"] for d in week], [1, 3, 5])
        self.assertEqual([d["focus"] for d in week], ["Upper Body", "Lower Body", "Full Body"])
        for day in week:
            self.assertEqual(len(day["exercises"]), 4)
            self.assertEqual(day["exercises"][0]["sets"], 3)
            self.assertEqual(day["exercises"][0]["reps"], "10")
        first_day = [e["name"] for e in week[0]["exercises"]]
        self.assertEqual(first_day, ["Easy 0", "Easy 1", "Easy 2", "Easy 3"])


if __name__ == "__main__":
    unittest.main()
