# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from fitplan.plans.assembler import PlanContext, build_day, cycle_day, day_totals, to_date


def _workout_plan() -> dict:
    return {
        "id": "wp",
        "name": "Two Week Plan",
        "weeks": [
            [{"day_number": 1, "focus": "A", "exercises": [{"name": "Bench Press", "sets": 3}]}],
            [{"day_number": 1, "focus": "B", "exercises": [{"name": "Back Squat", "sets": 3}]}],
        ],
    }


def _week_cycle() -> list:
    return [
        [{"id": f"d{i}", "name": f"Meal {i}", "calories": 100 + i, "protein": 10, "carbs": 20, "fats": 5}]
        for i in range(14)
    ]


class TestBuildDay(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = PlanContext(
            user_plan={
                "start_date": "2026-01-05",
                "progress": {
                    "completed_workouts": ["2026-01-05"],
                    "completed_meals": [{"date": "2026-01-05", "meal_number": 0}],
                },
            },
            workout_plan=_workout_plan(),
            week_cycle=_week_cycle(),
            diet_source="base",
        )

    def test_start_day(self) -> None:
        day = build_day(self.ctx, date(2026, 1, 5))
        self.assertEqual(day["days_since_start"], 0)
        self.assertEqual(day["cycle_day"], 0)
        self.assertEqual(day["day_number"], 1)
        self.assertEqual(day["week_number"], 1)
        self.assertEqual(day["workout"]["focus"], "A")
        self.assertEqual(day["workout"]["plan_id"], "wp")
        self.assertEqual([m["id"] for m in day["meals"]], ["d0"])
        self.assertEqual(day["meals"][0]["meal_number"], 0)
        self.assertEqual(day["totals"], {"calories": 100, "protein": 10.0, "carbs": 20.0, "fats": 5.0})
        self.assertEqual(day["progress"], {"workout_completed": True, "completed_meals": [0]})
        self.assertEqual(day["diet_source"], "base")

    def test_rest_day(self) -> None:
        day = build_day(self.ctx, date(2026, 1, 6))
        self.assertIsNone(day["workout"])
        self.assertIsNone(day["week_number"])
        self.assertEqual(day["meals"][0]["id"], "d1")
        self.assertEqual(day["progress"], {"workout_completed": False, "completed_meals": []})

    def test_weeks_and_meal_cycle_wrap(self) -> None:
        second_week = build_day(self.ctx, date(2026, 1, 12))
        self.assertEqual(second_week["workout"]["focus"], "B")
        self.assertEqual(second_week["week_number"], 2)
        self.assertEqual(second_week["cycle_day"], 7)

        third_week = build_day(self.ctx, date(2026, 1, 19))
        self.assertEqual(third_week["workout"]["focus"], "A")
        self.assertEqual(third_week["cycle_day"], 0)
        self.assertEqual(third_week["meals"][0]["id"], "d0")

    def test_day_before_start_wraps(self) -> None:
        day = build_day(self.ctx, date(2026, 1, 4))
        self.assertEqual(day["days_since_start"], -1)
        self.assertEqual(day["cycle_day"], 13)
        self.assertEqual(day["day_number"], 7)
        self.assertEqual(day["meals"][0]["id"], "d13")

    def test_exercise_swap_applies_to_that_day_only(self) -> None:
        self.ctx.swaps = {"2026-01-05": {"Bench Press": "Push-Up"}}
        exercise = build_day(self.ctx, date(2026, 1, 5))["workout"]["exercises"][0]
        self.assertEqual(exercise["name"], "Push-Up")
        self.assertEqual(exercise["original_name"], "Bench Press")
        self.assertTrue(exercise["swapped"])
        # The stored plan is not touched.
        self.assertEqual(self.ctx.workout_plan["weeks"][0][0]["exercises"][0]["name"], "Bench Press")

        later = build_day(self.ctx, date(2026, 1, 19))["workout"]["exercises"][0]
        self.assertEqual(later["name"], "Bench Press")

    def test_no_plans(self) -> None:
        ctx = PlanContext(user_plan={"start_date": "2026-01-05", "progress": {}})
        day = build_day(ctx, date(2026, 1, 5))
        self.assertIsNone(day["workout"])
        self.assertEqual(day["meals"], [])
        self.assertEqual(day["totals"]["calories"], 0)


class TestHelpers(unittest.TestCase):
    def test_to_date(self) -> None:
        self.assertEqual(to_date("2026-01-05T10:00:00"), date(2026, 1, 5))
        self.assertEqual(to_date(date(2026, 1, 5)), date(2026, 1, 5))
        with self.assertRaises(ValueError):
            to_date(42)

    def test_cycle_day(self) -> None:
        self.assertEqual(cycle_day(15), 1)
        self.assertEqual(cycle_day(-15), 13)

    def test_day_totals_rounding(self) -> None:
        totals = day_totals([{"calories": 100.6, "protein": 10.04}, {"calories": 50, "fats": 2.25}])
        self.assertEqual(totals["calories"], 151)
        self.assertEqual(totals["protein"], 10.0)
        self.assertEqual(totals["carbs"], 0.0)


if __name__ == "__main__":
    unittest.main()
