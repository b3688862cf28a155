# -*- coding: utf-8 -*-
"""Energy expenditure and macro targets (Mifflin-St Jeor)."""

from __future__ import annotations

from typing import Dict, Optional

DEFAULT_BMR = 1800

ACTIVITY_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extremely_active": 1.9,
}

MEAL_DISTRIBUTION: Dict[str, float] = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.30,
    "snack": 0.10,
}


def calculate_bmr(
    *,
    weight: Optional[float],
    height: Optional[float],
    age: Optional[int],
    gender: Optional[str] = None,
) -> int:
    if not weight or not height or not age:
        return DEFAULT_BMR
    base = 10 * weight + 6.25 * height - 5 * age
    return int(round(base - 161 if gender == "female" else base + 5))


def calculate_tdee(bmr: float, activity_level: Optional[str]) -> int:
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level or "", ACTIVITY_MULTIPLIERS["moderately_active"])
    return int(round(bmr * multiplier))


def calculate_recommended_calories(tdee: float, goal: Optional[str]) -> int:
    if goal == "weight_loss":
        return int(round(tdee * 0.8))
    if goal in ("weight_gain", "muscle_building"):
        return int(round(tdee * 1.15))
    return int(round(tdee))


def calculate_macro_distribution(diet_type: Optional[str], goal: Optional[str]) -> Dict[str, int]:
    """Macro split in percent of calories."""
    if diet_type == "keto":
        return {"protein": 25, "carbs": 5, "fats": 70}
    if goal == "muscle_building":
        return {"protein": 30, "carbs": 45, "fats": 25}
    if goal == "weight_loss":
        return {"protein": 35, "carbs": 35, "fats": 30}
    return {"protein": 25, "carbs": 50, "fats": 25}


def calculate_meal_calories(total_calories: float, meal_type: Optional[str]) -> int:
    share = MEAL_DISTRIBUTION.get((meal_type or "").lower(), MEAL_DISTRIBUTION["breakfast"])
    return int(round(total_calories * share))


def macro_grams(calories: float, distribution: Dict[str, int]) -> Dict[str, int]:
    """Convert a percent split into grams (4/4/9 kcal per gram)."""
    return {
        "protein": int(round(calories * distribution["protein"] / 100 / 4)),
        "carbs": int(round(calories * distribution["carbs"] / 100 / 4)),
        "fats": int(round(calories * distribution["fats"] / 100 / 9)),
    }
