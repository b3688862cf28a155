# -*- coding: utf-8 -*-
"""
Diet plan generation from questionnaire answers.

Meals are filtered from the catalog, ranked by how well they fit the user's
preferences and then packed into a 14-day cycle whose daily calories track the
recommended target.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from ..plans.assembler import MEAL_CYCLE_DAYS
from ..plans.customization import slot_copy_of
from ..plans.storage import activate_plans, list_meals, save_custom_diet_plan
from .storage import require_preferences

logger = logging.getLogger(__name__)

MIN_STRICT_MEALS = 21

SKILL_LEVELS = {"beginner": 1, "intermediate": 2, "advanced": 3}
BUDGET_TIERS = {"budget": 1, "moderate": 2, "premium": 3}
MAX_PREP_MINUTES = {"minimal": 15, "moderate": 30, "extended": 180}

# Diet types that must appear in a meal's dietary tags / nutritional tags.
_DIETARY_TAG_DIETS = ("vegetarian", "vegan", "pescatarian")
_NUTRITIONAL_TAG_DIETS = {"keto": "low-carb", "paleo": "paleo-friendly"}

HEALTH_TAGS = {
    "diabetes": "diabetes-friendly",
    "heart_disease": "heart-healthy",
    "arthritis": "anti-inflammatory",
    "ibs": "low-fodmap",
    "gerd": "gerd-friendly",
    "iron_deficiency": "iron-rich",
    "vitamin_d_deficiency": "vitamin-d-rich",
    "b12_deficiency": "b12-rich",
    "calcium_deficiency": "calcium-rich",
    "zinc_deficiency": "zinc-rich",
    "high_cholesterol": "low-cholesterol",
    "high_triglycerides": "low-triglycerides",
}


def _tags(meal: Dict[str, Any], key: str) -> List[str]:
    return list(meal.get(key) or [])


def _health_tags(prefs: Dict[str, Any]) -> List[str]:
    return [HEALTH_TAGS[c] for c in prefs.get("health_conditions") or [] if c in HEALTH_TAGS]


def matches_diet(meal: Dict[str, Any], prefs: Dict[str, Any], *, strict: bool = True) -> bool:
    diet_type = prefs.get("diet_type")
    if diet_type in _DIETARY_TAG_DIETS and diet_type not in _tags(meal, "dietary_tags"):
        return False
    if strict and diet_type in _NUTRITIONAL_TAG_DIETS:
        if _NUTRITIONAL_TAG_DIETS[diet_type] not in _tags(meal, "nutritional_tags"):
            return False
    contains = set(_tags(meal, "contains"))
    return not contains.intersection(prefs.get("excluded_ingredients") or [])


def matches_lifestyle(meal: Dict[str, Any], prefs: Dict[str, Any]) -> bool:
    health = _health_tags(prefs)
    if health and not set(health).intersection(_tags(meal, "suitable_for")):
        return False

    preparation = meal.get("preparation") or {}
    skill = SKILL_LEVELS.get(preparation.get("difficulty") or "beginner", 1)
    if skill > SKILL_LEVELS.get(prefs.get("cooking_skill") or "advanced", 3):
        return False

    max_minutes = MAX_PREP_MINUTES.get(prefs.get("cooking_time") or "extended", 180)
    if float(preparation.get("time") or 0) > max_minutes:
        return False

    tier = BUDGET_TIERS.get(meal.get("budget_tier") or "budget", 1)
    return tier <= BUDGET_TIERS.get(prefs.get("budget") or "premium", 3)


def preference_score(meal: Dict[str, Any], prefs: Dict[str, Any]) -> float:
    score = 0.0
    if meal.get("cuisine") and meal["cuisine"] in (prefs.get("cuisine_preferences") or []):
        score += 3
    if prefs.get("meal_prep") and (meal.get("preparation") or {}).get("meal_prep_friendly"):
        score += 2
    health = _health_tags(prefs)
    score += 1.5 * sum(1 for tag in _tags(meal, "suitable_for") if tag in health)
    return score


def select_meals(catalog: List[Dict[str, Any]], prefs: Dict[str, Any]) -> List[Dict[str, Any]]:
    strict = [m for m in catalog if matches_diet(m, prefs) and matches_lifestyle(m, prefs)]
    selected = list(strict)
    if len(strict) < MIN_STRICT_MEALS:
        logger.info("Only %s meals match all preferences, relaxing constraints", len(strict))
        chosen = {m["id"] for m in strict}
        selected += [m for m in catalog if m["id"] not in chosen and matches_diet(m, prefs, strict=False)]
    # sorted() is stable, so equally scored meals keep catalog order.
    return sorted(selected, key=lambda m: preference_score(m, prefs), reverse=True)


def meals_per_day(target_calories: float) -> int:
    if target_calories > 2500:
        return 5
    if target_calories > 1800:
        return 4
    return 3


def _slot_target(index: int, count: int, total: float, remaining: float) -> float:
    if index == 0:
        return total * 0.25
    if index == count - 1:
        return remaining * 0.5
    return remaining * 0.3


def _pick(
    meals: List[Dict[str, Any]],
    target: float,
    remaining: float,
    used_today: set,
    usage: Counter,
) -> Dict[str, Any]:
    within = [m for m in meals if float(m.get("calories") or 0) <= remaining] or meals
    return min(
        within,
        key=lambda m: (
            m["id"] in used_today,
            abs(float(m.get("calories") or 0) - target),
            usage[m["id"]],
        ),
    )


def build_week_cycle(
    meals: List[Dict[str, Any]],
    target_calories: float,
    days: int = MEAL_CYCLE_DAYS,
) -> List[List[Dict[str, Any]]]:
    count = meals_per_day(target_calories)
    usage: Counter = Counter()
    cycle: List[List[Dict[str, Any]]] = []
    for _ in range(days):
        remaining = float(target_calories)
        used_today: set = set()
        day: List[Dict[str, Any]] = []
        for index in range(count):
            target = _slot_target(index, count, float(target_calories), remaining)
            meal = _pick(meals, target, remaining, used_today, usage)
            used_today.add(meal["id"])
            usage[meal["id"]] += 1
            day.append(slot_copy_of(meal, {}))
            remaining -= float(meal.get("calories") or 0)
        cycle.append(day)
    return cycle


def generate_custom_diet_plan(user_id: str, catalog: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    prefs = require_preferences(user_id)
    catalog = list_meals() if catalog is None else catalog
    if not catalog:
        raise HTTPException(status_code=404, detail="No meals available to build a plan")

    meals = select_meals(catalog, prefs) or catalog
    target = float(prefs.get("recommended_calories") or 2000)
    week_cycle = build_week_cycle(meals, target)

    custom = save_custom_diet_plan(
        user_id=user_id,
        base_plan_id="custom",
        week_cycle=week_cycle,
        name="Personalized meal plan",
    )
    activate_plans(user_id=user_id, custom_diet_plan_id=custom["id"], clear_diet_plan=True)
    logger.info(
        "Generated diet plan %s for user %s from %s meals (%s kcal target)",
        custom["id"], user_id, len(meals), int(target),
    )
    return {
        "message": "Custom plan generated successfully",
        "plan_id": custom["id"],
        "recommended_calories": int(target),
        "meals_per_day": meals_per_day(target),
        "days": len(week_cycle),
    }
