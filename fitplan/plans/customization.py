# -*- coding: utf-8 -*-
"""
Per-user meal customization.

The first swap or ingredient edit copies the active base week cycle into the
user's custom diet plan; every later change mutates that copy. Slot ids from
the base plan survive the copy, so a meal id taken from the "today" view stays
addressable after customization.
"""

from __future__ import annotations

import copy
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from fastapi import HTTPException

from ..foods.storage import get_food_item
from ..ingredients.nutrition import (
    NUTRITION_FIELDS,
    make_ingredient,
    meal_totals,
    reconcile_to_declared,
    sanitize_ingredient,
    scale_food_item,
    structured_from_text,
)
from .assembler import cycle_day, days_since_start
from .storage import (
    get_custom_diet_plan,
    get_diet_plan,
    get_meal,
    list_meals,
    require_user_plan,
    save_custom_diet_plan,
    set_custom_diet_plan_id,
    update_custom_week_cycle,
)

logger = logging.getLogger(__name__)

CALORIE_WINDOW = 0.25
MIN_WINDOW_CANDIDATES = 5
DEFAULT_ALTERNATIVES = 10

_CATALOG_ONLY_KEYS = ("created_at",)


def ensure_custom_plan(user_id: str) -> Dict[str, Any]:
    """Return the user's custom diet plan, copying the base cycle on first use."""
    user_plan = require_user_plan(user_id)
    if user_plan.get("custom_diet_plan_id"):
        custom = get_custom_diet_plan(user_id)
        if custom:
            return custom

    diet_plan_id = user_plan.get("diet_plan_id")
    base = get_diet_plan(diet_plan_id) if diet_plan_id else None
    if not base:
        raise HTTPException(status_code=404, detail="No diet plan selected")

    custom = save_custom_diet_plan(
        user_id=user_id,
        base_plan_id=base["id"],
        week_cycle=copy.deepcopy(base["week_cycle"]),
        name=f"{base['name']} (customized)",
    )
    set_custom_diet_plan_id(user_id=user_id, custom_diet_plan_id=custom["id"])
    logger.info("Created custom diet plan %s for user %s from %s", custom["id"], user_id, base["id"])
    return custom


def _active_week_cycle(user_id: str) -> List[List[Dict[str, Any]]]:
    user_plan = require_user_plan(user_id)
    if user_plan.get("custom_diet_plan_id"):
        custom = get_custom_diet_plan(user_id)
        if custom:
            return custom["week_cycle"]
    if user_plan.get("diet_plan_id"):
        base = get_diet_plan(user_plan["diet_plan_id"])
        if base:
            return base["week_cycle"]
    raise HTTPException(status_code=404, detail="No diet plan selected")


def _locate_slot(week_cycle: List[List[Dict[str, Any]]], meal_id: str) -> Tuple[int, int]:
    for day_index, meals in enumerate(week_cycle):
        for meal_index, meal in enumerate(meals or []):
            if meal.get("id") == meal_id:
                return day_index, meal_index
    raise HTTPException(status_code=404, detail="Meal not found in plan")


def _slot(week_cycle: List[List[Dict[str, Any]]], day_index: int, meal_index: int) -> Dict[str, Any]:
    if day_index < 0 or day_index >= len(week_cycle):
        raise HTTPException(status_code=400, detail="Day index out of range")
    meals = week_cycle[day_index] or []
    if meal_index < 0 or meal_index >= len(meals):
        raise HTTPException(status_code=400, detail="Meal number out of range")
    return meals[meal_index]


def _slot_for_date(user_id: str, day: date, meal_number: int) -> Tuple[int, Dict[str, Any]]:
    user_plan = require_user_plan(user_id)
    index = cycle_day(days_since_start(user_plan["start_date"], day))
    return index, _slot(_active_week_cycle(user_id), index, meal_number)


# ---- Swaps ----


def slot_copy_of(catalog_meal: Dict[str, Any], replaced: Dict[str, Any]) -> Dict[str, Any]:
    meal = {k: copy.deepcopy(v) for k, v in catalog_meal.items() if k not in _CATALOG_ONLY_KEYS}
    meal["source_meal_id"] = catalog_meal["id"]
    meal["id"] = f"slot-{uuid4().hex[:12]}"
    meal["timing"] = replaced.get("timing") or catalog_meal.get("timing")
    return meal


def swap_meal_by_cycle(*, user_id: str, day_index: int, meal_index: int, new_meal_id: str) -> Dict[str, Any]:
    catalog_meal = get_meal(new_meal_id)
    if not catalog_meal:
        raise HTTPException(status_code=404, detail="Meal not found")
    custom = ensure_custom_plan(user_id)
    week_cycle = custom["week_cycle"]
    replaced = _slot(week_cycle, day_index, meal_index)
    new_slot = slot_copy_of(catalog_meal, replaced)
    week_cycle[day_index][meal_index] = new_slot
    update_custom_week_cycle(user_id=user_id, week_cycle=week_cycle)
    logger.info("User %s swapped cycle day %s meal %s to %s", user_id, day_index, meal_index, new_meal_id)
    return {"cycle_day": day_index, "meal_number": meal_index, "meal": new_slot, "replaced_meal_id": replaced.get("id")}


def swap_meal(*, user_id: str, day: date, meal_number: int, new_meal_id: str) -> Dict[str, Any]:
    index, _ = _slot_for_date(user_id, day, meal_number)
    result = swap_meal_by_cycle(user_id=user_id, day_index=index, meal_index=meal_number, new_meal_id=new_meal_id)
    result["date"] = day.isoformat()
    return result


# ---- Alternatives ----


def compare_meals(current: Dict[str, Any], candidate: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    out: Dict[str, Dict[str, Any]] = {}
    for field in NUTRITION_FIELDS:
        base = float(current.get(field) or 0)
        value = float(candidate.get(field) or 0)
        diff = value - base
        out[field] = {
            "value": round(value, 1),
            "current": round(base, 1),
            "diff": round(diff, 1),
            "percentage": round(diff / base * 100, 1) if base else None,
            "is_higher": diff > 0,
        }
    return out


def _score(current: Dict[str, Any], candidate: Dict[str, Any]) -> float:
    calories = float(current.get("calories") or 0)
    calorie_term = abs(float(candidate.get("calories") or 0) - calories) / calories if calories else 0.0
    macro_total = sum(float(current.get(f) or 0) for f in ("protein", "carbs", "fats"))
    macro_diff = sum(
        abs(float(candidate.get(f) or 0) - float(current.get(f) or 0)) for f in ("protein", "carbs", "fats")
    )
    macro_term = macro_diff / macro_total if macro_total else 0.0
    score = calorie_term + 0.5 * macro_term
    timing = (current.get("timing") or "").lower()
    if timing and timing == (candidate.get("timing") or "").lower():
        score -= 0.1
    return score


def rank_alternatives(
    current: Dict[str, Any],
    catalog: List[Dict[str, Any]],
    limit: int = DEFAULT_ALTERNATIVES,
) -> List[Dict[str, Any]]:
    exclude = {current.get("id"), current.get("source_meal_id")}
    candidates = [m for m in catalog if m.get("id") not in exclude]
    calories = float(current.get("calories") or 0)
    if calories > 0:
        low, high = calories * (1 - CALORIE_WINDOW), calories * (1 + CALORIE_WINDOW)
        windowed = [m for m in candidates if low <= float(m.get("calories") or 0) <= high]
        if len(windowed) >= MIN_WINDOW_CANDIDATES:
            candidates = windowed

    ranked = sorted(candidates, key=lambda m: (_score(current, m), m.get("name") or ""))
    out = []
    for meal in ranked[:limit]:
        item = copy.deepcopy(meal)
        item["comparison"] = compare_meals(current, meal)
        out.append(item)
    return out


def find_alternative_meals(
    *,
    user_id: str,
    day: date,
    meal_number: int,
    limit: int = DEFAULT_ALTERNATIVES,
) -> Dict[str, Any]:
    index, current = _slot_for_date(user_id, day, meal_number)
    return {
        "date": day.isoformat(),
        "cycle_day": index,
        "meal_number": meal_number,
        "current_meal": current,
        "alternatives": rank_alternatives(current, list_meals(), limit),
    }


def swap_options(*, user_id: str, meal_index: int, day_index: int, limit: int = DEFAULT_ALTERNATIVES) -> Dict[str, Any]:
    current = _slot(_active_week_cycle(user_id), day_index, meal_index)
    return {
        "cycle_day": day_index,
        "meal_number": meal_index,
        "current_meal": current,
        "alternatives": rank_alternatives(current, list_meals(), limit),
    }


# ---- Ingredient editing ----


def get_meal_details(*, user_id: str, meal_id: str) -> Dict[str, Any]:
    week_cycle = _active_week_cycle(user_id)
    day_index, meal_index = _locate_slot(week_cycle, meal_id)
    meal = week_cycle[day_index][meal_index]
    structured = meal.get("structured_ingredients") or []
    return {
        "cycle_day": day_index,
        "meal_number": meal_index,
        "meal": meal,
        "has_structured_ingredients": bool(structured),
        "computed_totals": meal_totals(structured) if structured else None,
    }


def _edit_slot(user_id: str, meal_id: str, edit) -> Dict[str, Any]:
    custom = ensure_custom_plan(user_id)
    week_cycle = custom["week_cycle"]
    day_index, meal_index = _locate_slot(week_cycle, meal_id)
    meal = week_cycle[day_index][meal_index]
    ingredients, warnings = edit(list(meal.get("structured_ingredients") or []))

    totals = meal_totals(ingredients)
    capped = totals.pop("capped")
    warnings.extend(f"Meal {field} capped at {totals[field]}" for field in capped)
    meal["structured_ingredients"] = ingredients
    meal.update(totals)
    week_cycle[day_index][meal_index] = meal
    update_custom_week_cycle(user_id=user_id, week_cycle=week_cycle)
    return {"meal": meal, "warnings": warnings}


def update_meal_ingredients(*, user_id: str, meal_id: str, ingredients: List[Dict[str, Any]]) -> Dict[str, Any]:
    def edit(_current):
        out, warnings = [], []
        for i, raw in enumerate(ingredients):
            ingredient, w = sanitize_ingredient(raw, i)
            out.append(ingredient)
            warnings.extend(w)
        return out, warnings

    return _edit_slot(user_id, meal_id, edit)


def add_meal_ingredient(
    *,
    user_id: str,
    meal_id: str,
    food_item_id: Optional[str] = None,
    quantity: Optional[float] = None,
    unit: Optional[str] = None,
    ingredient: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    if food_item_id:
        food = get_food_item(food_item_id)
        if not food:
            raise HTTPException(status_code=404, detail="Food item not found")
        qty = float(quantity if quantity is not None else food["base_quantity"])
        use_unit = unit or food["base_unit"]
        built = make_ingredient(
            name=food["name"],
            quantity=qty,
            unit=use_unit,
            nutrition=scale_food_item(food, qty, use_unit),
            food_item_id=food_item_id,
        )
        new_ingredient, warnings = sanitize_ingredient(built)
    elif ingredient:
        new_ingredient, warnings = sanitize_ingredient(ingredient)
    else:
        raise HTTPException(status_code=400, detail="Provide food_item_id or an ingredient")

    def edit(current):
        return current + [new_ingredient], list(warnings)

    return _edit_slot(user_id, meal_id, edit)


def remove_meal_ingredient(*, user_id: str, meal_id: str, index: int) -> Dict[str, Any]:
    def edit(current):
        if index < 0 or index >= len(current):
            raise HTTPException(status_code=404, detail="Ingredient not found")
        return current[:index] + current[index + 1:], []

    return _edit_slot(user_id, meal_id, edit)


def migrate_meal_ingredients(*, user_id: str, meal_id: str) -> Dict[str, Any]:
    """Turn free-text ingredients into structured ones matching the meal's declared totals."""
    week_cycle = _active_week_cycle(user_id)
    day_index, meal_index = _locate_slot(week_cycle, meal_id)
    meal = week_cycle[day_index][meal_index]
    if meal.get("structured_ingredients"):
        return {"migrated": False, "meal": meal, "warnings": []}

    texts = [t for t in meal.get("ingredients") or [] if isinstance(t, str) and t.strip()]
    if texts:
        estimated = [structured_from_text(t) for t in texts]
    else:
        estimated = [make_ingredient(name=meal.get("name") or "Meal", quantity=1, unit="serving",
                                     nutrition={f: meal.get(f) or 0 for f in NUTRITION_FIELDS})]
    declared = {f: meal.get(f) for f in NUTRITION_FIELDS}
    structured = reconcile_to_declared(estimated, declared)

    custom = ensure_custom_plan(user_id)
    cycle = custom["week_cycle"]
    target = cycle[day_index][meal_index]
    target["structured_ingredients"] = structured
    update_custom_week_cycle(user_id=user_id, week_cycle=cycle)
    logger.info("Migrated %s ingredients for meal %s (user %s)", len(structured), meal_id, user_id)
    return {"migrated": True, "meal": target, "warnings": []}
