# -*- coding: utf-8 -*-
"""Ingredient-level nutrition: estimation, scaling, capping and meal totals."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from .lookup import IngredientInfo, find_ingredient
from .parser import (
    UNIT_ALIASES,
    MeasureKind,
    ParsedIngredient,
    measure_kind,
    normalize_unit,
    parse_ingredient,
    to_standard,
)

logger = logging.getLogger(__name__)

NUTRITION_FIELDS = ("calories", "protein", "carbs", "fats")

ALLOWED_UNITS = set(UNIT_ALIASES.values())

QUANTITY_CAPS: Dict[str, float] = {
    "g": 2000,
    "ml": 2000,
    "kg": 2,
    "l": 2,
    "oz": 70,
    "lb": 4.4,
    "cup": 8,
    "tbsp": 32,
    "tsp": 96,
    "serving": 10,
    "piece": 50,
    "slice": 50,
    "item": 50,
}
DEFAULT_QUANTITY_CAP = 10.0

MEAL_CAPS: Dict[str, float] = {
    "calories": 3000,
    "protein": 250,
    "carbs": 300,
    "fats": 150,
}

# Keyword fallbacks when the table has no row: (calories, protein, carbs, fats)
# per serving, or per 100 g/ml when measured by weight or volume.
_HEURISTICS: List[Tuple[Tuple[str, ...], Tuple[float, float, float, float]]] = [
    (("chicken", "beef", "fish", "pork", "turkey", "meat", "steak", "salmon", "tuna"), (150, 25, 0, 8)),
    (("rice", "pasta", "bread", "potato", "oat", "noodle", "grain", "wrap"), (130, 3, 25, 1)),
    (("oil", "butter", "nut", "seed", "cheese"), (120, 0, 0, 14)),
    (("vegetable", "broccoli", "spinach", "lettuce", "green", "salad", "pepper", "onion"), (30, 2, 5, 0)),
    (("fruit", "apple", "banana", "berry", "orange"), (60, 0, 15, 0)),
]
_DEFAULT_HEURISTIC = (50, 2, 5, 2)

# Grams for one of a countable unit when the ingredient has no typical item weight.
_COUNT_UNIT_GRAMS: Dict[str, float] = {
    "pinch": 0.5,
    "dash": 0.5,
    "handful": 30,
    "scoop": 30,
    "can": 400,
    "jar": 300,
    "pack": 250,
}
_DEFAULT_ITEM_GRAMS = 100.0


def _round_nutrition(values: Dict[str, float]) -> Dict[str, float]:
    return {
        "calories": int(round(values.get("calories") or 0)),
        "protein": round(float(values.get("protein") or 0), 1),
        "carbs": round(float(values.get("carbs") or 0), 1),
        "fats": round(float(values.get("fats") or 0), 1),
    }


def _non_negative(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if number != number or number < 0:  # NaN
        return 0.0
    return number


def make_ingredient(
    *,
    name: str,
    quantity: float,
    unit: str,
    nutrition: Dict[str, float],
    original_string: Optional[str] = None,
    food_item_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a structured ingredient whose reference snapshot equals its current values."""
    rounded = _round_nutrition(nutrition)
    ingredient: Dict[str, Any] = {
        "name": name,
        "quantity": round(float(quantity), 2),
        "unit": unit,
        **rounded,
        "reference_quantity": round(float(quantity), 2),
        "food_item_id": food_item_id,
        "original_string": original_string,
    }
    for field in NUTRITION_FIELDS:
        ingredient[f"reference_{field}"] = rounded[field]
    return ingredient


def grams_for(quantity: float, unit: Optional[str], info: Optional[IngredientInfo] = None) -> float:
    """Approximate mass in grams. Liquids count 1 ml as 1 g."""
    kind = measure_kind(unit)
    if kind in (MeasureKind.WEIGHT, MeasureKind.VOLUME):
        value, _ = to_standard(quantity, unit)
        return value
    if unit in _COUNT_UNIT_GRAMS:
        return quantity * _COUNT_UNIT_GRAMS[unit]
    per_item = info.unit_weight_g if info and info.unit_weight_g else _DEFAULT_ITEM_GRAMS
    return quantity * per_item


def _heuristic_for(name: str) -> Tuple[float, float, float, float]:
    lowered = name.lower()
    for keywords, values in _HEURISTICS:
        if any(k in lowered for k in keywords):
            return values
    return _DEFAULT_HEURISTIC


def estimate_nutrition(parsed: ParsedIngredient) -> Dict[str, float]:
    quantity = parsed.quantity if parsed.quantity is not None else 1.0
    unit = parsed.unit or "serving"
    info = find_ingredient(parsed.name)
    if info:
        factor = grams_for(quantity, unit, info) / 100.0
        return {
            "calories": info.calories * factor,
            "protein": info.protein * factor,
            "carbs": info.carbs * factor,
            "fats": info.fats * factor,
        }

    calories, protein, carbs, fats = _heuristic_for(parsed.name)
    if measure_kind(unit) is MeasureKind.COUNT:
        multiplier = quantity
    else:
        multiplier = grams_for(quantity, unit) / 100.0
    return {
        "calories": calories * multiplier,
        "protein": protein * multiplier,
        "carbs": carbs * multiplier,
        "fats": fats * multiplier,
    }


def estimate_ingredient(parsed: ParsedIngredient) -> Dict[str, Any]:
    quantity = parsed.quantity if parsed.quantity is not None else 1.0
    unit = parsed.unit or "serving"
    quantity, _ = cap_quantity(quantity, unit)
    estimate = estimate_nutrition(
        ParsedIngredient(quantity=quantity, unit=unit, name=parsed.name, original=parsed.original)
    )
    return make_ingredient(
        name=parsed.name,
        quantity=quantity,
        unit=unit,
        nutrition=estimate,
        original_string=parsed.original,
    )


def structured_from_text(text: str) -> Dict[str, Any]:
    return estimate_ingredient(parse_ingredient(text))


def scale_food_item(food: Dict[str, Any], quantity: float, unit: Optional[str] = None) -> Dict[str, Any]:
    """Scale a food item's per-base-quantity nutrition to `quantity` of `unit`."""
    unit = normalize_unit(unit) if unit else None
    unit = unit or food.get("base_unit") or "g"
    amount = float(quantity)
    if unit == "oz":
        amount, unit = amount * 28.35, "g"
    elif unit == "lb":
        amount, unit = amount * 453.6, "g"
    elif unit == "kg":
        amount, unit = amount * 1000.0, "g"
    elif unit == "l":
        amount, unit = amount * 1000.0, "ml"

    base_quantity = float(food.get("base_quantity") or 100.0)
    scale = amount / base_quantity if base_quantity > 0 else 0.0
    return _round_nutrition({field: float(food.get(field) or 0) * scale for field in NUTRITION_FIELDS})


def cap_quantity(quantity: float, unit: Optional[str]) -> Tuple[float, bool]:
    cap = QUANTITY_CAPS.get(unit or "", DEFAULT_QUANTITY_CAP)
    if quantity > cap:
        return float(cap), True
    return float(quantity), False


def rescale_ingredient(ingredient: Dict[str, Any]) -> Dict[str, Any]:
    """Recompute nutrition from the reference snapshot when the quantity moved."""
    out = dict(ingredient)
    quantity = _non_negative(out.get("quantity"))
    reference_quantity = _non_negative(out.get("reference_quantity"))

    if reference_quantity <= 0:
        out["reference_quantity"] = quantity
        for field in NUTRITION_FIELDS:
            out[f"reference_{field}"] = _non_negative(out.get(field))
        return out

    for field in NUTRITION_FIELDS:
        if out.get(f"reference_{field}") is None:
            out[f"reference_{field}"] = _non_negative(out.get(field))

    if abs(quantity - reference_quantity) > 1e-9:
        ratio = quantity / reference_quantity
        scaled = {field: _non_negative(out[f"reference_{field}"]) * ratio for field in NUTRITION_FIELDS}
        out.update(_round_nutrition(scaled))
    return out


def sanitize_ingredient(raw: Dict[str, Any], index: int = 0) -> Tuple[Dict[str, Any], List[str]]:
    warnings: List[str] = []
    name = str(raw.get("name") or "").strip() or f"Ingredient {index + 1}"

    raw_unit = raw.get("unit")
    unit = normalize_unit(str(raw_unit)) if raw_unit else None
    if unit not in ALLOWED_UNITS:
        if raw_unit:
            warnings.append(f"{name}: unknown unit '{raw_unit}' replaced with 'serving'")
        unit = "serving"

    raw_quantity = _non_negative(raw.get("quantity"))
    quantity, capped = cap_quantity(raw_quantity, unit)
    if capped:
        warnings.append(f"{name}: quantity capped at {quantity:g} {unit}")

    ingredient: Dict[str, Any] = {
        "name": name,
        "quantity": round(quantity, 2),
        "unit": unit,
        "food_item_id": raw.get("food_item_id"),
        "original_string": raw.get("original_string"),
    }
    for field in NUTRITION_FIELDS:
        ingredient[field] = _non_negative(raw.get(field))
    if _non_negative(raw.get("reference_quantity")) > 0:
        ingredient["reference_quantity"] = _non_negative(raw.get("reference_quantity"))
        for field in NUTRITION_FIELDS:
            ref = raw.get(f"reference_{field}")
            ingredient[f"reference_{field}"] = _non_negative(ref) if ref is not None else None
    elif capped:
        # The submitted nutrition belongs to the uncapped amount.
        ingredient["reference_quantity"] = raw_quantity
        for field in NUTRITION_FIELDS:
            ingredient[f"reference_{field}"] = ingredient[field]

    ingredient = rescale_ingredient(ingredient)
    ingredient.update(_round_nutrition(ingredient))
    return ingredient, warnings


def meal_totals(ingredients: List[Dict[str, Any]]) -> Dict[str, Any]:
    sums = {field: 0.0 for field in NUTRITION_FIELDS}
    for ingredient in ingredients:
        for field in NUTRITION_FIELDS:
            sums[field] += _non_negative(ingredient.get(field))

    capped: List[str] = []
    for field, cap in MEAL_CAPS.items():
        if sums[field] > cap:
            sums[field] = float(cap)
            capped.append(field)
    if capped:
        logger.info("Meal totals capped for %s", ", ".join(capped))

    totals: Dict[str, Any] = _round_nutrition(sums)
    totals["capped"] = capped
    return totals


def reconcile_to_declared(ingredients: List[Dict[str, Any]], declared: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Scale estimated ingredient nutrition so each field sums to the meal's declared value."""
    out = [dict(ingredient) for ingredient in ingredients]
    for field in NUTRITION_FIELDS:
        target = _non_negative(declared.get(field))
        estimated = sum(_non_negative(ingredient.get(field)) for ingredient in out)
        if target <= 0 or estimated <= 0:
            continue
        factor = target / estimated
        for ingredient in out:
            ingredient[field] = _non_negative(ingredient.get(field)) * factor

    for ingredient in out:
        ingredient.update(_round_nutrition(ingredient))
        ingredient["reference_quantity"] = ingredient.get("quantity")
        for field in NUTRITION_FIELDS:
            ingredient[f"reference_{field}"] = ingredient[field]
    return out
