# -*- coding: utf-8 -*-
"""
Shopping-list aggregation.

Every meal in the requested date range is resolved through the plan assembler,
so swapped meals and edited ingredients are what end up on the list. Duplicate
ingredients are merged by canonical name and measurement kind.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException

from ..config import settings
from ..ingredients.lookup import CATEGORY_ORDER, category_for
from ..ingredients.parser import (
    MeasureKind,
    canonical_name,
    from_standard,
    measure_kind,
    normalize_unit,
    parse_ingredient,
    to_standard,
)
from ..plans.assembler import meals_between
from .pricing import estimate_price

logger = logging.getLogger(__name__)


def current_week(today: Optional[date] = None) -> Tuple[date, date]:
    """Sunday to Saturday around `today`."""
    today = today or date.today()
    start = today - timedelta(days=(today.weekday() + 1) % 7)
    return start, start + timedelta(days=6)


def _entries_for_meal(meal: Dict[str, Any]) -> List[Tuple[str, Optional[float], Optional[str]]]:
    structured = meal.get("structured_ingredients") or []
    if structured:
        return [
            (str(i.get("name") or ""), i.get("quantity"), normalize_unit(i.get("unit")) if i.get("unit") else None)
            for i in structured
            if i.get("name")
        ]
    entries = []
    for text in meal.get("ingredients") or []:
        if not isinstance(text, str) or not text.strip():
            continue
        parsed = parse_ingredient(text)
        entries.append((parsed.name, parsed.quantity, parsed.unit))
    return entries


def aggregate_meals(meals: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    merged: Dict[Tuple[str, MeasureKind], Dict[str, Any]] = {}
    for meal in meals:
        for name, quantity, unit in _entries_for_meal(meal):
            key_name = canonical_name(name)
            if not key_name:
                continue
            if quantity is None or float(quantity) <= 0:
                amount, standard_unit, kind = 1.0, "item", MeasureKind.COUNT
            else:
                amount, standard_unit = to_standard(float(quantity), unit)
                kind = measure_kind(unit)
            item = merged.setdefault(
                (key_name, kind),
                {
                    "name": key_name,
                    "display_name": name,
                    "standard_quantity": 0.0,
                    "standard_unit": standard_unit,
                    "occurrences": 0,
                    "meals": [],
                },
            )
            item["standard_quantity"] += amount
            item["occurrences"] += 1
            meal_name = meal.get("name")
            if meal_name and meal_name not in item["meals"]:
                item["meals"].append(meal_name)

    categories: Dict[str, List[Dict[str, Any]]] = {}
    for item in merged.values():
        quantity, unit = from_standard(item["standard_quantity"], item["standard_unit"])
        item["quantity"] = quantity
        item["unit"] = unit
        item["standard_quantity"] = round(item["standard_quantity"], 2)
        item["category"] = category_for(item["name"])
        item["estimated_price"] = estimate_price(item["name"], item["standard_quantity"], item["standard_unit"])
        categories.setdefault(item["category"], []).append(item)

    ordered: Dict[str, List[Dict[str, Any]]] = {}
    for category in CATEGORY_ORDER:
        if category in categories:
            ordered[category] = sorted(categories[category], key=lambda i: i["name"])
    return ordered


def build_shopping_list(user_id: str, start: Optional[date] = None, end: Optional[date] = None) -> Dict[str, Any]:
    if start is None and end is None:
        start, end = current_week()
    else:
        start = start or end
        end = end or start

    if end < start:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")
    days = (end - start).days + 1
    if days > settings.shopping_max_days:
        raise HTTPException(
            status_code=400,
            detail=f"Date range too long (max {settings.shopping_max_days} days)",
        )

    meals = meals_between(user_id, start, end)
    categories = aggregate_meals(meals)
    items = [item for bucket in categories.values() for item in bucket]
    total = round(sum(item["estimated_price"] for item in items), 2)
    logger.info(
        "Shopping list for user %s: %s meals, %s items, %s..%s", user_id, len(meals), len(items), start, end
    )
    return {
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "categories": categories,
        "item_count": len(items),
        "total_cost": total,
    }
