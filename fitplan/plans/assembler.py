# -*- coding: utf-8 -*-
"""
Day and week plan assembly.

A user plan has a start date. Every calendar day is placed by its offset from
that date: meals rotate through a 14-day cycle (offset % 14) and workouts
through the plan's weeks ((offset // 7) % weeks, weekday offset % 7 + 1).
Negative offsets wrap with Python's modulo, so days before the start still
resolve to a cycle position.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from ..ingredients.nutrition import NUTRITION_FIELDS
from ..progress.storage import list_exercise_swaps
from .storage import get_custom_diet_plan, get_diet_plan, get_workout_plan, require_user_plan

MEAL_CYCLE_DAYS = 14


def to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and len(value) >= 10:
        return date.fromisoformat(value[:10])
    raise ValueError(f"not a date: {value!r}")


def days_since_start(start: Any, day: Any) -> int:
    return (to_date(day) - to_date(start)).days


def cycle_day(offset: int) -> int:
    return offset % MEAL_CYCLE_DAYS


def workout_for_offset(workout_plan: Optional[Dict[str, Any]], offset: int) -> Optional[Dict[str, Any]]:
    if not workout_plan:
        return None
    weeks = workout_plan.get("weeks") or []
    if not weeks:
        return None
    week_index = (offset // 7) % len(weeks)
    day_number = offset % 7 + 1
    for day in weeks[week_index] or []:
        if int(day.get("day_number") or 0) == day_number:
            workout = copy.deepcopy(day)
            workout["week_number"] = week_index + 1
            workout["plan_id"] = workout_plan.get("id")
            workout["plan_name"] = workout_plan.get("name")
            return workout
    return None


def apply_exercise_swaps(workout: Optional[Dict[str, Any]], swaps: Dict[str, str]) -> Optional[Dict[str, Any]]:
    if not workout or not swaps:
        return workout
    for exercise in workout.get("exercises") or []:
        replacement = swaps.get(exercise.get("name"))
        if replacement:
            exercise["original_name"] = exercise["name"]
            exercise["name"] = replacement
            exercise["swapped"] = True
    return workout


def meals_for_offset(week_cycle: List[List[Dict[str, Any]]], offset: int) -> List[Dict[str, Any]]:
    index = cycle_day(offset)
    if index >= len(week_cycle):
        return []
    meals = []
    for number, meal in enumerate(week_cycle[index] or []):
        resolved = copy.deepcopy(meal)
        resolved["meal_number"] = number
        resolved["cycle_day"] = index
        meals.append(resolved)
    return meals


def day_totals(meals: List[Dict[str, Any]]) -> Dict[str, float]:
    totals = {f: 0.0 for f in NUTRITION_FIELDS}
    for meal in meals:
        for f in NUTRITION_FIELDS:
            totals[f] += float(meal.get(f) or 0)
    return {
        "calories": int(round(totals["calories"])),
        "protein": round(totals["protein"], 1),
        "carbs": round(totals["carbs"], 1),
        "fats": round(totals["fats"], 1),
    }


@dataclass
class PlanContext:
    """Everything needed to render any day of a user's plan."""

    user_plan: Dict[str, Any]
    workout_plan: Optional[Dict[str, Any]] = None
    week_cycle: List[List[Dict[str, Any]]] = field(default_factory=list)
    diet_source: str = "none"
    swaps: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @property
    def start_date(self) -> date:
        return to_date(self.user_plan["start_date"])


def build_day(ctx: PlanContext, day: date) -> Dict[str, Any]:
    offset = days_since_start(ctx.start_date, day)
    key = day.isoformat()

    workout = workout_for_offset(ctx.workout_plan, offset)
    workout = apply_exercise_swaps(workout, ctx.swaps.get(key) or {})
    meals = meals_for_offset(ctx.week_cycle, offset)

    progress = ctx.user_plan.get("progress") or {}
    completed_meals = sorted(
        int(m.get("meal_number"))
        for m in progress.get("completed_meals") or []
        if m.get("date") == key
    )
    return {
        "date": key,
        "days_since_start": offset,
        "cycle_day": cycle_day(offset),
        "week_number": workout["week_number"] if workout else None,
        "day_number": offset % 7 + 1,
        "workout": workout,
        "meals": meals,
        "totals": day_totals(meals),
        "diet_source": ctx.diet_source,
        "progress": {
            "workout_completed": key in (progress.get("completed_workouts") or []),
            "completed_meals": completed_meals,
        },
    }


def load_context(user_id: str, *, start: date, end: date) -> PlanContext:
    user_plan = require_user_plan(user_id)
    ctx = PlanContext(user_plan=user_plan)

    if user_plan.get("workout_plan_id"):
        ctx.workout_plan = get_workout_plan(user_plan["workout_plan_id"])

    custom = get_custom_diet_plan(user_id) if user_plan.get("custom_diet_plan_id") else None
    if custom:
        ctx.week_cycle = custom["week_cycle"]
        ctx.diet_source = "custom"
    elif user_plan.get("diet_plan_id"):
        diet_plan = get_diet_plan(user_plan["diet_plan_id"])
        if diet_plan:
            ctx.week_cycle = diet_plan["week_cycle"]
            ctx.diet_source = "base"

    ctx.swaps = list_exercise_swaps(user_id=user_id, start=start, end=end)
    return ctx


def today_view(user_id: str, day: Optional[date] = None) -> Dict[str, Any]:
    day = day or date.today()
    ctx = load_context(user_id, start=day, end=day)
    return build_day(ctx, day)


def week_view(user_id: str, start: Optional[date] = None, days: int = 7) -> Dict[str, Any]:
    start = start or date.today()
    if days < 1:
        raise HTTPException(status_code=400, detail="days must be positive")
    end = start + timedelta(days=days - 1)
    ctx = load_context(user_id, start=start, end=end)
    return {
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "days": [build_day(ctx, start + timedelta(days=i)) for i in range(days)],
    }


def meals_between(user_id: str, start: date, end: date) -> List[Dict[str, Any]]:
    """Resolved meals for every day in [start, end], each tagged with its date."""
    ctx = load_context(user_id, start=start, end=end)
    out: List[Dict[str, Any]] = []
    day = start
    while day <= end:
        offset = days_since_start(ctx.start_date, day)
        for meal in meals_for_offset(ctx.week_cycle, offset):
            meal["date"] = day.isoformat()
            out.append(meal)
        day += timedelta(days=1)
    return out
