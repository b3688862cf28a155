# -*- coding: utf-8 -*-
"""The two stock 14-day diet plans, assembled from the meal catalog."""

from __future__ import annotations

import copy
from typing import Any, Dict, List

from ..plans.assembler import MEAL_CYCLE_DAYS
from .meals import MEALS

_BY_ID = {meal["id"]: meal for meal in MEALS}


def _ids(timing: str, category: str = "home") -> List[str]:
    return [m["id"] for m in MEALS if m["timing"] == timing and m["category"] == category]


def _slot(plan_id: str, day: int, number: int, meal_id: str) -> Dict[str, Any]:
    meal = copy.deepcopy(_BY_ID[meal_id])
    meal["source_meal_id"] = meal_id
    meal["id"] = f"{plan_id}-d{day + 1:02d}-m{number + 1}"
    return meal


def _cycle(plan_id: str, timings: List[str]) -> List[List[Dict[str, Any]]]:
    pools = {timing: _ids(timing) for timing in set(timings)}
    cycle = []
    for day in range(MEAL_CYCLE_DAYS):
        meals = []
        for number, timing in enumerate(timings):
            pool = pools[timing]
            # Step through each pool at a different stride so days don't repeat in lockstep.
            meal_id = pool[(day * (number + 1)) % len(pool)]
            meals.append(_slot(plan_id, day, number, meal_id))
        cycle.append(meals)
    return cycle


def _plan(plan_id: str, name: str, timings: List[str]) -> Dict[str, Any]:
    cycle = _cycle(plan_id, timings)
    average = sum(sum(m["calories"] for m in day) for day in cycle) / len(cycle)
    return {"id": plan_id, "name": name, "calories": int(round(average)), "week_cycle": cycle}


DIET_PLANS: List[Dict[str, Any]] = [
    _plan("lean-cut", "Lean Cut (3 meals)", ["Breakfast", "Lunch", "Dinner"]),
    _plan("balanced-performance", "Balanced Performance (4 meals)", ["Breakfast", "Lunch", "Snack", "Dinner"]),
]
