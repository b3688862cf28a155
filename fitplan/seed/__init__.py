# -*- coding: utf-8 -*-
"""Demonstration catalogs, loaded into empty tables on startup."""

from __future__ import annotations

import logging
from typing import Dict

from ..foods.storage import create_food_item
from ..plans.storage import count_rows, upsert_diet_plan, upsert_meal, upsert_workout_plan
from ..workouts.storage import upsert_exercise
from .diets import DIET_PLANS
from .foods import FOOD_ITEMS
from .meals import MEALS
from .workouts import EXERCISES, WORKOUT_PLANS

logger = logging.getLogger(__name__)


def seed_catalogs() -> Dict[str, int]:
    """Insert each catalog whose table is still empty. Returns rows inserted per table."""
    inserted: Dict[str, int] = {}
    loaders = [
        ("workout_plans", WORKOUT_PLANS, upsert_workout_plan),
        ("diet_plans", DIET_PLANS, upsert_diet_plan),
        ("meals", MEALS, upsert_meal),
        ("food_items", FOOD_ITEMS, create_food_item),
        ("exercises", EXERCISES, upsert_exercise),
    ]
    for table, rows, load in loaders:
        if count_rows(table) > 0:
            continue
        for row in rows:
            load(row)
        inserted[table] = len(rows)
    if inserted:
        logger.info("Seeded catalogs: %s", ", ".join(f"{t}={n}" for t, n in inserted.items()))
    return inserted
