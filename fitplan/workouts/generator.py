# -*- coding: utf-8 -*-
"""Custom workout plans and exercise alternatives."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from ..plans.storage import activate_plans, get_user_plan, get_workout_plan, upsert_workout_plan
from .storage import get_exercise_by_name, list_exercises

logger = logging.getLogger(__name__)

MIN_FILTERED_EXERCISES = 10
MAX_POOL = 40
MAX_EXERCISES_PER_DAY = 5
DEFAULT_SETS = 3
DEFAULT_REPS = "10"
DEFAULT_REST = "60"

FOCUS_NAMES = ["Upper Body", "Lower Body", "Full Body", "Push Day", "Pull Day", "Legs Day", "Core"]
DIFFICULTY_RANK = {"beginner": 1, "intermediate": 2, "advanced": 3}
_ALWAYS_AVAILABLE = {"bodyweight", "none"}


def custom_plan_id(user_id: str) -> str:
    return f"custom-{user_id}"


def frequency_label(frequency: int) -> str:
    return f"{min(max(frequency, 1), 4)}day"


def select_exercises(
    library: List[Dict[str, Any]],
    *,
    fitness_level: str,
    available_equipment: List[str],
) -> List[Dict[str, Any]]:
    """Loose filter: equipment the user has, or a difficulty they can handle."""
    equipment = set(available_equipment)
    levels = {fitness_level, "beginner"}

    def matches(exercise: Dict[str, Any]) -> bool:
        gear = set(exercise.get("equipment") or [])
        if equipment and gear & (equipment | _ALWAYS_AVAILABLE):
            return True
        return exercise.get("difficulty") in levels

    selected = [e for e in library if matches(e)][:MAX_POOL]
    if len(selected) < MIN_FILTERED_EXERCISES:
        logger.info("Only %s exercises match the filters, using the whole library", len(selected))
        selected = library[:MAX_POOL]
    return selected


def workout_days(frequency: int) -> List[int]:
    """0-based weekday offsets spread evenly over a week."""
    frequency = min(max(frequency, 1), 6)
    return [int(i * 7 / frequency) % 7 for i in range(frequency)]


def build_week(exercises: List[Dict[str, Any]], frequency: int) -> List[Dict[str, Any]]:
    days = workout_days(frequency)
    count = min(MAX_EXERCISES_PER_DAY, len(exercises) // len(days))
    week = []
    for index, offset in enumerate(days):
        start = index * count % len(exercises)
        chosen = [exercises[(start + i) % len(exercises)] for i in range(count)]
        week.append(
            {
                "day_number": offset + 1,
                "focus": FOCUS_NAMES[index % len(FOCUS_NAMES)],
                "exercises": [
                    {
                        "name": exercise["name"],
                        "sets": DEFAULT_SETS,
                        "reps": DEFAULT_REPS,
                        "rest": DEFAULT_REST,
                        "notes": exercise.get("description") or "",
                        "cues": [],
                    }
                    for exercise in chosen
                ],
            }
        )
    return week


def generate_custom_workout_plan(
    *,
    user_id: str,
    fitness_level: str = "beginner",
    fitness_goal: str = "general_fitness",
    workout_frequency: int = 3,
    available_equipment: Optional[List[str]] = None,
) -> Dict[str, Any]:
    library = list_exercises()
    if not library:
        raise HTTPException(status_code=404, detail="No exercises found in database")

    pool = select_exercises(
        library,
        fitness_level=fitness_level,
        available_equipment=available_equipment or [],
    )
    plan = upsert_workout_plan(
        {
            "id": custom_plan_id(user_id),
            "name": f"Custom {fitness_goal.replace('_', ' ')} Plan",
            "frequency": frequency_label(workout_frequency),
            "weeks": [build_week(pool, workout_frequency)],
            "metadata": {
                "custom_plan": True,
                "fitness_level": fitness_level,
                "fitness_goal": fitness_goal,
                "workout_frequency": workout_frequency,
            },
        },
        owner_id=user_id,
    )
    activate_plans(user_id=user_id, workout_plan_id=plan["id"])
    logger.info("Generated workout plan %s for user %s (%s exercises in pool)", plan["id"], user_id, len(pool))
    return plan


def get_user_custom_workout_plan(user_id: str) -> Dict[str, Any]:
    plan = get_workout_plan(custom_plan_id(user_id))
    if not plan:
        raise HTTPException(status_code=404, detail="No custom plan found for this user")
    return plan


def _plan_alternative_names(user_id: Optional[str], name: str) -> List[str]:
    if not user_id:
        return []
    user_plan = get_user_plan(user_id)
    if not user_plan or not user_plan.get("workout_plan_id"):
        return []
    plan = get_workout_plan(user_plan["workout_plan_id"])
    target = name.strip().lower()
    for week in (plan or {}).get("weeks") or []:
        for day in week or []:
            for exercise in day.get("exercises") or []:
                if (exercise.get("name") or "").lower() == target:
                    return list(exercise.get("alternative_exercise_names") or [])
    return []


def exercise_alternatives(name: str, *, user_id: Optional[str] = None, limit: int = 5) -> Dict[str, Any]:
    """Plan-curated alternatives first, then library exercises for the same muscles."""
    curated = _plan_alternative_names(user_id, name)
    base = get_exercise_by_name(name)
    if base is None and not curated:
        raise HTTPException(status_code=404, detail="Exercise not found")

    out: List[Dict[str, Any]] = []
    seen = {name.strip().lower()}
    for alt in curated:
        if alt.lower() in seen:
            continue
        seen.add(alt.lower())
        out.append(get_exercise_by_name(alt) or {"name": alt})

    if base is not None:
        groups = set(base.get("muscle_groups") or [])
        rank = DIFFICULTY_RANK.get(base.get("difficulty") or "", 1)
        similar = [
            e
            for e in list_exercises()
            if e["name"].lower() not in seen
            and e.get("type") == base.get("type")
            and groups & set(e.get("muscle_groups") or [])
        ]
        similar.sort(key=lambda e: (abs(DIFFICULTY_RANK.get(e.get("difficulty") or "", 1) - rank), e["name"]))
        out.extend(similar)

    return {"exercise": base or {"name": name}, "alternatives": out[:limit]}
