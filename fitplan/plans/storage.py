# -*- coding: utf-8 -*-
"""Plan storage helpers (SQLite): plan catalogs, meal catalog, custom diet copies, user plans."""

from __future__ import annotations

import copy
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn, dumps, loads
from ..config import settings

logger = logging.getLogger(__name__)

NO_PLAN_DETAIL = "No active plan found"


def _iso_now() -> str:
    return datetime.utcnow().isoformat()


def _empty_progress() -> Dict[str, Any]:
    return {"completed_workouts": [], "completed_meals": []}


# ---- Workout plans ----


def _row_to_workout_plan(row: Any) -> Dict[str, Any]:
    r = dict(row)
    payload = loads(r.get("payload_json"), {})
    return {
        "id": r["id"],
        "name": r["name"],
        "frequency": r["frequency"],
        "owner_id": r.get("owner_id"),
        "weeks": payload.get("weeks") or [],
        "metadata": payload.get("metadata") or {},
    }


def upsert_workout_plan(plan: Dict[str, Any], *, owner_id: Optional[str] = None) -> Dict[str, Any]:
    plan_id = plan.get("id") or str(uuid4())
    payload = {"weeks": plan.get("weeks") or [], "metadata": plan.get("metadata") or {}}
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO workout_plans (id, name, frequency, owner_id, payload_json, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name = excluded.name,
                frequency = excluded.frequency,
                owner_id = excluded.owner_id,
                payload_json = excluded.payload_json
            """,
            (plan_id, plan["name"], plan["frequency"], owner_id, dumps(payload), _iso_now()),
        )
    return {"id": plan_id, "name": plan["name"], "frequency": plan["frequency"], "owner_id": owner_id, **payload}


def get_workout_plan(plan_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM workout_plans WHERE id = ?", (plan_id,)).fetchone()
    return _row_to_workout_plan(row) if row else None


def list_workout_plans() -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM workout_plans WHERE owner_id IS NULL ORDER BY frequency, name"
        ).fetchall()
    return [_row_to_workout_plan(row) for row in rows]


# ---- Diet plans ----


def _row_to_diet_plan(row: Any) -> Dict[str, Any]:
    r = dict(row)
    payload = loads(r.get("payload_json"), {})
    return {
        "id": r["id"],
        "name": r["name"],
        "calories": r["calories"],
        "week_cycle": payload.get("week_cycle") or [],
    }


def upsert_diet_plan(plan: Dict[str, Any]) -> Dict[str, Any]:
    plan_id = plan.get("id") or str(uuid4())
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO diet_plans (id, name, calories, payload_json, created_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name = excluded.name,
                calories = excluded.calories,
                payload_json = excluded.payload_json
            """,
            (plan_id, plan["name"], int(plan["calories"]), dumps({"week_cycle": plan["week_cycle"]}), _iso_now()),
        )
    return {"id": plan_id, "name": plan["name"], "calories": int(plan["calories"]), "week_cycle": plan["week_cycle"]}


def get_diet_plan(plan_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM diet_plans WHERE id = ?", (plan_id,)).fetchone()
    return _row_to_diet_plan(row) if row else None


def list_diet_plans() -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute("SELECT * FROM diet_plans ORDER BY calories, name").fetchall()
    return [_row_to_diet_plan(row) for row in rows]


# ---- Meal catalog ----

_MEAL_COLUMNS = ("id", "name", "timing", "calories", "protein", "carbs", "fats", "category")


def _row_to_meal(row: Any) -> Dict[str, Any]:
    r = dict(row)
    meal = loads(r.get("payload_json"), {})
    for col in _MEAL_COLUMNS:
        meal[col] = r.get(col)
    return meal


def upsert_meal(meal: Dict[str, Any]) -> Dict[str, Any]:
    meal = dict(meal)
    meal["id"] = meal.get("id") or str(uuid4())
    payload = {k: v for k, v in meal.items() if k not in _MEAL_COLUMNS}
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO meals (id, name, timing, calories, protein, carbs, fats, category, payload_json, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name = excluded.name,
                timing = excluded.timing,
                calories = excluded.calories,
                protein = excluded.protein,
                carbs = excluded.carbs,
                fats = excluded.fats,
                category = excluded.category,
                payload_json = excluded.payload_json
            """,
            (
                meal["id"],
                meal["name"],
                meal.get("timing"),
                float(meal.get("calories") or 0),
                float(meal.get("protein") or 0),
                float(meal.get("carbs") or 0),
                float(meal.get("fats") or 0),
                meal.get("category"),
                dumps(payload),
                _iso_now(),
            ),
        )
    return meal


def get_meal(meal_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM meals WHERE id = ?", (meal_id,)).fetchone()
    return _row_to_meal(row) if row else None


def list_meals(*, timing: Optional[str] = None) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        if timing:
            rows = conn.execute(
                "SELECT * FROM meals WHERE lower(timing) = ? ORDER BY calories", (timing.lower(),)
            ).fetchall()
        else:
            rows = conn.execute("SELECT * FROM meals ORDER BY calories").fetchall()
    return [_row_to_meal(row) for row in rows]


def count_rows(table: str) -> int:
    if table not in {"workout_plans", "diet_plans", "meals", "food_items", "exercises"}:
        raise ValueError(f"unknown catalog table: {table}")
    with db_conn(settings.app_db_path) as conn:
        return int(conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0])


# ---- Custom diet plans (per-user copies of a week cycle) ----


def _row_to_custom_plan(row: Any) -> Dict[str, Any]:
    r = dict(row)
    payload = loads(r.get("payload_json"), {})
    return {
        "id": r["id"],
        "user_id": r["user_id"],
        "base_plan_id": r["base_plan_id"],
        "name": payload.get("name") or "Custom meal plan",
        "week_cycle": payload.get("week_cycle") or [],
        "updated_at": r.get("updated_at"),
    }


def get_custom_diet_plan(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM custom_diet_plans WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_custom_plan(row) if row else None


def save_custom_diet_plan(
    *,
    user_id: str,
    base_plan_id: str,
    week_cycle: List[List[Dict[str, Any]]],
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """Create or replace the user's custom copy. One copy per user."""
    now = _iso_now()
    payload = {"name": name or "Custom meal plan", "week_cycle": week_cycle}
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT id FROM custom_diet_plans WHERE user_id = ?", (user_id,)).fetchone()
        if row:
            plan_id = row["id"]
            conn.execute(
                "UPDATE custom_diet_plans SET base_plan_id = ?, payload_json = ?, updated_at = ? WHERE id = ?",
                (base_plan_id, dumps(payload), now, plan_id),
            )
        else:
            plan_id = f"custom-diet-{uuid4().hex[:12]}"
            conn.execute(
                """
                INSERT INTO custom_diet_plans (id, user_id, base_plan_id, payload_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (plan_id, user_id, base_plan_id, dumps(payload), now, now),
            )
    return {
        "id": plan_id,
        "user_id": user_id,
        "base_plan_id": base_plan_id,
        "name": payload["name"],
        "week_cycle": week_cycle,
        "updated_at": now,
    }


def update_custom_week_cycle(*, user_id: str, week_cycle: List[List[Dict[str, Any]]]) -> None:
    current = get_custom_diet_plan(user_id)
    if not current:
        raise HTTPException(status_code=404, detail="Custom diet plan not found")
    save_custom_diet_plan(
        user_id=user_id,
        base_plan_id=current["base_plan_id"],
        week_cycle=week_cycle,
        name=current["name"],
    )


def delete_custom_diet_plan(user_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        conn.execute("DELETE FROM custom_diet_plans WHERE user_id = ?", (user_id,))


# ---- User plans ----


def _row_to_user_plan(row: Any) -> Dict[str, Any]:
    r = dict(row)
    progress = loads(r.get("progress_json"), _empty_progress())
    progress.setdefault("completed_workouts", [])
    progress.setdefault("completed_meals", [])
    return {
        "user_id": r["user_id"],
        "workout_plan_id": r.get("workout_plan_id"),
        "diet_plan_id": r.get("diet_plan_id"),
        "custom_diet_plan_id": r.get("custom_diet_plan_id"),
        "start_date": r["start_date"],
        "progress": progress,
        "updated_at": r.get("updated_at"),
    }


def get_user_plan(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM user_plans WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_user_plan(row) if row else None


def require_user_plan(user_id: str) -> Dict[str, Any]:
    plan = get_user_plan(user_id)
    if not plan:
        raise HTTPException(status_code=404, detail=NO_PLAN_DETAIL)
    return plan


def _check_plan_ids(workout_plan_id: Optional[str], diet_plan_id: Optional[str]) -> None:
    if workout_plan_id and not get_workout_plan(workout_plan_id):
        raise HTTPException(status_code=404, detail="Workout plan not found")
    if diet_plan_id and not get_diet_plan(diet_plan_id):
        raise HTTPException(status_code=404, detail="Diet plan not found")


def select_plan(
    *,
    user_id: str,
    workout_plan_id: Optional[str],
    diet_plan_id: Optional[str],
    start_date: Optional[date] = None,
) -> Dict[str, Any]:
    """Activate plans for the user. Progress starts over."""
    if not workout_plan_id and not diet_plan_id:
        raise HTTPException(status_code=400, detail="Select a workout plan, a diet plan or both")
    _check_plan_ids(workout_plan_id, diet_plan_id)

    start = (start_date or date.today()).isoformat()
    now = _iso_now()
    existing = get_user_plan(user_id)
    keep_custom = bool(
        existing
        and existing.get("custom_diet_plan_id")
        and existing.get("diet_plan_id") == diet_plan_id
    )
    if not keep_custom:
        delete_custom_diet_plan(user_id)

    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO user_plans (
                user_id, workout_plan_id, diet_plan_id, custom_diet_plan_id, start_date,
                progress_json, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                workout_plan_id = excluded.workout_plan_id,
                diet_plan_id = excluded.diet_plan_id,
                custom_diet_plan_id = excluded.custom_diet_plan_id,
                start_date = excluded.start_date,
                progress_json = excluded.progress_json,
                updated_at = excluded.updated_at
            """,
            (
                user_id,
                workout_plan_id,
                diet_plan_id,
                existing["custom_diet_plan_id"] if keep_custom else None,
                start,
                dumps(_empty_progress()),
                now,
                now,
            ),
        )
    logger.info("User %s selected workout=%s diet=%s from %s", user_id, workout_plan_id, diet_plan_id, start)
    return require_user_plan(user_id)


def modify_plan(
    *,
    user_id: str,
    workout_plan_id: Optional[str] = None,
    diet_plan_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Swap plan ids, keeping start date and progress."""
    current = require_user_plan(user_id)
    _check_plan_ids(workout_plan_id, diet_plan_id)

    new_workout = workout_plan_id or current.get("workout_plan_id")
    new_diet = diet_plan_id or current.get("diet_plan_id")
    custom_id = current.get("custom_diet_plan_id")
    if diet_plan_id and diet_plan_id != current.get("diet_plan_id"):
        delete_custom_diet_plan(user_id)
        custom_id = None

    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            UPDATE user_plans
            SET workout_plan_id = ?, diet_plan_id = ?, custom_diet_plan_id = ?, updated_at = ?
            WHERE user_id = ?
            """,
            (new_workout, new_diet, custom_id, _iso_now(), user_id),
        )
    return require_user_plan(user_id)


def activate_plans(
    *,
    user_id: str,
    workout_plan_id: Optional[str] = None,
    custom_diet_plan_id: Optional[str] = None,
    clear_diet_plan: bool = False,
) -> Dict[str, Any]:
    """Point the user plan at generated plans, creating the user plan if needed."""
    now = _iso_now()
    current = get_user_plan(user_id)
    if current is None:
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                """
                INSERT INTO user_plans (
                    user_id, workout_plan_id, diet_plan_id, custom_diet_plan_id, start_date,
                    progress_json, created_at, updated_at
                ) VALUES (?, ?, NULL, ?, ?, ?, ?, ?)
                """,
                (user_id, workout_plan_id, custom_diet_plan_id, date.today().isoformat(),
                 dumps(_empty_progress()), now, now),
            )
        return require_user_plan(user_id)

    fields: Dict[str, Any] = {"updated_at": now}
    if workout_plan_id:
        fields["workout_plan_id"] = workout_plan_id
    if custom_diet_plan_id:
        fields["custom_diet_plan_id"] = custom_diet_plan_id
    if clear_diet_plan:
        fields["diet_plan_id"] = None
    assignments = ", ".join(f"{col} = ?" for col in fields)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(f"UPDATE user_plans SET {assignments} WHERE user_id = ?", (*fields.values(), user_id))
    return require_user_plan(user_id)


def set_custom_diet_plan_id(*, user_id: str, custom_diet_plan_id: Optional[str]) -> None:
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE user_plans SET custom_diet_plan_id = ?, updated_at = ? WHERE user_id = ?",
            (custom_diet_plan_id, _iso_now(), user_id),
        )


def _save_progress(user_id: str, progress: Dict[str, Any]) -> None:
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "UPDATE user_plans SET progress_json = ?, updated_at = ? WHERE user_id = ?",
            (dumps(progress), _iso_now(), user_id),
        )


def complete_workout(*, user_id: str, day: date) -> Dict[str, Any]:
    plan = require_user_plan(user_id)
    progress = copy.deepcopy(plan["progress"])
    key = day.isoformat()
    if key not in progress["completed_workouts"]:
        progress["completed_workouts"].append(key)
        progress["completed_workouts"].sort()
        _save_progress(user_id, progress)
    return progress


def complete_meal(*, user_id: str, day: date, meal_number: int) -> Dict[str, Any]:
    plan = require_user_plan(user_id)
    progress = copy.deepcopy(plan["progress"])
    key = day.isoformat()
    already = any(
        m.get("date") == key and int(m.get("meal_number", -1)) == meal_number
        for m in progress["completed_meals"]
    )
    if not already:
        progress["completed_meals"].append({"date": key, "meal_number": meal_number})
        _save_progress(user_id, progress)
    return progress
