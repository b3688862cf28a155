# -*- coding: utf-8 -*-
"""Progress storage helpers (SQLite)."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn, dumps, loads
from ..config import settings


def _iso_now() -> str:
    return datetime.utcnow().isoformat()


def _empty_progress() -> Dict[str, Any]:
    return {
        "weights": [],
        "completed_workouts": [],
        "completed_meals": [],
        "streak": {"current": 0, "last_updated": None},
    }


def get_progress(user_id: str) -> Dict[str, Any]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT payload_json FROM progress WHERE user_id = ?", (user_id,)).fetchone()
    progress = _empty_progress()
    if row:
        progress.update(loads(row["payload_json"], {}))
    return progress


def _save_progress(user_id: str, progress: Dict[str, Any]) -> None:
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO progress (user_id, payload_json, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET payload_json = excluded.payload_json, updated_at = excluded.updated_at
            """,
            (user_id, dumps(progress), _iso_now()),
        )


def log_weight(*, user_id: str, weight: float, logged_at: Optional[datetime] = None) -> List[Dict[str, Any]]:
    progress = get_progress(user_id)
    progress["weights"].append({
        "weight": float(weight),
        "date": (logged_at or datetime.utcnow()).isoformat(),
    })
    _save_progress(user_id, progress)
    return progress["weights"]


def update_streak(streak: Dict[str, Any], today: date) -> Dict[str, Any]:
    """Same day: unchanged. Day after the last update (or first ever): +1. Otherwise reset to 1."""
    last_raw = streak.get("last_updated")
    last = date.fromisoformat(last_raw[:10]) if last_raw else None
    current = int(streak.get("current") or 0)
    if last == today:
        pass
    elif last is None or last == today - timedelta(days=1):
        current += 1
    else:
        current = 1
    return {"current": current, "last_updated": today.isoformat()}


def log_completion(
    *,
    user_id: str,
    kind: str,
    item_id: str,
    plan_id: Optional[str] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    day = today or date.today()
    progress = get_progress(user_id)
    entry = {"date": day.isoformat(), "item_id": item_id, "plan_id": plan_id}
    if kind == "workout":
        progress["completed_workouts"].append(entry)
    elif kind == "meal":
        progress["completed_meals"].append(entry)
    else:
        raise ValueError(f"unknown completion type: {kind}")
    progress["streak"] = update_streak(progress.get("streak") or {}, day)
    _save_progress(user_id, progress)
    return progress


def log_exercise(*, user_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    log_id = str(uuid4())
    now = _iso_now()
    day = payload["workout_date"]
    day_s = day.isoformat() if isinstance(day, date) else str(day)[:10]
    extra = {
        k: v for k, v in payload.items()
        if k not in ("exercise_name", "workout_date", "workout_plan_id", "reps_left_in_tank")
    }
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO workout_logs (
                id, user_id, date, exercise_name, workout_plan_id, reps_left_in_tank, payload_json, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (log_id, user_id, day_s, payload["exercise_name"], payload.get("workout_plan_id"),
             payload["reps_left_in_tank"], dumps(extra), now),
        )
    return {
        "id": log_id,
        "exercise_name": payload["exercise_name"],
        "workout_date": day_s,
        "workout_plan_id": payload.get("workout_plan_id"),
        "reps_left_in_tank": payload["reps_left_in_tank"],
        **extra,
        "created_at": now,
    }


def list_exercise_logs(*, user_id: str, exercise_name: Optional[str] = None, limit: int = 20) -> List[Dict[str, Any]]:
    sql = "SELECT * FROM workout_logs WHERE user_id = ?"
    params: List[Any] = [user_id]
    if exercise_name:
        sql += " AND exercise_name = ?"
        params.append(exercise_name)
    sql += " ORDER BY date DESC, created_at DESC LIMIT ?"
    params.append(int(limit))
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(sql, params).fetchall()
    out = []
    for row in rows:
        r = dict(row)
        out.append({
            "id": r["id"],
            "exercise_name": r["exercise_name"],
            "workout_date": r["date"],
            "workout_plan_id": r.get("workout_plan_id"),
            "reps_left_in_tank": r["reps_left_in_tank"],
            **loads(r.get("payload_json"), {}),
            "created_at": r["created_at"],
        })
    return out


def upsert_exercise_swap(
    *,
    user_id: str,
    workout_date: date,
    original_exercise: str,
    swapped_exercise: str,
    workout_plan_id: Optional[str] = None,
) -> Dict[str, Any]:
    """One swap per user, day and original exercise; a later swap replaces the earlier one."""
    now = _iso_now()
    day = workout_date.isoformat()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO workout_swap_logs (
                id, user_id, date, original_exercise, swapped_exercise, workout_plan_id, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id, date, original_exercise) DO UPDATE SET
                swapped_exercise = excluded.swapped_exercise,
                workout_plan_id = excluded.workout_plan_id,
                created_at = excluded.created_at
            """,
            (str(uuid4()), user_id, day, original_exercise, swapped_exercise, workout_plan_id, now),
        )
    return {
        "workout_date": day,
        "original_exercise_name": original_exercise,
        "swapped_exercise_name": swapped_exercise,
        "workout_plan_id": workout_plan_id,
    }


def list_exercise_swaps(*, user_id: str, start: date, end: date) -> Dict[str, Dict[str, str]]:
    """Swaps in [start, end] as {date: {original: swapped}}."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT date, original_exercise, swapped_exercise FROM workout_swap_logs
            WHERE user_id = ? AND date >= ? AND date <= ?
            """,
            (user_id, start.isoformat(), end.isoformat()),
        ).fetchall()
    out: Dict[str, Dict[str, str]] = {}
    for row in rows:
        out.setdefault(row["date"], {})[row["original_exercise"]] = row["swapped_exercise"]
    return out
