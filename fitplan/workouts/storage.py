# -*- coding: utf-8 -*-
"""Exercise library storage helpers (SQLite)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn, dumps, loads
from ..config import settings

_COLUMNS = ("id", "name", "type", "difficulty", "created_at")


def _iso_now() -> str:
    return datetime.utcnow().isoformat()


def _row_to_exercise(row: Any) -> Dict[str, Any]:
    r = dict(row)
    exercise = loads(r.get("payload_json"), {})
    for col in _COLUMNS:
        exercise[col] = r.get(col)
    exercise.setdefault("muscle_groups", [])
    exercise.setdefault("equipment", [])
    exercise.setdefault("tags", [])
    return exercise


def upsert_exercise(exercise: Dict[str, Any]) -> Dict[str, Any]:
    exercise = dict(exercise)
    exercise["id"] = exercise.get("id") or str(uuid4())
    payload = {k: v for k, v in exercise.items() if k not in _COLUMNS}
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO exercises (id, name, type, difficulty, payload_json, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(name) DO UPDATE SET
                type = excluded.type,
                difficulty = excluded.difficulty,
                payload_json = excluded.payload_json
            """,
            (exercise["id"], exercise["name"], exercise["type"], exercise["difficulty"], dumps(payload), _iso_now()),
        )
    return exercise


def get_exercise_by_name(name: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM exercises WHERE lower(name) = ?", (name.strip().lower(),)).fetchone()
    return _row_to_exercise(row) if row else None


def list_exercises() -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute("SELECT * FROM exercises ORDER BY name").fetchall()
    return [_row_to_exercise(row) for row in rows]
