# -*- coding: utf-8 -*-
"""Preference storage helpers (SQLite)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import HTTPException

from ..app_db import db_conn, dumps, loads
from ..config import settings
from ..nutrition.energy import calculate_macro_distribution, calculate_recommended_calories, macro_grams

DEFAULT_RECOMMENDED_CALORIES = 2000


def _iso_now() -> str:
    return datetime.utcnow().isoformat()


def _row_to_preferences(row: Any) -> Dict[str, Any]:
    r = dict(row)
    prefs = loads(r.get("payload_json"), {})
    prefs["user_id"] = r["user_id"]
    prefs["created_at"] = r.get("created_at")
    prefs["updated_at"] = r.get("updated_at")
    return prefs


def get_preferences(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM user_preferences WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_preferences(row) if row else None


def require_preferences(user_id: str) -> Dict[str, Any]:
    prefs = get_preferences(user_id)
    if not prefs:
        raise HTTPException(status_code=404, detail="User preferences not found")
    return prefs


def save_preferences(*, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """Create or replace the questionnaire answers; bmr/tdee are kept unless new ones are given."""
    current = get_preferences(user_id) or {}
    payload = dict(data)
    for key in ("bmr", "tdee"):
        if payload.get(key) is None:
            payload[key] = current.get(key)

    tdee = payload.get("tdee")
    payload["recommended_calories"] = (
        calculate_recommended_calories(tdee, payload.get("goal")) if tdee else DEFAULT_RECOMMENDED_CALORIES
    )
    payload["macro_distribution"] = calculate_macro_distribution(payload.get("diet_type"), payload.get("goal"))
    payload["macro_grams"] = macro_grams(payload["recommended_calories"], payload["macro_distribution"])

    now = _iso_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO user_preferences (user_id, payload_json, created_at, updated_at)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                payload_json = excluded.payload_json,
                updated_at = excluded.updated_at
            """,
            (user_id, dumps(payload), now, now),
        )
    return require_preferences(user_id)
