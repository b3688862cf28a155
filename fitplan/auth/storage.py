# -*- coding: utf-8 -*-
"""Auth — DB storage helpers."""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn, dumps, loads
from ..config import settings

DEFAULT_USER_SETTINGS: Dict[str, Any] = {
    "notifications": {
        "enabled": True,
        "workout_reminders": True,
        "meal_reminders": True,
        "progress_reminders": True,
    },
    "theme": "light",
}


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _row_to_user(row: Any) -> Dict[str, Any]:
    user = dict(row)
    user["settings"] = loads(user.pop("settings_json", None), copy.deepcopy(DEFAULT_USER_SETTINGS))
    return user


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return _row_to_user(row) if row else None


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return _row_to_user(row) if row else None


def create_user(
    *,
    name: str,
    email: str,
    password_hash: str,
    age: Optional[int] = None,
    height: Optional[float] = None,
    weight: Optional[float] = None,
    goal_weight: Optional[float] = None,
) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = _utc_now()
    email_norm = email.lower().strip()
    user_settings = copy.deepcopy(DEFAULT_USER_SETTINGS)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO users (
                id, email, password_hash, name, age, height, weight, goal_weight,
                settings_json, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (user_id, email_norm, password_hash, name.strip(), age, height, weight, goal_weight,
             dumps(user_settings), now, now),
        )
    return {
        "id": user_id,
        "email": email_norm,
        "password_hash": password_hash,
        "name": name.strip(),
        "age": age,
        "height": height,
        "weight": weight,
        "goal_weight": goal_weight,
        "settings": user_settings,
        "created_at": now,
        "updated_at": now,
    }
