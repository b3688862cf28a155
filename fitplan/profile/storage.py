# -*- coding: utf-8 -*-
"""Profile storage helpers (SQLite)."""

from __future__ import annotations

import copy
from typing import Any, Dict

from fastapi import HTTPException

from ..app_db import db_conn, dumps
from ..auth.storage import _utc_now, get_user_by_id
from ..config import settings


def merge_settings(current: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a partial settings update; `notifications` merges one level deeper."""
    merged = copy.deepcopy(current or {})
    for key, value in (updates or {}).items():
        if value is None:
            continue
        if key == "notifications" and isinstance(value, dict):
            notifications = dict(merged.get("notifications") or {})
            notifications.update({k: v for k, v in value.items() if v is not None})
            merged["notifications"] = notifications
        else:
            merged[key] = value
    return merged


def update_profile(*, user_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    user = get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    fields: Dict[str, Any] = {}
    for key in ("name", "age", "height", "weight", "goal_weight"):
        if updates.get(key) is not None:
            fields[key] = updates[key]
    if updates.get("settings") is not None:
        fields["settings_json"] = dumps(merge_settings(user["settings"], updates["settings"]))

    if fields:
        fields["updated_at"] = _utc_now()
        assignments = ", ".join(f"{col} = ?" for col in fields)
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                f"UPDATE users SET {assignments} WHERE id = ?",
                (*fields.values(), user_id),
            )
    return get_user_by_id(user_id) or user


def delete_user(*, user_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="User not found")
        # Per-user workout plans are not covered by the cascade on user_plans.
        conn.execute("DELETE FROM workout_plans WHERE owner_id = ?", (user_id,))
