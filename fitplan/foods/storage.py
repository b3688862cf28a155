# -*- coding: utf-8 -*-
"""Food item storage helpers (SQLite)."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn, dumps, loads
from ..config import settings

_COLUMNS = (
    "name",
    "category",
    "brand",
    "description",
    "base_quantity",
    "base_unit",
    "calories",
    "protein",
    "carbs",
    "fats",
    "is_gluten_free",
    "is_vegan",
    "popularity",
)
_BOOL_COLUMNS = ("is_gluten_free", "is_vegan")
_LIST_FIELDS = {"alternate_names": "alternate_names_json", "search_tags": "search_tags_json"}

_SORTS = {
    "calories_asc": "calories ASC, name ASC",
    "calories_desc": "calories DESC, name ASC",
    "protein_desc": "protein DESC, name ASC",
    "popularity": "popularity DESC, name ASC",
}


def _iso_now() -> str:
    return datetime.utcnow().isoformat()


def _row_to_food(row: Any) -> Dict[str, Any]:
    r = dict(row)
    food: Dict[str, Any] = loads(r.get("payload_json"), {})
    food["id"] = r["id"]
    for col in _COLUMNS:
        food[col] = r.get(col)
    for col in _BOOL_COLUMNS:
        food[col] = bool(food[col])
    for field, col in _LIST_FIELDS.items():
        food[field] = loads(r.get(col), [])
    food["created_at"] = r.get("created_at")
    food["updated_at"] = r.get("updated_at")
    return food


def _split(data: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    columns = {}
    payload = {}
    for key, value in data.items():
        if key in _COLUMNS:
            columns[key] = int(bool(value)) if key in _BOOL_COLUMNS else value
        elif key in _LIST_FIELDS:
            columns[_LIST_FIELDS[key]] = dumps(list(value or []))
        elif key not in ("id", "created_at", "updated_at"):
            payload[key] = value
    return columns, payload


def create_food_item(data: Dict[str, Any]) -> Dict[str, Any]:
    food_id = data.get("id") or str(uuid4())
    now = _iso_now()
    columns, payload = _split(data)
    columns.setdefault("alternate_names_json", "[]")
    columns.setdefault("search_tags_json", "[]")
    columns["payload_json"] = dumps(payload)
    names = ["id", *columns.keys(), "created_at", "updated_at"]
    values = [food_id, *columns.values(), now, now]
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            f"INSERT INTO food_items ({', '.join(names)}) VALUES ({', '.join('?' for _ in names)})",
            values,
        )
    found = get_food_item(food_id)
    if not found:
        raise HTTPException(status_code=500, detail="Failed to create food item")
    return found


def get_food_item(food_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM food_items WHERE id = ?", (food_id,)).fetchone()
    return _row_to_food(row) if row else None


def update_food_item(food_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    current = get_food_item(food_id)
    if not current:
        raise HTTPException(status_code=404, detail="Food item not found")
    columns, payload_updates = _split(updates)
    _, payload = _split(current)
    payload.update(payload_updates)
    columns["payload_json"] = dumps(payload)
    columns["updated_at"] = _iso_now()
    assignments = ", ".join(f"{col} = ?" for col in columns)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(f"UPDATE food_items SET {assignments} WHERE id = ?", (*columns.values(), food_id))
    found = get_food_item(food_id)
    if not found:
        raise HTTPException(status_code=404, detail="Food item not found")
    return found


def delete_food_item(food_id: str) -> None:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM food_items WHERE id = ?", (food_id,))
        if cur.rowcount == 0:
            raise HTTPException(status_code=404, detail="Food item not found")


def search_food_items(
    *,
    query: Optional[str] = None,
    category: str = "all",
    is_gluten_free: bool = False,
    is_vegan: bool = False,
    sort: str = "popularity",
    limit: int = 20,
    page: int = 1,
) -> Dict[str, Any]:
    where: List[str] = []
    params: List[Any] = []
    if query and query.strip():
        like = f"%{query.strip()}%"
        where.append(
            "(name LIKE ? OR alternate_names_json LIKE ? OR search_tags_json LIKE ? "
            "OR IFNULL(brand, '') LIKE ? OR IFNULL(description, '') LIKE ?)"
        )
        params.extend([like] * 5)
    if category and category != "all":
        where.append("category = ?")
        params.append(category)
    if is_gluten_free:
        where.append("is_gluten_free = 1")
    if is_vegan:
        where.append("is_vegan = 1")

    clause = f"WHERE {' AND '.join(where)}" if where else ""
    order = _SORTS.get(sort, _SORTS["popularity"])
    limit = max(1, int(limit))
    page = max(1, int(page))
    with db_conn(settings.app_db_path) as conn:
        total = int(conn.execute(f"SELECT COUNT(*) FROM food_items {clause}", params).fetchone()[0])
        rows = conn.execute(
            f"SELECT * FROM food_items {clause} ORDER BY {order} LIMIT ? OFFSET ?",
            (*params, limit, (page - 1) * limit),
        ).fetchall()
    return {
        "items": [_row_to_food(row) for row in rows],
        "pagination": {"total": total, "page": page, "pages": math.ceil(total / limit)},
    }
