# -*- coding: utf-8 -*-
"""Subscription storage helpers (SQLite) and webhook event handling."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import uuid4

from fastapi import HTTPException

from ..app_db import db_conn
from ..config import settings

logger = logging.getLogger(__name__)

SUBSCRIPTION_STATUSES = ("incomplete", "active", "past_due", "canceled", "unpaid")


def _iso_now() -> str:
    return datetime.utcnow().isoformat()


def period_end_iso(timestamp: Any) -> Optional[str]:
    if not timestamp:
        return None
    return datetime.utcfromtimestamp(int(timestamp)).isoformat()


def _one(where: str, value: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(f"SELECT * FROM subscriptions WHERE {where} = ?", (value,)).fetchone()
    return dict(row) if row else None


def get_subscription(user_id: str) -> Optional[Dict[str, Any]]:
    return _one("user_id", user_id)


def get_subscription_by_gateway_id(subscription_id: str) -> Optional[Dict[str, Any]]:
    return _one("gateway_subscription_id", subscription_id)


def get_subscription_by_customer(customer_id: str) -> Optional[Dict[str, Any]]:
    return _one("gateway_customer_id", customer_id)


def save_subscription(
    *,
    user_id: str,
    plan_type: str,
    status: str,
    gateway_customer_id: str,
    gateway_subscription_id: str,
    current_period_end: Optional[str],
) -> Dict[str, Any]:
    now = _iso_now()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO subscriptions (
                id, user_id, plan_type, status, gateway_customer_id, gateway_subscription_id,
                current_period_end, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                plan_type = excluded.plan_type,
                status = excluded.status,
                gateway_customer_id = excluded.gateway_customer_id,
                gateway_subscription_id = excluded.gateway_subscription_id,
                current_period_end = excluded.current_period_end,
                updated_at = excluded.updated_at
            """,
            (
                str(uuid4()),
                user_id,
                plan_type,
                status,
                gateway_customer_id,
                gateway_subscription_id,
                current_period_end,
                now,
                now,
            ),
        )
    found = get_subscription(user_id)
    if not found:
        raise HTTPException(status_code=500, detail="Failed to save subscription")
    return found


def set_status(subscription_id: str, status: str, *, current_period_end: Optional[str] = None) -> None:
    with db_conn(settings.app_db_path) as conn:
        if current_period_end:
            conn.execute(
                "UPDATE subscriptions SET status = ?, current_period_end = ?, updated_at = ? WHERE id = ?",
                (status, current_period_end, _iso_now(), subscription_id),
            )
        else:
            conn.execute(
                "UPDATE subscriptions SET status = ?, updated_at = ? WHERE id = ?",
                (status, _iso_now(), subscription_id),
            )


def apply_webhook_event(event: Dict[str, Any]) -> bool:
    """Update local billing state from a gateway event. Returns False when nothing changed."""
    event_type = event.get("type")
    obj = (event.get("data") or {}).get("object") or {}

    if event_type in ("customer.subscription.created", "customer.subscription.updated"):
        sub = get_subscription_by_gateway_id(obj.get("id") or "")
        if not sub:
            return False
        set_status(sub["id"], obj.get("status") or sub["status"], current_period_end=period_end_iso(obj.get("current_period_end")))
    elif event_type == "customer.subscription.deleted":
        sub = get_subscription_by_gateway_id(obj.get("id") or "")
        if not sub:
            return False
        set_status(sub["id"], "canceled")
    elif event_type in ("invoice.payment_succeeded", "invoice.payment_failed"):
        sub = get_subscription_by_customer(obj.get("customer") or "")
        if not sub:
            return False
        set_status(sub["id"], "active" if event_type == "invoice.payment_succeeded" else "past_due")
    else:
        logger.debug("Ignoring webhook event %s", event_type)
        return False

    logger.info("Webhook %s applied to subscription %s", event_type, sub["id"])
    return True
