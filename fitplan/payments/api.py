# -*- coding: utf-8 -*-
"""Payments — API endpoints."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from ..auth.security import get_current_user
from ..config import settings
from . import gateway
from .models import CreateSubscriptionRequest, PaymentIntentRequest, UpdatePaymentMethodRequest
from .storage import apply_webhook_event, get_subscription, period_end_iso, save_subscription, set_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["Payments"])

# Minor units (pence).
PLAN_PRICES: Dict[str, int] = {"bundle": 499, "diet_only": 299, "workout_only": 249}
UPGRADE_PRICE = 299


def _call(fn: Callable[..., Dict[str, Any]], **kwargs: Any) -> Dict[str, Any]:
    try:
        return fn(**kwargs)
    except gateway.GatewayNotConfigured as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except gateway.PaymentGatewayError as exc:
        raise HTTPException(status_code=502, detail=f"Payment gateway error: {exc}") from exc


def _require_subscription(user_id: str) -> Dict[str, Any]:
    sub = get_subscription(user_id)
    if not sub:
        raise HTTPException(status_code=404, detail="No active subscription found")
    return sub


@router.get("/pricing", summary="Plan prices in minor units")
def pricing_api(user: dict = Depends(get_current_user)):
    return {"currency": settings.currency, "plans": PLAN_PRICES, "upgrade": UPGRADE_PRICE}


@router.post("/create-payment-intent", summary="Create a one-off payment for a plan or an upgrade")
def create_payment_intent_api(request: PaymentIntentRequest, user: dict = Depends(get_current_user)):
    if request.is_upgrade:
        amount = UPGRADE_PRICE
    elif request.plan_type:
        amount = PLAN_PRICES[request.plan_type]
    else:
        raise HTTPException(status_code=400, detail="Invalid plan type")
    intent = _call(
        gateway.create_payment_intent,
        amount=amount,
        currency=settings.currency,
        metadata={"plan_type": request.plan_type or "upgrade", "user_id": user["id"]},
    )
    logger.info("Payment intent %s created for user %s (%s)", intent.get("id"), user["id"], amount)
    return {"client_secret": intent.get("client_secret"), "amount": amount, "currency": settings.currency}


@router.post("/create-subscription", summary="Start a recurring subscription")
def create_subscription_api(request: CreateSubscriptionRequest, user: dict = Depends(get_current_user)):
    price_id = settings.stripe_price_ids.get(request.plan_type)
    if not price_id:
        raise HTTPException(status_code=503, detail=f"No price configured for {request.plan_type}")

    existing = get_subscription(user["id"])
    customer_id = existing.get("gateway_customer_id") if existing else None
    if not customer_id:
        customer = _call(gateway.create_customer, email=user["email"], payment_method_id=request.payment_method_id)
        customer_id = customer["id"]

    subscription = _call(gateway.create_subscription, customer_id=customer_id, price_id=price_id)
    save_subscription(
        user_id=user["id"],
        plan_type=request.plan_type,
        status=subscription.get("status") or "incomplete",
        gateway_customer_id=customer_id,
        gateway_subscription_id=subscription["id"],
        current_period_end=period_end_iso(subscription.get("current_period_end")),
    )
    intent = (subscription.get("latest_invoice") or {}).get("payment_intent") or {}
    return {"subscription_id": subscription["id"], "client_secret": intent.get("client_secret")}


@router.post("/cancel-subscription", summary="Cancel the subscription")
def cancel_subscription_api(user: dict = Depends(get_current_user)):
    sub = _require_subscription(user["id"])
    if sub.get("gateway_subscription_id"):
        _call(gateway.cancel_subscription, subscription_id=sub["gateway_subscription_id"])
    set_status(sub["id"], "canceled")
    return {"message": "Subscription cancelled successfully"}


@router.post("/update-payment-method", summary="Replace the default payment method")
def update_payment_method_api(request: UpdatePaymentMethodRequest, user: dict = Depends(get_current_user)):
    sub = _require_subscription(user["id"])
    _call(
        gateway.attach_payment_method,
        payment_method_id=request.payment_method_id,
        customer_id=sub["gateway_customer_id"],
    )
    _call(
        gateway.set_default_payment_method,
        customer_id=sub["gateway_customer_id"],
        payment_method_id=request.payment_method_id,
    )
    return {"message": "Payment method updated successfully"}


@router.get("/subscription-status", summary="Current subscription state")
def subscription_status_api(user: dict = Depends(get_current_user)):
    sub = get_subscription(user["id"])
    if not sub:
        return {"active": False}
    return {
        "active": sub["status"] == "active",
        "status": sub["status"],
        "plan_type": sub["plan_type"],
        "current_period_end": sub.get("current_period_end"),
    }


@router.post("/webhook", summary="Gateway webhook (signature-verified)")
async def webhook_api(request: Request):
    if not settings.stripe_webhook_secret:
        raise HTTPException(status_code=503, detail="Webhook secret is not configured")
    payload = await request.body()
    try:
        event = gateway.construct_event(
            payload,
            request.headers.get("stripe-signature"),
            settings.stripe_webhook_secret,
            tolerance=settings.stripe_webhook_tolerance_sec,
        )
    except gateway.WebhookSignatureError as exc:
        logger.warning("Rejected webhook: %s", exc)
        raise HTTPException(status_code=400, detail=f"Webhook Error: {exc}") from exc
    apply_webhook_event(event)
    return {"received": True}
