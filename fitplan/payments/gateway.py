# -*- coding: utf-8 -*-
"""
Minimal Stripe REST client.

Requests are form-encoded (nested keys as `a[b][0]`) and authenticated with the
secret key. Webhook payloads are verified against the `Stripe-Signature`
header: HMAC-SHA256 over "<timestamp>.<payload>".
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

import httpx

from ..config import settings

logger = logging.getLogger(__name__)


class PaymentGatewayError(RuntimeError):
    pass


class GatewayNotConfigured(PaymentGatewayError):
    pass


class WebhookSignatureError(ValueError):
    pass


def _flatten(data: Dict[str, Any], prefix: str = "") -> List[Tuple[str, str]]:
    out: List[Tuple[str, str]] = []
    for key, value in data.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, dict):
            out.extend(_flatten(value, name))
        elif isinstance(value, (list, tuple)):
            for i, item in enumerate(value):
                if isinstance(item, dict):
                    out.extend(_flatten(item, f"{name}[{i}]"))
                else:
                    out.append((f"{name}[{i}]", str(item)))
        elif isinstance(value, bool):
            out.append((name, "true" if value else "false"))
        elif value is not None:
            out.append((name, str(value)))
    return out


def _request(method: str, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    if not settings.stripe_secret_key:
        raise GatewayNotConfigured("Payment gateway is not configured")
    url = f"{settings.stripe_api_base.rstrip('/')}/{path.lstrip('/')}"
    form = _flatten(data or {})
    try:
        with httpx.Client(timeout=settings.stripe_timeout, follow_redirects=True) as client:
            resp = client.request(
                method,
                url,
                auth=(settings.stripe_secret_key, ""),
                data=form if method != "GET" else None,
                params=form if method == "GET" else None,
            )
    except httpx.RequestError as exc:
        raise PaymentGatewayError(f"Payment gateway unreachable: {exc}") from exc

    if resp.status_code >= 400:
        message = resp.text[:200]
        try:
            message = (resp.json().get("error") or {}).get("message") or message
        except ValueError:
            pass
        logger.warning("Stripe %s %s failed (%s): %s", method, path, resp.status_code, message)
        raise PaymentGatewayError(message)
    return resp.json()


def create_payment_intent(*, amount: int, currency: str, metadata: Dict[str, str]) -> Dict[str, Any]:
    return _request(
        "POST",
        "/payment_intents",
        {
            "amount": amount,
            "currency": currency,
            "automatic_payment_methods": {"enabled": True},
            "metadata": metadata,
        },
    )


def create_customer(*, email: str, payment_method_id: str) -> Dict[str, Any]:
    return _request(
        "POST",
        "/customers",
        {
            "email": email,
            "payment_method": payment_method_id,
            "invoice_settings": {"default_payment_method": payment_method_id},
        },
    )


def create_subscription(*, customer_id: str, price_id: str) -> Dict[str, Any]:
    return _request(
        "POST",
        "/subscriptions",
        {
            "customer": customer_id,
            "items": [{"price": price_id}],
            "payment_behavior": "default_incomplete",
            "payment_settings": {"save_default_payment_method": "on_subscription"},
            "expand": ["latest_invoice.payment_intent"],
        },
    )


def cancel_subscription(subscription_id: str) -> Dict[str, Any]:
    return _request("DELETE", f"/subscriptions/{subscription_id}")


def attach_payment_method(*, payment_method_id: str, customer_id: str) -> Dict[str, Any]:
    return _request("POST", f"/payment_methods/{payment_method_id}/attach", {"customer": customer_id})


def set_default_payment_method(*, customer_id: str, payment_method_id: str) -> Dict[str, Any]:
    return _request(
        "POST",
        f"/customers/{customer_id}",
        {"invoice_settings": {"default_payment_method": payment_method_id}},
    )


def _parse_signature_header(header: str) -> Tuple[Optional[int], List[str]]:
    timestamp: Optional[int] = None
    signatures: List[str] = []
    for part in header.split(","):
        key, _, value = part.strip().partition("=")
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError:
                timestamp = None
        elif key == "v1" and value:
            signatures.append(value)
    return timestamp, signatures


def sign_payload(payload: bytes, secret: str, timestamp: int) -> str:
    signed = f"{timestamp}.".encode("utf-8") + payload
    return hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()


def construct_event(
    payload: bytes,
    header: Optional[str],
    secret: str,
    *,
    tolerance: int = 300,
    now: Optional[float] = None,
) -> Dict[str, Any]:
    """Verify a webhook signature and decode the event."""
    if not header:
        raise WebhookSignatureError("Missing Stripe-Signature header")
    timestamp, signatures = _parse_signature_header(header)
    if timestamp is None or not signatures:
        raise WebhookSignatureError("Malformed Stripe-Signature header")

    expected = sign_payload(payload, secret, timestamp)
    if not any(hmac.compare_digest(expected, sig) for sig in signatures):
        raise WebhookSignatureError("Signature mismatch")
    current = time.time() if now is None else now
    if tolerance and abs(current - timestamp) > tolerance:
        raise WebhookSignatureError("Timestamp outside the tolerance zone")

    try:
        event = json.loads(payload.decode("utf-8"))
    except ValueError as exc:
        raise WebhookSignatureError(f"Invalid payload: {exc}") from exc
    if not isinstance(event, dict) or "type" not in event:
        raise WebhookSignatureError("Invalid payload: not an event")
    return event
