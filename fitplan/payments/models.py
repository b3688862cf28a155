# -*- coding: utf-8 -*-
"""Payments — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

PlanType = Literal["workout_only", "diet_only", "bundle"]


class PaymentIntentRequest(BaseModel):
    plan_type: Optional[PlanType] = None
    is_upgrade: bool = False


class CreateSubscriptionRequest(BaseModel):
    plan_type: PlanType
    payment_method_id: str = Field(..., min_length=1)


class UpdatePaymentMethodRequest(BaseModel):
    payment_method_id: str = Field(..., min_length=1)
