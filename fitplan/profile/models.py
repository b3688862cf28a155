# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class NotificationSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: Optional[bool] = None
    workout_reminders: Optional[bool] = None
    meal_reminders: Optional[bool] = None
    progress_reminders: Optional[bool] = None


class SettingsUpdate(BaseModel):
    notifications: Optional[NotificationSettings] = None
    theme: Optional[Literal["light", "dark"]] = None


class ProfileUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    age: Optional[int] = Field(default=None, ge=0, le=120)
    height: Optional[float] = Field(default=None, ge=0, le=300)
    weight: Optional[float] = Field(default=None, ge=0, le=500)
    goal_weight: Optional[float] = Field(default=None, ge=0, le=500)
    settings: Optional[SettingsUpdate] = None
