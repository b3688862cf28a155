# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    age: Optional[int] = Field(default=None, ge=0, le=120)
    height: Optional[float] = Field(default=None, ge=0, le=300)
    weight: Optional[float] = Field(default=None, ge=0, le=500)
    goal_weight: Optional[float] = Field(default=None, ge=0, le=500)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class UserPublic(BaseModel):
    id: str
    email: str
    name: str
    age: Optional[int] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    goal_weight: Optional[float] = None
    settings: Dict[str, Any] = Field(default_factory=dict)
    created_at: str


class AuthResponse(BaseModel):
    user: UserPublic
    token: str
