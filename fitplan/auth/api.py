# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from .models import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from .security import (
    clear_token_cookie,
    create_access_token,
    get_current_user,
    hash_password,
    set_token_cookie,
    verify_password,
)
from .storage import create_user, get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def user_public(row: dict) -> UserPublic:
    return UserPublic(
        id=row["id"],
        email=row["email"],
        name=row.get("name") or "",
        age=row.get("age"),
        height=row.get("height"),
        weight=row.get("weight"),
        goal_weight=row.get("goal_weight"),
        settings=row.get("settings") or {},
        created_at=row["created_at"],
    )


@router.post("/register", response_model=AuthResponse, summary="Register a new user")
def register(request: RegisterRequest, response: Response):
    if "@" not in request.email:
        raise HTTPException(status_code=400, detail="Please add a valid email")
    existing = get_user_by_email(request.email)
    if existing:
        raise HTTPException(status_code=400, detail="Email already registered")

    user = create_user(
        name=request.name,
        email=request.email,
        password_hash=hash_password(request.password),
        age=request.age,
        height=request.height,
        weight=request.weight,
        goal_weight=request.goal_weight,
    )
    logger.info("Registered user %s", user["id"])

    token = create_access_token(user_id=user["id"], email=user["email"], name=user.get("name") or "")
    set_token_cookie(response, token)
    return AuthResponse(user=user_public(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest, response: Response):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(user_id=user["id"], email=user["email"], name=user.get("name") or "")
    set_token_cookie(response, token)
    return AuthResponse(user=user_public(user), token=token)


@router.post("/logout", summary="Logout")
def logout(response: Response):
    clear_token_cookie(response)
    return {"status": "ok"}


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return user_public(user)
