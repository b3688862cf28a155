# -*- coding: utf-8 -*-
"""Profile — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from ..auth.api import user_public
from ..auth.models import UserPublic
from ..auth.security import clear_token_cookie, get_current_user
from .models import ProfileUpdateRequest
from .storage import delete_user, update_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Profile"])


@router.get("/profile", response_model=UserPublic, summary="Get the current user's profile")
def get_profile(user: dict = Depends(get_current_user)):
    return user_public(user)


@router.put("/profile", response_model=UserPublic, summary="Update profile fields and settings")
def put_profile(request: ProfileUpdateRequest, user: dict = Depends(get_current_user)):
    updated = update_profile(user_id=user["id"], updates=request.model_dump(exclude_none=True))
    return user_public(updated)


@router.delete("/profile", summary="Delete the account and all plan data")
def delete_profile(response: Response, user: dict = Depends(get_current_user)):
    delete_user(user_id=user["id"])
    logger.info("Deleted account %s", user["id"])
    clear_token_cookie(response)
    return {"message": "Account deleted successfully"}
