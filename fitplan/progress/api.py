# -*- coding: utf-8 -*-
"""Progress — API endpoints."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .models import CompletionRequest, ExerciseLogRequest, ExerciseSwapRequest, WeightLogRequest
from .storage import (
    get_progress,
    list_exercise_logs,
    list_exercise_swaps,
    log_completion,
    log_exercise,
    log_weight,
    upsert_exercise_swap,
)

router = APIRouter(prefix="/api/progress", tags=["Progress"])


@router.get("", summary="Get weights, completions and streak")
def get_progress_api(user: dict = Depends(get_current_user)):
    return get_progress(user["id"])


@router.post("/weight", summary="Log body weight")
def log_weight_api(request: WeightLogRequest, user: dict = Depends(get_current_user)):
    return log_weight(user_id=user["id"], weight=request.weight)


@router.get("/weight", summary="Weight history")
def get_weights_api(user: dict = Depends(get_current_user)):
    return {"weights": get_progress(user["id"])["weights"]}


@router.post("/completion", summary="Log a completed workout or meal and update the streak")
def log_completion_api(request: CompletionRequest, user: dict = Depends(get_current_user)):
    return log_completion(
        user_id=user["id"],
        kind=request.type,
        item_id=request.item_id,
        plan_id=request.plan_id,
    )


@router.post("/exercise", summary="Log a completed exercise")
def log_exercise_api(request: ExerciseLogRequest, user: dict = Depends(get_current_user)):
    return log_exercise(user_id=user["id"], payload=request.model_dump())


@router.get("/exercise", summary="Recent exercise logs")
def list_exercise_logs_api(
    exercise_name: str | None = Query(default=None),
    limit: int = Query(default=20, ge=1, le=200),
    user: dict = Depends(get_current_user),
):
    return {"items": list_exercise_logs(user_id=user["id"], exercise_name=exercise_name, limit=limit)}


@router.post("/swap-exercise", summary="Swap an exercise for one day")
def swap_exercise_api(request: ExerciseSwapRequest, user: dict = Depends(get_current_user)):
    return upsert_exercise_swap(
        user_id=user["id"],
        workout_date=request.workout_date,
        original_exercise=request.original_exercise_name.strip(),
        swapped_exercise=request.swapped_exercise_name.strip(),
        workout_plan_id=request.workout_plan_id,
    )


@router.get("/swaps", summary="Exercise swaps for a day")
def list_swaps_api(
    date_: date = Query(..., alias="date", description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    swaps = list_exercise_swaps(user_id=user["id"], start=date_, end=date_)
    return {"date": date_.isoformat(), "swaps": swaps.get(date_.isoformat(), {})}
