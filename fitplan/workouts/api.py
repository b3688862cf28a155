# -*- coding: utf-8 -*-
"""Custom workout plans — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..auth.security import get_current_user
from .generator import generate_custom_workout_plan, get_user_custom_workout_plan
from .models import GenerateWorkoutPlanRequest

router = APIRouter(prefix="/api/custom-plans", tags=["Custom Plans"])


@router.post("/generate", status_code=201, summary="Generate a workout plan from questionnaire answers")
def generate_custom_plan_api(request: GenerateWorkoutPlanRequest, user: dict = Depends(get_current_user)):
    plan = generate_custom_workout_plan(
        user_id=user["id"],
        fitness_level=request.fitness_level,
        fitness_goal=request.fitness_goal,
        workout_frequency=request.workout_frequency,
        available_equipment=list(request.available_equipment),
    )
    return {"message": "Custom workout plan created successfully", "plan": plan}


@router.get("", summary="Get the user's generated workout plan")
def get_custom_plan_api(user: dict = Depends(get_current_user)):
    return {"plan": get_user_custom_workout_plan(user["id"])}
