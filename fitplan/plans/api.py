# -*- coding: utf-8 -*-
"""Plan endpoints (selection, daily views, meal swaps and edits, shopping list, preferences)."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..preferences.generator import generate_custom_diet_plan
from ..preferences.models import PreferenceRequest
from ..preferences.storage import require_preferences, save_preferences
from ..shopping.aggregator import build_shopping_list
from ..workouts.generator import exercise_alternatives
from .assembler import today_view, week_view
from .customization import (
    add_meal_ingredient,
    find_alternative_meals,
    get_meal_details,
    migrate_meal_ingredients,
    remove_meal_ingredient,
    swap_meal,
    swap_meal_by_cycle,
    swap_options,
    update_meal_ingredients,
)
from .models import (
    AddIngredientRequest,
    CompleteMealRequest,
    CompleteWorkoutRequest,
    IngredientEditResponse,
    IngredientsUpdateRequest,
    ModifyPlanRequest,
    SelectPlanRequest,
    SwapMealRequest,
)
from .storage import (
    complete_meal,
    complete_workout,
    get_custom_diet_plan,
    get_diet_plan,
    get_workout_plan,
    list_diet_plans,
    list_workout_plans,
    modify_plan,
    require_user_plan,
    select_plan,
)

router = APIRouter(prefix="/api/plans", tags=["Plans"])


def _plan_summary(plan: dict | None) -> dict | None:
    if not plan:
        return None
    return {k: plan.get(k) for k in ("id", "name", "frequency", "calories") if plan.get(k) is not None}


@router.get("/workout-options", summary="Stock workout plans")
def workout_options_api(user: dict = Depends(get_current_user)):
    return {"plans": [_plan_summary(p) | {"weeks": len(p["weeks"])} for p in list_workout_plans()]}


@router.get("/diet-options", summary="Stock diet plans")
def diet_options_api(user: dict = Depends(get_current_user)):
    return {"plans": [_plan_summary(p) | {"days": len(p["week_cycle"])} for p in list_diet_plans()]}


@router.post("/select", summary="Select plans and (re)start progress")
def select_plan_api(request: SelectPlanRequest, user: dict = Depends(get_current_user)):
    return select_plan(
        user_id=user["id"],
        workout_plan_id=request.workout_plan_id,
        diet_plan_id=request.diet_plan_id,
        start_date=request.start_date,
    )


@router.put("/modify", summary="Change plans, keeping start date and progress")
def modify_plan_api(request: ModifyPlanRequest, user: dict = Depends(get_current_user)):
    return modify_plan(
        user_id=user["id"],
        workout_plan_id=request.workout_plan_id,
        diet_plan_id=request.diet_plan_id,
    )


@router.get("/user", summary="The user's active plans")
def get_user_plans_api(user: dict = Depends(get_current_user)):
    user_plan = require_user_plan(user["id"])
    workout = get_workout_plan(user_plan["workout_plan_id"]) if user_plan.get("workout_plan_id") else None
    diet = get_diet_plan(user_plan["diet_plan_id"]) if user_plan.get("diet_plan_id") else None
    custom = get_custom_diet_plan(user["id"]) if user_plan.get("custom_diet_plan_id") else None
    return {
        **user_plan,
        "workout_plan": _plan_summary(workout),
        "diet_plan": _plan_summary(diet),
        "custom_diet_plan": _plan_summary(custom),
    }


@router.get("/today", summary="Workout and meals for one day")
def today_api(
    day: date | None = Query(default=None, alias="date", description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    return today_view(user["id"], day)


@router.get("/week", summary="Workouts and meals for consecutive days")
def week_api(
    start_date: date | None = Query(default=None, description="YYYY-MM-DD"),
    days: int = Query(default=7, ge=1, le=31),
    user: dict = Depends(get_current_user),
):
    return week_view(user["id"], start_date, days)


@router.post("/complete/workout", summary="Mark a day's workout as done")
def complete_workout_api(request: CompleteWorkoutRequest, user: dict = Depends(get_current_user)):
    return {"progress": complete_workout(user_id=user["id"], day=request.day)}


@router.post("/complete/meal", summary="Mark a meal as eaten")
def complete_meal_api(request: CompleteMealRequest, user: dict = Depends(get_current_user)):
    return {"progress": complete_meal(user_id=user["id"], day=request.day, meal_number=request.meal_number)}


@router.get("/shopping-list", summary="Aggregated ingredients for a date range")
def shopping_list_api(
    start_date: date | None = Query(default=None, description="YYYY-MM-DD"),
    end_date: date | None = Query(default=None, description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    return build_shopping_list(user["id"], start_date, end_date)


@router.get("/find-alternative-meals", summary="Ranked replacements for a planned meal")
def find_alternative_meals_api(
    day: date = Query(..., alias="date", description="YYYY-MM-DD"),
    meal_number: int = Query(..., ge=0),
    limit: int = Query(default=10, ge=1, le=50),
    user: dict = Depends(get_current_user),
):
    return find_alternative_meals(user_id=user["id"], day=day, meal_number=meal_number, limit=limit)


@router.post("/swap-meal", summary="Replace a planned meal with a catalog meal")
def swap_meal_api(request: SwapMealRequest, user: dict = Depends(get_current_user)):
    if request.day is not None and request.meal_number is not None:
        return swap_meal(
            user_id=user["id"],
            day=request.day,
            meal_number=request.meal_number,
            new_meal_id=request.new_meal_id,
        )
    if request.day_index is not None and request.meal_index is not None:
        return swap_meal_by_cycle(
            user_id=user["id"],
            day_index=request.day_index,
            meal_index=request.meal_index,
            new_meal_id=request.new_meal_id,
        )
    raise HTTPException(status_code=400, detail="Provide date and meal_number, or day_index and meal_index")


@router.get("/swap-options/{meal_index}/{day_index}", summary="Swap candidates by cycle position")
def swap_options_api(
    meal_index: int,
    day_index: int,
    limit: int = Query(default=10, ge=1, le=50),
    user: dict = Depends(get_current_user),
):
    return swap_options(user_id=user["id"], meal_index=meal_index, day_index=day_index, limit=limit)


@router.put("/meals/{meal_id}/ingredients", response_model=IngredientEditResponse, summary="Replace a meal's ingredients")
def update_ingredients_api(meal_id: str, request: IngredientsUpdateRequest, user: dict = Depends(get_current_user)):
    return update_meal_ingredients(
        user_id=user["id"],
        meal_id=meal_id,
        ingredients=[i.model_dump() for i in request.ingredients],
    )


@router.post("/meals/{meal_id}/ingredients", response_model=IngredientEditResponse, summary="Add one ingredient")
def add_ingredient_api(meal_id: str, request: AddIngredientRequest, user: dict = Depends(get_current_user)):
    return add_meal_ingredient(
        user_id=user["id"],
        meal_id=meal_id,
        food_item_id=request.food_item_id,
        quantity=request.quantity,
        unit=request.unit,
        ingredient=request.ingredient.model_dump() if request.ingredient else None,
    )


@router.delete(
    "/meals/{meal_id}/ingredients/{index}",
    response_model=IngredientEditResponse,
    summary="Remove one ingredient",
)
def remove_ingredient_api(meal_id: str, index: int, user: dict = Depends(get_current_user)):
    return remove_meal_ingredient(user_id=user["id"], meal_id=meal_id, index=index)


@router.post("/meals/{meal_id}/migrate-ingredients", summary="Convert free-text ingredients to structured ones")
def migrate_ingredients_api(meal_id: str, user: dict = Depends(get_current_user)):
    return migrate_meal_ingredients(user_id=user["id"], meal_id=meal_id)


@router.get("/meals/{meal_id}/debug", summary="Inspect a planned meal and its computed totals")
def meal_debug_api(meal_id: str, user: dict = Depends(get_current_user)):
    return get_meal_details(user_id=user["id"], meal_id=meal_id)


@router.post("/preference", status_code=201, summary="Save questionnaire answers")
def save_preference_api(request: PreferenceRequest, user: dict = Depends(get_current_user)):
    return save_preferences(user_id=user["id"], data=request.model_dump())


@router.get("/preference", summary="Saved questionnaire answers")
def get_preference_api(user: dict = Depends(get_current_user)):
    return require_preferences(user["id"])


@router.post("/generate-custom-plan", status_code=201, summary="Build a diet plan from saved preferences")
def generate_custom_plan_api(user: dict = Depends(get_current_user)):
    return generate_custom_diet_plan(user["id"])


@router.get("/exercises/{name}/alternatives", summary="Replacement exercises")
def exercise_alternatives_api(
    name: str,
    limit: int = Query(default=5, ge=1, le=20),
    user: dict = Depends(get_current_user),
):
    return exercise_alternatives(name, user_id=user["id"], limit=limit)
