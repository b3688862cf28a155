# -*- coding: utf-8 -*-
"""Plans — Pydantic models."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectPlanRequest(BaseModel):
    workout_plan_id: Optional[str] = None
    diet_plan_id: Optional[str] = None
    start_date: Optional[date] = None


class ModifyPlanRequest(BaseModel):
    workout_plan_id: Optional[str] = None
    diet_plan_id: Optional[str] = None


class CompleteWorkoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(..., alias="date")


class CompleteMealRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(..., alias="date")
    meal_number: int = Field(..., ge=0)


class SwapMealRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_meal_id: str = Field(..., min_length=1)
    day: Optional[date] = Field(default=None, alias="date")
    meal_number: Optional[int] = Field(default=None, ge=0)
    day_index: Optional[int] = Field(default=None, ge=0)
    meal_index: Optional[int] = Field(default=None, ge=0)


class IngredientPayload(BaseModel):
    """Client-edited ingredient. Values are repaired by the sanitizer, not rejected."""

    name: Optional[str] = Field(default=None, max_length=200)
    quantity: Optional[Any] = 1
    unit: Optional[str] = None
    calories: Optional[Any] = 0
    protein: Optional[Any] = 0
    carbs: Optional[Any] = 0
    fats: Optional[Any] = 0
    reference_quantity: Optional[Any] = None
    reference_calories: Optional[Any] = None
    reference_protein: Optional[Any] = None
    reference_carbs: Optional[Any] = None
    reference_fats: Optional[Any] = None
    food_item_id: Optional[str] = None
    original_string: Optional[str] = None


class IngredientsUpdateRequest(BaseModel):
    ingredients: List[IngredientPayload]


class AddIngredientRequest(BaseModel):
    food_item_id: Optional[str] = None
    quantity: Optional[float] = Field(default=None, gt=0)
    unit: Optional[str] = None
    ingredient: Optional[IngredientPayload] = None


class IngredientEditResponse(BaseModel):
    meal: Dict[str, Any]
    warnings: List[str] = Field(default_factory=list)
