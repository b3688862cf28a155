# -*- coding: utf-8 -*-
"""Food items — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..ingredients.nutrition import scale_food_item
from .models import CalculateNutritionRequest, FoodItemCreate, FoodItemUpdate, SortOption
from .storage import (
    create_food_item,
    delete_food_item,
    get_food_item,
    search_food_items,
    update_food_item,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/food-items", tags=["Food Items"])


@router.get("/search", summary="Search the food database")
def search_food_items_api(
    query: str | None = Query(default=None),
    category: str = Query(default="all"),
    is_gluten_free: bool = Query(default=False),
    is_vegan: bool = Query(default=False),
    sort: SortOption = Query(default="popularity"),
    limit: int = Query(default=20, ge=1, le=100),
    page: int = Query(default=1, ge=1),
    user: dict = Depends(get_current_user),
):
    return search_food_items(
        query=query,
        category=category,
        is_gluten_free=is_gluten_free,
        is_vegan=is_vegan,
        sort=sort,
        limit=limit,
        page=page,
    )


@router.post("/calculate-nutrition", summary="Nutrition for a quantity of a food item")
def calculate_nutrition_api(request: CalculateNutritionRequest, user: dict = Depends(get_current_user)):
    if not request.food_item_id or request.quantity is None:
        raise HTTPException(status_code=400, detail="food_item_id and quantity are required")
    food = get_food_item(request.food_item_id)
    if not food:
        raise HTTPException(status_code=404, detail="Food item not found")
    unit = request.unit or food["base_unit"]
    return {
        "food_item": food,
        "quantity": request.quantity,
        "unit": unit,
        "nutrition": scale_food_item(food, request.quantity, unit),
    }


@router.get("/{food_id}", summary="Get a food item")
def get_food_item_api(food_id: str, user: dict = Depends(get_current_user)):
    food = get_food_item(food_id)
    if not food:
        raise HTTPException(status_code=404, detail="Food item not found")
    return food


@router.post("", status_code=201, summary="Create a food item")
def create_food_item_api(request: FoodItemCreate, user: dict = Depends(get_current_user)):
    food = create_food_item(request.model_dump())
    logger.info("Food item created: %s (%s)", food["name"], food["id"])
    return food


@router.put("/{food_id}", summary="Update a food item")
def update_food_item_api(food_id: str, request: FoodItemUpdate, user: dict = Depends(get_current_user)):
    return update_food_item(food_id, request.model_dump(exclude_none=True))


@router.delete("/{food_id}", summary="Delete a food item")
def delete_food_item_api(food_id: str, user: dict = Depends(get_current_user)):
    delete_food_item(food_id)
    return {"message": "Food item deleted successfully"}
