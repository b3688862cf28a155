# -*- coding: utf-8 -*-
"""Food items — Pydantic models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

FoodCategory = Literal[
    "fruits",
    "vegetables",
    "grains",
    "protein",
    "dairy",
    "snacks",
    "beverages",
    "condiments",
    "baked-goods",
    "packaged-foods",
    "fast-food",
    "restaurant",
    "desserts",
    "supplements",
    "nuts-seeds",
    "oils-fats",
    "other",
]

FoodUnit = Literal["g", "ml", "oz", "cup", "tbsp", "tsp", "piece", "serving"]

SortOption = Literal["popularity", "calories_asc", "calories_desc", "protein_desc"]


class FoodItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    category: FoodCategory
    base_quantity: float = Field(default=100, gt=0)
    base_unit: FoodUnit = "g"
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fats: float = Field(..., ge=0)
    fiber: float = Field(default=0, ge=0)
    sugar: float = Field(default=0, ge=0)
    brand: Optional[str] = None
    description: Optional[str] = None
    common_serving_size: Optional[float] = Field(default=None, gt=0)
    common_serving_unit: Optional[FoodUnit] = None
    is_gluten_free: bool = False
    is_vegan: bool = False
    is_vegetarian: bool = False
    popularity: int = 0
    alternate_names: List[str] = Field(default_factory=list)
    search_tags: List[str] = Field(default_factory=list)


class FoodItemUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    category: Optional[FoodCategory] = None
    base_quantity: Optional[float] = Field(default=None, gt=0)
    base_unit: Optional[FoodUnit] = None
    calories: Optional[float] = Field(default=None, ge=0)
    protein: Optional[float] = Field(default=None, ge=0)
    carbs: Optional[float] = Field(default=None, ge=0)
    fats: Optional[float] = Field(default=None, ge=0)
    fiber: Optional[float] = Field(default=None, ge=0)
    sugar: Optional[float] = Field(default=None, ge=0)
    brand: Optional[str] = None
    description: Optional[str] = None
    common_serving_size: Optional[float] = Field(default=None, gt=0)
    common_serving_unit: Optional[FoodUnit] = None
    is_gluten_free: Optional[bool] = None
    is_vegan: Optional[bool] = None
    is_vegetarian: Optional[bool] = None
    popularity: Optional[int] = None
    alternate_names: Optional[List[str]] = None
    search_tags: Optional[List[str]] = None


class CalculateNutritionRequest(BaseModel):
    food_item_id: Optional[str] = None
    quantity: Optional[float] = Field(default=None, gt=0)
    unit: Optional[str] = None
