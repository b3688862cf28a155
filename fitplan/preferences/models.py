# -*- coding: utf-8 -*-
"""Preferences — Pydantic models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

HealthCondition = Literal[
    "diabetes",
    "hypertension",
    "heart_disease",
    "arthritis",
    "ibs",
    "gerd",
    "high_cholesterol",
    "high_triglycerides",
    "iron_deficiency",
    "vitamin_d_deficiency",
    "b12_deficiency",
    "calcium_deficiency",
    "zinc_deficiency",
    "gluten_intolerance",
    "lactose_intolerance",
    "nut_allergy",
    "shellfish_allergy",
]
Goal = Literal["weight_loss", "weight_gain", "muscle_building", "endurance", "maintenance", "general_health"]
BodyFocusArea = Literal["arms", "abs", "back", "chest", "legs", "glutes", "shoulders", "full_body"]
DietType = Literal[
    "omnivore", "flexitarian", "pescatarian", "vegetarian", "vegan",
    "keto", "paleo", "mediterranean", "halal", "kosher",
]
Cuisine = Literal[
    "american", "italian", "mexican", "asian", "indian", "mediterranean",
    "middle_eastern", "thai", "japanese", "french", "korean", "spanish",
]
ExcludedIngredient = Literal[
    "nuts", "dairy", "gluten", "soy", "shellfish", "eggs", "pork",
    "beef", "nightshades", "processed_sugar", "alcohol",
]
CookingTime = Literal["minimal", "moderate", "extended"]
CookingSkill = Literal["beginner", "intermediate", "advanced"]
Budget = Literal["budget", "moderate", "premium"]


class PreferenceRequest(BaseModel):
    goal: Goal
    diet_type: DietType
    cooking_time: CookingTime
    cooking_skill: CookingSkill
    budget: Budget
    health_conditions: List[HealthCondition] = Field(default_factory=list)
    body_focus_areas: List[BodyFocusArea] = Field(default_factory=list)
    cuisine_preferences: List[Cuisine] = Field(default_factory=list)
    excluded_ingredients: List[ExcludedIngredient] = Field(default_factory=list)
    meal_prep: bool = False
    bmr: Optional[float] = Field(default=None, gt=0)
    tdee: Optional[float] = Field(default=None, gt=0)
