# -*- coding: utf-8 -*-
"""Workouts — Pydantic models."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

Difficulty = Literal["beginner", "intermediate", "advanced"]
Equipment = Literal[
    "none", "dumbbell", "barbell", "machine", "cable", "bodyweight", "resistance bands", "kettlebell"
]


class GenerateWorkoutPlanRequest(BaseModel):
    fitness_level: Difficulty = "beginner"
    fitness_goal: str = Field(default="general_fitness", min_length=1, max_length=64)
    workout_frequency: int = 3
    available_equipment: List[Equipment] = Field(default_factory=list)
    focus_areas: List[str] = Field(default_factory=list)
