# -*- coding: utf-8 -*-
"""Progress — Pydantic models."""

from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

RepsLeftInTank = Literal["Couldn't complete all reps", "0 - reached failure", "1", "2", "3", "4+"]


class WeightLogRequest(BaseModel):
    weight: float = Field(..., gt=0, le=500, description="Body weight in kg")


class CompletionRequest(BaseModel):
    type: Literal["workout", "meal"]
    item_id: str = Field(..., min_length=1)
    plan_id: Optional[str] = None


class ExerciseLogRequest(BaseModel):
    exercise_name: str = Field(..., min_length=1, max_length=200)
    workout_date: date
    workout_plan_id: Optional[str] = None
    reps_left_in_tank: RepsLeftInTank
    weight_lifted: Optional[float] = Field(default=None, ge=0)
    weight_unit: Optional[Literal["kg", "lbs"]] = None
    reps_completed: Optional[str] = None
    pain_reported: bool = False
    pain_notes: Optional[str] = None
    target_sets: Optional[int] = Field(default=None, ge=0)
    target_reps: Optional[str] = None

    @field_validator("exercise_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("exercise_name must not be blank")
        return value


class ExerciseSwapRequest(BaseModel):
    workout_date: date
    original_exercise_name: str = Field(..., min_length=1)
    swapped_exercise_name: str = Field(..., min_length=1)
    workout_plan_id: Optional[str] = None
