# -*- coding: utf-8 -*-
"""Exercise library and the two stock workout plans (3-day and 4-day, six weeks each)."""

from __future__ import annotations

import copy
from typing import Any, Dict, List


def _exercise(name, muscles, equipment, difficulty, kind="strength", minutes=8, description="", tags=()):
    return {
        "name": name,
        "description": description or name,
        "muscle_groups": list(muscles),
        "equipment": list(equipment),
        "difficulty": difficulty,
        "type": kind,
        "time_required": minutes,
        "tags": list(tags),
    }


EXERCISES: List[Dict[str, Any]] = [
    _exercise("Bench Press", ["chest", "arms"], ["barbell"], "intermediate", description="Barbell press from the chest"),
    _exercise("Dumbbell Press", ["chest", "arms"], ["dumbbell"], "beginner"),
    _exercise("Incline Dumbbell Press", ["chest", "shoulders"], ["dumbbell"], "intermediate"),
    _exercise("Push-Up", ["chest", "arms", "core"], ["bodyweight"], "beginner", tags=["home"]),
    _exercise("Floor Press", ["chest", "arms"], ["dumbbell"], "beginner"),
    _exercise("Weighted Pull-Up", ["back", "arms"], ["bodyweight"], "advanced"),
    _exercise("Chin-Up", ["back", "arms"], ["bodyweight"], "intermediate"),
    _exercise("Lat Pulldown", ["back", "arms"], ["cable", "machine"], "beginner"),
    _exercise("Barbell Row", ["back"], ["barbell"], "intermediate"),
    _exercise("Dumbbell Row", ["back"], ["dumbbell"], "beginner"),
    _exercise("Seated Cable Row", ["back"], ["cable"], "beginner"),
    _exercise("Overhead Press", ["shoulders", "arms"], ["barbell"], "intermediate"),
    _exercise("Seated Dumbbell Press", ["shoulders", "arms"], ["dumbbell"], "beginner"),
    _exercise("Pike Push-Up", ["shoulders", "arms"], ["bodyweight"], "intermediate", tags=["home"]),
    _exercise("Lateral Raise", ["shoulders"], ["dumbbell"], "beginner", minutes=5),
    _exercise("Face Pull", ["shoulders", "back"], ["cable"], "beginner", minutes=5),
    _exercise("Band Pull Apart", ["shoulders", "back"], ["resistance bands"], "beginner", minutes=4, tags=["home"]),
    _exercise("Back Squat", ["legs"], ["barbell"], "intermediate", minutes=10),
    _exercise("Goblet Squat", ["legs", "core"], ["dumbbell", "kettlebell"], "beginner"),
    _exercise("Bodyweight Squat", ["legs"], ["bodyweight"], "beginner", tags=["home"]),
    _exercise("Romanian Deadlift", ["legs", "back"], ["barbell"], "intermediate"),
    _exercise("Dumbbell Romanian Deadlift", ["legs", "back"], ["dumbbell"], "beginner"),
    _exercise("Kettlebell Swing", ["legs", "back", "core"], ["kettlebell"], "intermediate", minutes=6),
    _exercise("Walking Lunge", ["legs"], ["dumbbell", "bodyweight"], "beginner"),
    _exercise("Bulgarian Split Squat", ["legs"], ["dumbbell"], "intermediate"),
    _exercise("Leg Press", ["legs"], ["machine"], "beginner"),
    _exercise("Leg Curl", ["legs"], ["machine"], "beginner", minutes=5),
    _exercise("Glute Bridge", ["legs", "core"], ["bodyweight"], "beginner", minutes=5, tags=["home"]),
    _exercise("Bicep Curl", ["arms"], ["dumbbell"], "beginner", minutes=5),
    _exercise("Hammer Curl", ["arms"], ["dumbbell"], "beginner", minutes=5),
    _exercise("Tricep Pushdown", ["arms"], ["cable"], "beginner", minutes=5),
    _exercise("Tricep Extension", ["arms"], ["dumbbell"], "beginner", minutes=5),
    _exercise("Plank", ["core"], ["none"], "beginner", minutes=3, tags=["home"]),
    _exercise("Dead Bug", ["core"], ["none"], "beginner", minutes=4, tags=["home"]),
    _exercise("Hanging Knee Raise", ["core"], ["bodyweight"], "intermediate", minutes=4),
    _exercise("Cable Crunch", ["core"], ["cable"], "intermediate", minutes=4),
    _exercise("Jump Rope", ["fullBody", "legs"], ["none"], "beginner", kind="cardio", minutes=10),
    _exercise("Rowing Machine", ["fullBody", "back"], ["machine"], "beginner", kind="cardio", minutes=15),
    _exercise("Burpee", ["fullBody", "core"], ["bodyweight"], "intermediate", kind="cardio", minutes=6),
    _exercise("Hip Flexor Stretch", ["legs"], ["none"], "beginner", kind="flexibility", minutes=3),
    _exercise("Single-Leg Balance Reach", ["legs", "core"], ["none"], "beginner", kind="balance", minutes=3),
]


def _slot(name, sets, reps, rest, alternatives, cues=(), tempo="2-0-2", notes=""):
    return {
        "name": name,
        "sets": sets,
        "reps": reps,
        "rest": rest,
        "tempo": tempo,
        "notes": notes,
        "cues": list(cues),
        "alternative_exercise_names": list(alternatives),
    }


_UPPER_A = [
    _slot("Bench Press", 4, "5-8", "2-3min", ["Dumbbell Press", "Floor Press", "Push-Up"],
          ["Retract scapula", "Drive feet into floor"], tempo="2-0-X"),
    _slot("Weighted Pull-Up", 4, "5-8", "2-3min", ["Chin-Up", "Lat Pulldown", "Barbell Row"],
          ["Initiate with lats", "Full extension at bottom"], tempo="2-0-X"),
    _slot("Overhead Press", 3, "6-10", "90sec", ["Seated Dumbbell Press", "Pike Push-Up"], ["Brace core tight"]),
    _slot("Lateral Raise", 3, "10-15", "60sec", ["Face Pull", "Band Pull Apart"], ["Lead with elbows"]),
    _slot("Tricep Extension", 3, "10-15", "60sec", ["Tricep Pushdown", "Push-Up"], ["Keep elbows still"]),
]
_LOWER_A = [
    _slot("Back Squat", 4, "5-8", "2-3min", ["Goblet Squat", "Leg Press", "Bulgarian Split Squat"],
          ["Brace before descent", "Knees track toes"], tempo="3-1-X"),
    _slot("Romanian Deadlift", 3, "6-10", "2min", ["Dumbbell Romanian Deadlift", "Kettlebell Swing", "Glute Bridge"],
          ["Hinge at hips", "Neutral spine"], tempo="3-0-1"),
    _slot("Walking Lunge", 3, "10-12", "90sec", ["Bulgarian Split Squat", "Bodyweight Squat"]),
    _slot("Leg Curl", 3, "10-15", "60sec", ["Glute Bridge", "Dumbbell Romanian Deadlift"]),
    _slot("Plank", 3, "30-45s", "45sec", ["Dead Bug", "Hanging Knee Raise"], ["Squeeze glutes"]),
]
_UPPER_B = [
    _slot("Incline Dumbbell Press", 4, "8-10", "90sec", ["Dumbbell Press", "Push-Up"]),
    _slot("Barbell Row", 4, "6-10", "2min", ["Dumbbell Row", "Seated Cable Row"], ["Flat back", "Elbows past torso"]),
    _slot("Seated Dumbbell Press", 3, "8-12", "90sec", ["Overhead Press", "Pike Push-Up"]),
    _slot("Face Pull", 3, "12-15", "60sec", ["Band Pull Apart", "Lateral Raise"], ["Pull to forehead"]),
    _slot("Bicep Curl", 3, "10-15", "60sec", ["Hammer Curl", "Chin-Up"]),
]
_LOWER_B = [
    _slot("Goblet Squat", 4, "8-12", "90sec", ["Back Squat", "Leg Press", "Bodyweight Squat"]),
    _slot("Kettlebell Swing", 4, "12-15", "90sec", ["Romanian Deadlift", "Glute Bridge"], ["Snap the hips"]),
    _slot("Bulgarian Split Squat", 3, "8-10", "90sec", ["Walking Lunge", "Leg Press"]),
    _slot("Glute Bridge", 3, "12-15", "60sec", ["Leg Curl", "Dumbbell Romanian Deadlift"]),
    _slot("Hanging Knee Raise", 3, "10-15", "60sec", ["Cable Crunch", "Dead Bug"]),
]
_FULL_A = [_UPPER_A[0], _LOWER_A[0], _UPPER_B[1], _LOWER_A[1], _LOWER_A[4]]
_FULL_B = [_UPPER_A[2], _LOWER_B[0], _UPPER_A[1], _LOWER_B[2], _UPPER_A[3]]
_FULL_C = [_UPPER_B[0], _LOWER_B[1], _UPPER_B[2], _LOWER_A[2], _LOWER_B[4]]

# Week-by-week progression: (extra sets, progression note). Week 6 deloads.
_PROGRESSION = [
    (0, "Build technique; leave 2-3 reps in reserve"),
    (0, "Add weight when all reps are completed with good form"),
    (1, "Add a set; keep 1-2 reps in reserve"),
    (1, "Increase load by 2.5kg where possible"),
    (1, "Push the top set close to failure"),
    (-1, "Deload: reduce load by 30% and focus on form"),
]


def _week(days: List[tuple], week_index: int) -> List[Dict[str, Any]]:
    extra_sets, note = _PROGRESSION[week_index]
    out = []
    for day_number, focus, slots in days:
        exercises = []
        for slot in slots:
            exercise = copy.deepcopy(slot)
            exercise["sets"] = max(2, exercise["sets"] + extra_sets)
            exercise["progression"] = note
            exercises.append(exercise)
        out.append({"day_number": day_number, "focus": focus, "exercises": exercises})
    return out


def _plan(plan_id: str, name: str, frequency: str, days: List[tuple]) -> Dict[str, Any]:
    return {
        "id": plan_id,
        "name": name,
        "frequency": frequency,
        "weeks": [_week(days, i) for i in range(len(_PROGRESSION))],
        "metadata": {"weeks": len(_PROGRESSION)},
    }


WORKOUT_PLANS: List[Dict[str, Any]] = [
    _plan(
        "3day-full-body",
        "3-Day Full Body Strength",
        "3day",
        [(1, "Full Body A", _FULL_A), (3, "Full Body B", _FULL_B), (5, "Full Body C", _FULL_C)],
    ),
    _plan(
        "4day-upper-lower",
        "4-Day Upper/Lower Split",
        "4day",
        [
            (1, "Upper Body Power & Strength", _UPPER_A),
            (2, "Lower Body Power & Strength", _LOWER_A),
            (4, "Upper Body Hypertrophy", _UPPER_B),
            (5, "Lower Body Hypertrophy", _LOWER_B),
        ],
    ),
]
