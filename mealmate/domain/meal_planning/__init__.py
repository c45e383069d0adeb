"""Meal planning vocabulary and meal-time resolution."""

from .meal_time import MEAL_TIME_WINDOWS, current_meal_time, resolve_meal_time
from .vocabulary import (
    MEAL_ASPECT_TAGS,
    PREDEFINED_ILLNESSES,
    DietaryGoal,
    MealTimeName,
    WorkoutTiming,
)

__all__ = [
    "MEAL_TIME_WINDOWS",
    "current_meal_time",
    "resolve_meal_time",
    "MEAL_ASPECT_TAGS",
    "PREDEFINED_ILLNESSES",
    "DietaryGoal",
    "MealTimeName",
    "WorkoutTiming",
]
