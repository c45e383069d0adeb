"""Meal-time resolution from the local hour of day."""

from datetime import datetime
from typing import Optional

from .vocabulary import MealTimeName

# Inclusive hour windows, checked in order; anything else is a snack
MEAL_TIME_WINDOWS: tuple[tuple[MealTimeName, int, int], ...] = (
    (MealTimeName.BREAKFAST, 5, 9),
    (MealTimeName.LUNCH, 12, 15),
    (MealTimeName.DINNER, 18, 21),
)


def resolve_meal_time(hour: int) -> MealTimeName:
    """Map an hour of day (0-23) to the meal eaten at that time.

    Example:
        >>> resolve_meal_time(13)
        <MealTimeName.LUNCH: 'ناهار'>
        >>> resolve_meal_time(23)
        <MealTimeName.SNACK: 'میان‌وعده'>

    Raises:
        ValueError: If hour is outside 0-23
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour must be 0-23, got {hour}")

    for meal_time, start, end in MEAL_TIME_WINDOWS:
        if start <= hour <= end:
            return meal_time
    return MealTimeName.SNACK


def current_meal_time(now: Optional[datetime] = None) -> MealTimeName:
    """Meal for the current local time (or ``now`` when given)."""
    moment = now or datetime.now()
    return resolve_meal_time(moment.hour)
