"""Shared vocabulary of the meal planner (goals, meal times, tags)."""

from enum import Enum


class DietaryGoal(str, Enum):
    """User's dietary goal."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"

    def label(self) -> str:
        labels = {
            DietaryGoal.WEIGHT_LOSS: "کاهش وزن",
            DietaryGoal.MUSCLE_GAIN: "افزایش حجم (عضله)",
            DietaryGoal.MAINTENANCE: "حفظ وزن فعلی",
        }
        return labels[self]


class MealTimeName(str, Enum):
    """Meal of the day; values are the user-facing names."""

    BREAKFAST = "صبحانه"
    LUNCH = "ناهار"
    DINNER = "شام"
    SNACK = "میان‌وعده"


class WorkoutTiming(str, Enum):
    """When the suggested meal is eaten relative to training."""

    PRE_WORKOUT = "pre_workout"
    POST_WORKOUT = "post_workout"
    REST_DAY = "rest_day"
    GENERAL = "general"


# Feedback vocabulary for liked / improvement aspects
MEAL_ASPECT_TAGS: tuple[str, ...] = (
    "طعم تند", "طعم شیرین", "طعم ترش", "طعم شور", "طعم اومامی",
    "بافت نرم", "بافت ترد", "بافت آبدار", "بافت خامه ای",
    "گیاهی", "گوشتی", "مرغ", "دریایی",
    "سبک و تازه", "گرم و آرامش بخش", "سنگین و سیرکننده",
    "عطر و بوی خوب", "ظاهر جذاب", "سریع و آسان",
)

PREDEFINED_ILLNESSES: tuple[str, ...] = (
    "دیابت",
    "فشار خون بالا",
    "بیماری قلبی",
    "بیماری کلیوی",
    "آلرژی گلوتن",
    "آلرژی لاکتوز",
    "مشکلات گوارشی",
    "پرخوری عصبی",
    "دوران پریودی",
    "دوران شیر دهی",
    "دوران بارداری",
)
