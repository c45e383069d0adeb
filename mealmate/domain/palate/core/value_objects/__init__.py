"""Value objects for palate domain."""

from .feedback_history import FEEDBACK_HISTORY_LIMIT, FeedbackHistory
from .meal_feedback import MAX_RATING, MIN_RATING, MealFeedback
from .palate_profile import PalateProfile
from .taste_report import AspectCount, TasteReport, TasteReportStatus

__all__ = [
    "FEEDBACK_HISTORY_LIMIT",
    "FeedbackHistory",
    "MIN_RATING",
    "MAX_RATING",
    "MealFeedback",
    "PalateProfile",
    "AspectCount",
    "TasteReport",
    "TasteReportStatus",
]
