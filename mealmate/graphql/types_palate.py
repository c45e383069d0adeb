"""GraphQL types for palate domain (feedback, palate profile, taste report)."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

import strawberry

__all__ = [
    "TasteReportStatusEnum",
    "MealFeedbackType",
    "PalateProfileType",
    "PalateStateType",
    "AspectCountType",
    "TasteReportType",
    "MealTimeType",
    "SubmitFeedbackInput",
]


@strawberry.enum
class TasteReportStatusEnum(str, Enum):
    NO_FEEDBACK = "no_feedback"
    NO_LIKED_ASPECTS = "no_liked_aspects"
    OK = "ok"


@strawberry.type
class MealFeedbackType:
    """One stored feedback submission."""

    rating: Optional[int]
    liked_aspects: List[str]
    improvement_aspects: List[str]
    other_comments: str


@strawberry.type
class PalateProfileType:
    """Learned taste preferences (the two lists never share a tag)."""

    preferred_aspects: List[str]
    disliked_aspects: List[str]


@strawberry.type
class PalateStateType:
    """Palate profile together with the feedback it was learned from."""

    user_id: str
    palate_profile: PalateProfileType
    feedback_history: List[MealFeedbackType]  # oldest first, max 5


@strawberry.type
class AspectCountType:
    aspect: str
    count: int


@strawberry.type
class TasteReportType:
    """Most liked aspects across recent feedback."""

    status: TasteReportStatusEnum
    top_aspects: List[AspectCountType]
    message: str


@strawberry.type
class MealTimeType:
    """Meal for the current hour."""

    code: str  # breakfast, lunch, dinner, snack
    name: str  # user-facing label


@strawberry.input
class SubmitFeedbackInput:
    """Feedback on the last meal suggestion.

    At least one of rating, aspects or comments must be given.
    """

    user_id: str
    rating: Optional[int] = None  # 1-5
    liked_aspects: List[str] = strawberry.field(default_factory=list)
    improvement_aspects: List[str] = strawberry.field(default_factory=list)
    other_comments: str = ""
