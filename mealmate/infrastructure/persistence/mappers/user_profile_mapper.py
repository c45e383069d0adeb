"""Mapping between UserProfile entities and stored documents.

Stored records may come from older clients or hand edits, so restoring
is lenient: a missing or malformed field falls back to the form's
default value instead of failing the whole record.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from mealmate.domain.body_metrics.core.value_objects.anthropometrics import (
    Anthropometrics,
)
from mealmate.domain.body_metrics.core.value_objects.gender import Gender
from mealmate.domain.meal_planning.vocabulary import DietaryGoal, WorkoutTiming
from mealmate.domain.palate.core.value_objects.feedback_history import (
    FeedbackHistory,
)
from mealmate.domain.palate.core.value_objects.meal_feedback import MealFeedback
from mealmate.domain.palate.core.value_objects.palate_profile import PalateProfile
from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.domain.user_profile.core.value_objects.athlete_profile import (
    AthleteProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_GENDER = Gender.MALE
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_AGE = 30
DEFAULT_DIETARY_GOAL = DietaryGoal.WEIGHT_LOSS


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _positive_or(value: Any, default: float) -> float:
    return value if _is_number(value) and value > 0 else default


def _str_or(value: Any, default: Optional[str]) -> Optional[str]:
    return value if isinstance(value, str) else default


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _enum_or(enum_type: Any, value: Any, default: Any) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        return default


def _iso_to_datetime(value: Any) -> datetime:
    if not isinstance(value, str):
        return datetime.now(timezone.utc)
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        return datetime.now(timezone.utc)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class UserProfileMapper:
    """Converts UserProfile <-> plain dict documents."""

    @staticmethod
    def feedback_to_document(feedback: MealFeedback) -> Dict[str, Any]:
        return {
            "rating": feedback.rating,
            "liked_aspects": list(feedback.liked_aspects),
            "improvement_aspects": list(feedback.improvement_aspects),
            "other_comments": feedback.other_comments,
        }

    @staticmethod
    def feedback_from_document(doc: Any) -> Optional[MealFeedback]:
        """Restore one feedback entry, None when it is not a mapping."""
        if not isinstance(doc, dict):
            return None
        rating = doc.get("rating")
        return MealFeedback(
            rating=rating if _is_int(rating) else None,
            liked_aspects=tuple(_str_list(doc.get("liked_aspects"))),
            improvement_aspects=tuple(_str_list(doc.get("improvement_aspects"))),
            other_comments=_str_or(doc.get("other_comments"), "") or "",
        )

    @staticmethod
    def palate_profile_from_document(doc: Any) -> PalateProfile:
        """Restore a palate profile.

        A stored tag found in both lists is kept as disliked only,
        the same outcome the update rule gives conflicting signals.
        """
        if not isinstance(doc, dict):
            return PalateProfile.empty()
        disliked = _str_list(doc.get("disliked_aspects"))
        preferred = [
            aspect
            for aspect in _str_list(doc.get("preferred_aspects"))
            if aspect not in disliked
        ]
        return PalateProfile(
            preferred_aspects=tuple(preferred),
            disliked_aspects=tuple(disliked),
        )

    @staticmethod
    def athlete_from_document(doc: Dict[str, Any]) -> Optional[AthleteProfile]:
        if doc.get("is_athlete") is not True:
            return None
        athlete = doc.get("athlete")
        if not isinstance(athlete, dict):
            athlete = {}
        return AthleteProfile(
            activity_type=_str_or(athlete.get("activity_type"), None),
            workout_timing=_enum_or(
                WorkoutTiming, athlete.get("workout_timing"), WorkoutTiming.GENERAL
            ),
            athletic_goal=_str_or(athlete.get("athletic_goal"), None),
            training_phase=_str_or(athlete.get("training_phase"), None),
            training_phase_goal=_str_or(athlete.get("training_phase_goal"), None),
        )

    @classmethod
    def to_document(cls, profile: UserProfile) -> Dict[str, Any]:
        """Convert UserProfile entity to a storable document.

        Args:
            profile: Domain entity

        Returns:
            dict: Document keyed by user ID
        """
        athlete = profile.athlete
        return {
            "_id": profile.user_id,
            "user_id": profile.user_id,
            "gender": profile.anthropometrics.gender.value,
            "height_cm": profile.anthropometrics.height_cm,
            "weight_kg": profile.anthropometrics.weight_kg,
            "age": profile.anthropometrics.age,
            "dietary_goal": profile.dietary_goal.value,
            "illnesses": list(profile.illnesses),
            "other_illness_details": profile.other_illness_details,
            "current_mood": profile.current_mood,
            "current_craving": profile.current_craving,
            "feedback_history": [
                cls.feedback_to_document(feedback)
                for feedback in profile.feedback_history
            ],
            "palate_profile": {
                "preferred_aspects": list(profile.palate_profile.preferred_aspects),
                "disliked_aspects": list(profile.palate_profile.disliked_aspects),
            },
            "is_athlete": athlete is not None,
            "athlete": (
                {
                    "activity_type": athlete.activity_type,
                    "workout_timing": athlete.workout_timing.value,
                    "athletic_goal": athlete.athletic_goal,
                    "training_phase": athlete.training_phase,
                    "training_phase_goal": athlete.training_phase_goal,
                }
                if athlete is not None
                else None
            ),
            "created_at": profile.created_at.isoformat(),
            "updated_at": profile.updated_at.isoformat(),
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> UserProfile:
        """Convert a stored document to a UserProfile entity.

        Args:
            doc: Stored document

        Returns:
            UserProfile: Restored entity with defaults for bad fields

        Raises:
            ValueError: If the document has no user ID
        """
        user_id = doc.get("user_id") or doc.get("_id")
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValueError("Stored user profile has no user_id")

        age = doc.get("age")
        anthropometrics = Anthropometrics(
            gender=_enum_or(Gender, doc.get("gender"), DEFAULT_GENDER),
            height_cm=_positive_or(doc.get("height_cm"), DEFAULT_HEIGHT_CM),
            weight_kg=_positive_or(doc.get("weight_kg"), DEFAULT_WEIGHT_KG),
            age=age if _is_number(age) and age > 0 else DEFAULT_AGE,
        )

        raw_history = doc.get("feedback_history")
        entries = [
            feedback
            for feedback in (
                cls.feedback_from_document(item)
                for item in (raw_history if isinstance(raw_history, list) else [])
            )
            if feedback is not None
        ]
        history = FeedbackHistory.from_entries(entries)
        if isinstance(raw_history, list) and len(raw_history) > len(history):
            logger.debug(
                "Dropped stored feedback entries",
                extra={
                    "user_id": user_id,
                    "stored": len(raw_history),
                    "kept": len(history),
                },
            )

        return UserProfile(
            user_id=user_id,
            anthropometrics=anthropometrics,
            dietary_goal=_enum_or(
                DietaryGoal, doc.get("dietary_goal"), DEFAULT_DIETARY_GOAL
            ),
            illnesses=tuple(_str_list(doc.get("illnesses"))),
            other_illness_details=_str_or(doc.get("other_illness_details"), "") or "",
            current_mood=_str_or(doc.get("current_mood"), None),
            current_craving=_str_or(doc.get("current_craving"), None),
            feedback_history=history,
            palate_profile=cls.palate_profile_from_document(doc.get("palate_profile")),
            athlete=cls.athlete_from_document(doc),
            created_at=_iso_to_datetime(doc.get("created_at")),
            updated_at=_iso_to_datetime(doc.get("updated_at")),
        )
