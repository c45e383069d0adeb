"""GraphQL types for user profile domain."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

import strawberry

from mealmate.graphql.types_body_metrics import AnthropometricsInput, GenderEnum
from mealmate.graphql.types_palate import PalateProfileType

__all__ = [
    "DietaryGoalEnum",
    "WorkoutTimingEnum",
    "AthleteType",
    "UserProfileType",
    "SaveUserProfileResultType",
    "AthleteInput",
    "SaveUserProfileInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class DietaryGoalEnum(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"


@strawberry.enum
class WorkoutTimingEnum(str, Enum):
    """Meal timing relative to training."""

    PRE_WORKOUT = "pre_workout"
    POST_WORKOUT = "post_workout"
    REST_DAY = "rest_day"
    GENERAL = "general"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class AthleteType:
    activity_type: Optional[str]
    workout_timing: WorkoutTimingEnum
    athletic_goal: Optional[str]
    training_phase: Optional[str]
    training_phase_goal: Optional[str]


@strawberry.type
class UserProfileType:
    """Stored profile form data with the learned palate profile."""

    user_id: str
    gender: GenderEnum
    height_cm: float
    weight_kg: float
    age: int
    dietary_goal: DietaryGoalEnum
    illnesses: List[str]
    other_illness_details: str
    current_mood: Optional[str]
    current_craving: Optional[str]
    athlete: Optional[AthleteType]
    palate_profile: PalateProfileType
    feedback_count: int
    created_at: datetime
    updated_at: datetime

    @strawberry.field
    def is_athlete(self) -> bool:
        return self.athlete is not None


@strawberry.type
class SaveUserProfileResultType:
    profile: UserProfileType
    created: bool


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class AthleteInput:
    activity_type: Optional[str] = None
    workout_timing: WorkoutTimingEnum = WorkoutTimingEnum.GENERAL
    athletic_goal: Optional[str] = None
    training_phase: Optional[str] = None
    training_phase_goal: Optional[str] = None


@strawberry.input
class SaveUserProfileInput:
    """Input for saving the profile form."""

    user_id: str
    anthropometrics: AnthropometricsInput
    dietary_goal: DietaryGoalEnum = DietaryGoalEnum.WEIGHT_LOSS
    illnesses: List[str] = strawberry.field(default_factory=list)
    other_illness_details: str = ""
    current_mood: Optional[str] = None
    current_craving: Optional[str] = None
    athlete: Optional[AthleteInput] = None  # null for non-athletes
    reset_feedback: bool = False  # forget history and palate profile
