"""GraphQL types for body metrics domain.

Unavailable metrics are returned as null so clients can hide them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import strawberry

__all__ = [
    "GenderEnum",
    "IdealWeightRangeType",
    "BodyMetricsType",
    "AnthropometricsInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class GenderEnum(str, Enum):
    """Gender for the BMR equation."""

    MALE = "male"
    FEMALE = "female"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class IdealWeightRangeType:
    """Healthy weight bounds (BMI 18.5-24.9) in kg."""

    lower: float
    upper: float

    @strawberry.field
    def label(self) -> str:
        return f"{self.lower} - {self.upper} kg"


@strawberry.type
class BodyMetricsType:
    """Dashboard metrics for one set of measurements."""

    bmi: Optional[float] = None  # unrounded
    bmi_category: Optional[str] = None
    bmr: Optional[float] = None  # kcal/day
    ideal_weight_range: Optional[IdealWeightRangeType] = None
    overweight_amount_kg: Optional[float] = None

    @strawberry.field
    def is_overweight(self) -> bool:
        return self.overweight_amount_kg is not None


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class AnthropometricsInput:
    """Body measurements input. Non-positive values yield null metrics."""

    gender: GenderEnum
    height_cm: float
    weight_kg: float
    age: int
