"""Calculation services for body metrics."""

from .body_metrics_service import BodyMetricsService
from .formulas import (
    HEALTHY_BMI_LOWER,
    HEALTHY_BMI_UPPER,
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_ideal_weight_range,
    calculate_overweight_amount,
    is_overweight,
    round_one_decimal,
)

__all__ = [
    "BodyMetricsService",
    "HEALTHY_BMI_LOWER",
    "HEALTHY_BMI_UPPER",
    "bmi_category",
    "calculate_bmi",
    "calculate_bmr",
    "calculate_ideal_weight_range",
    "calculate_overweight_amount",
    "is_overweight",
    "round_one_decimal",
]
