"""BodyMetricsReport value object - dashboard metrics bundle."""

from dataclasses import dataclass
from typing import Optional

from .ideal_weight_range import IdealWeightRange


@dataclass(frozen=True)
class BodyMetricsReport:
    """All body metrics computed for one set of measurements.

    Every field is optional: ``None`` means the metric is unavailable
    (invalid input, or not applicable such as overweight amount for a
    person within the healthy range). Callers hide unavailable metrics.

    Attributes:
        bmi: Body Mass Index (unrounded)
        bmi_category: underweight / normal / overweight / obese_class_1-3
        bmr: Basal Metabolic Rate in kcal/day
        ideal_weight_range: Healthy weight bounds in kg
        overweight_amount_kg: Kilograms above the ideal upper bound
    """

    bmi: Optional[float] = None
    bmi_category: Optional[str] = None
    bmr: Optional[float] = None
    ideal_weight_range: Optional[IdealWeightRange] = None
    overweight_amount_kg: Optional[float] = None

    @property
    def is_overweight(self) -> bool:
        return self.overweight_amount_kg is not None
