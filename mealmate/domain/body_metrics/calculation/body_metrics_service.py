"""BodyMetricsService - composes the dashboard metrics."""

from typing import Optional

from ..core.ports.calculators import IBodyMetricsCalculator
from ..core.value_objects.anthropometrics import Anthropometrics
from ..core.value_objects.body_metrics_report import BodyMetricsReport
from .formulas import (
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_ideal_weight_range,
    calculate_overweight_amount,
    is_overweight,
)


class BodyMetricsService(IBodyMetricsCalculator):
    """Calculate every body metric shown on the user dashboard.

    The overweight amount is only reported when BMI and the ideal
    range are both available and BMI is above 24.9.
    """

    def report(self, anthropometrics: Anthropometrics) -> BodyMetricsReport:
        """Compute the metrics report.

        Example:
            >>> service = BodyMetricsService()
            >>> data = Anthropometrics(
            ...     gender=Gender.MALE, height_cm=170, weight_kg=90, age=30
            ... )
            >>> service.report(data).overweight_amount_kg
            18.0
        """
        bmi = calculate_bmi(anthropometrics.height_cm, anthropometrics.weight_kg)
        bmr = calculate_bmr(
            anthropometrics.gender,
            anthropometrics.weight_kg,
            anthropometrics.height_cm,
            anthropometrics.age,
        )
        ideal_range = calculate_ideal_weight_range(anthropometrics.height_cm)

        overweight_amount: Optional[float] = None
        if ideal_range is not None and is_overweight(bmi):
            overweight_amount = calculate_overweight_amount(
                anthropometrics.weight_kg, ideal_range.upper
            )

        return BodyMetricsReport(
            bmi=bmi,
            bmi_category=bmi_category(bmi),
            bmr=bmr,
            ideal_weight_range=ideal_range,
            overweight_amount_kg=overweight_amount,
        )
