"""Calculator port - interface for body metrics computation."""

from abc import ABC, abstractmethod

from ..value_objects.anthropometrics import Anthropometrics
from ..value_objects.body_metrics_report import BodyMetricsReport


class IBodyMetricsCalculator(ABC):
    """Port for body metrics calculation.

    Produces BMI, BMR, ideal weight range and overweight amount
    from a set of anthropometric measurements.
    """

    @abstractmethod
    def report(self, anthropometrics: Anthropometrics) -> BodyMetricsReport:
        """Compute the full metrics report.

        Args:
            anthropometrics: Body measurements

        Returns:
            BodyMetricsReport: Metrics, unavailable ones set to None
        """
        pass
