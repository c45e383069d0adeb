"""Value objects for body metrics domain."""

from .anthropometrics import Anthropometrics
from .body_metrics_report import BodyMetricsReport
from .gender import Gender
from .ideal_weight_range import IdealWeightRange

__all__ = [
    "Gender",
    "Anthropometrics",
    "IdealWeightRange",
    "BodyMetricsReport",
]
