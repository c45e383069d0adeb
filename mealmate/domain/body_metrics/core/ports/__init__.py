"""Ports for body metrics domain."""

from .calculators import IBodyMetricsCalculator

__all__ = [
    "IBodyMetricsCalculator",
]
