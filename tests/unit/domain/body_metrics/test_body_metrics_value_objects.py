"""Unit tests for body metrics value objects."""

import pytest

from mealmate.domain.body_metrics.core.value_objects import (
    Anthropometrics,
    BodyMetricsReport,
    Gender,
    IdealWeightRange,
)


class TestGender:
    def test_bmr_constants(self):
        assert Gender.MALE.bmr_constant() == 5.0
        assert Gender.FEMALE.bmr_constant() == -161.0

    def test_from_value(self):
        assert Gender("female") is Gender.FEMALE

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            Gender("other")


class TestIdealWeightRange:
    def test_contains(self):
        ideal = IdealWeightRange(lower=53.5, upper=72.0)

        assert ideal.contains(53.5)
        assert ideal.contains(72.0)
        assert not ideal.contains(72.1)

    def test_str(self):
        assert str(IdealWeightRange(lower=53.5, upper=72.0)) == "53.5 - 72.0 kg"

    def test_lower_above_upper_rejected(self):
        with pytest.raises(ValueError, match="exceeds upper bound"):
            IdealWeightRange(lower=80.0, upper=70.0)

    def test_immutable(self):
        ideal = IdealWeightRange(lower=53.5, upper=72.0)

        with pytest.raises(AttributeError):
            ideal.lower = 50.0  # type: ignore[misc]


class TestAnthropometrics:
    def test_height_m(self):
        data = Anthropometrics(gender=Gender.MALE, height_cm=180, weight_kg=80, age=40)

        assert data.height_m == 1.8

    def test_non_positive_values_accepted(self):
        data = Anthropometrics(gender=Gender.MALE, height_cm=0, weight_kg=-1, age=0)

        assert data.height_cm == 0


class TestBodyMetricsReport:
    def test_defaults_are_unavailable(self):
        report = BodyMetricsReport()

        assert report.bmi is None
        assert report.bmr is None
        assert report.ideal_weight_range is None
        assert report.is_overweight is False
