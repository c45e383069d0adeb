"""Unit tests for body metrics formulas."""

import math

import pytest

from mealmate.domain.body_metrics.calculation.formulas import (
    bmi_category,
    calculate_bmi,
    calculate_bmr,
    calculate_ideal_weight_range,
    calculate_overweight_amount,
    is_overweight,
    round_one_decimal,
)
from mealmate.domain.body_metrics.core.value_objects import Gender, IdealWeightRange


class TestCalculateBMI:
    """Test BMI = weight / height_m^2."""

    def test_bmi_reference_value(self):
        assert round(calculate_bmi(170, 70), 2) == 24.22

    def test_bmi_is_unrounded(self):
        assert calculate_bmi(170, 70) == pytest.approx(70 / (1.7 * 1.7))

    @pytest.mark.parametrize(
        "height_cm,weight_kg",
        [(0, 70), (170, 0), (-170, 70), (170, -5)],
    )
    def test_bmi_unavailable_for_non_positive_input(self, height_cm, weight_kg):
        assert calculate_bmi(height_cm, weight_kg) is None


class TestCalculateBMR:
    """Test BMR calculation using Mifflin-St Jeor formula."""

    def test_bmr_male(self):
        # 10*70 + 6.25*170 - 5*30 + 5
        assert calculate_bmr(Gender.MALE, 70, 170, 30) == 1617.5

    def test_bmr_female(self):
        # 10*70 + 6.25*170 - 5*30 - 161
        assert calculate_bmr(Gender.FEMALE, 70, 170, 30) == 1451.5

    def test_bmr_accepts_gender_value(self):
        assert calculate_bmr("female", 70, 170, 30) == 1451.5

    def test_female_is_166_lower_than_male(self):
        for weight, height, age in [(55, 160, 22), (90, 185, 47), (70.5, 172.3, 61)]:
            male = calculate_bmr(Gender.MALE, weight, height, age)
            female = calculate_bmr(Gender.FEMALE, weight, height, age)
            assert male - female == pytest.approx(166.0)

    @pytest.mark.parametrize(
        "weight_kg,height_cm,age",
        [(0, 170, 30), (70, 0, 30), (70, 170, 0), (-1, 170, 30)],
    )
    def test_bmr_unavailable_for_non_positive_input(self, weight_kg, height_cm, age):
        assert calculate_bmr(Gender.MALE, weight_kg, height_cm, age) is None


class TestIdealWeightRange:
    def test_reference_height(self):
        assert calculate_ideal_weight_range(170) == IdealWeightRange(lower=53.5, upper=72.0)

    def test_bounds_have_one_decimal(self):
        ideal = calculate_ideal_weight_range(183.4)

        assert ideal is not None
        assert ideal.lower == round_one_decimal(ideal.lower)
        assert ideal.upper == round_one_decimal(ideal.upper)
        assert ideal.lower < ideal.upper

    @pytest.mark.parametrize("height_cm", [0, -150])
    def test_unavailable_for_non_positive_height(self, height_cm):
        assert calculate_ideal_weight_range(height_cm) is None


class TestOverweight:
    def test_threshold_is_exclusive(self):
        assert is_overweight(24.9) is False
        assert is_overweight(24.91) is True

    def test_unavailable_bmi_is_not_overweight(self):
        assert is_overweight(None) is False

    def test_overweight_amount(self):
        assert calculate_overweight_amount(90, 72.0) == 18.0

    def test_overweight_amount_rounded(self):
        assert calculate_overweight_amount(80.26, 72.0) == 8.3

    @pytest.mark.parametrize("weight_kg", [70, 72.0])
    def test_no_amount_within_range(self, weight_kg):
        assert calculate_overweight_amount(weight_kg, 72.0) is None


class TestRoundOneDecimal:
    def test_halves_round_away_from_zero(self):
        assert round_one_decimal(0.25) == 0.3
        assert round_one_decimal(-0.25) == -0.3

    def test_rounds_exact_binary_value(self):
        # 0.35 is stored slightly below the half
        assert round_one_decimal(0.35) == 0.3

    def test_never_nan(self):
        assert not math.isnan(round_one_decimal(53.465))


class TestBMICategory:
    @pytest.mark.parametrize(
        "bmi,expected",
        [
            (17.0, "underweight"),
            (18.5, "normal"),
            (24.89, "normal"),
            (24.9, "overweight"),
            (29.89, "overweight"),
            (29.9, "obese_class_1"),
            (34.9, "obese_class_2"),
            (39.9, "obese_class_3"),
            (None, None),
        ],
    )
    def test_category(self, bmi, expected):
        assert bmi_category(bmi) == expected

    def test_overweight_bmi_is_never_normal(self):
        bmi = calculate_bmi(170, 72.1)

        assert 24.9 < bmi < 25.0
        assert is_overweight(bmi) is True
        assert bmi_category(bmi) == "overweight"
