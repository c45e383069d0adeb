"""Body metrics formulas.

Pure functions, safe to call from any thread or task. Invalid input
(any measurement <= 0) yields ``None`` instead of raising, so callers
can hide the corresponding metric.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..core.value_objects.gender import Gender
from ..core.value_objects.ideal_weight_range import IdealWeightRange

HEALTHY_BMI_LOWER = 18.5
HEALTHY_BMI_UPPER = 24.9

_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    """Round to one decimal, halves away from zero.

    Works on the exact binary value of the float (like fixed-point
    formatting does), not on its shortest repr.

    Example:
        >>> round_one_decimal(53.465)
        53.5
        >>> round_one_decimal(0.25)
        0.3
    """
    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def calculate_bmi(height_cm: float, weight_kg: float) -> Optional[float]:
    """Calculate Body Mass Index.

    Formula:
        BMI = weight (kg) / (height (m))^2

    Args:
        height_cm: Height in centimeters
        weight_kg: Weight in kilograms

    Returns:
        Optional[float]: Unrounded BMI, None if either input is <= 0

    Example:
        >>> round(calculate_bmi(170, 70), 2)
        24.22
    """
    if height_cm <= 0 or weight_kg <= 0:
        return None
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def calculate_bmr(
    gender: Union[Gender, str],
    weight_kg: float,
    height_cm: float,
    age: float,
) -> Optional[float]:
    """Calculate Basal Metabolic Rate with the Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.

    Returns:
        Optional[float]: BMR in kcal/day, None if any input is <= 0

    Example:
        >>> calculate_bmr(Gender.MALE, 70, 170, 30)
        1617.5
    """
    if weight_kg <= 0 or height_cm <= 0 or age <= 0:
        return None

    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + Gender(gender).bmr_constant()


def calculate_ideal_weight_range(height_cm: float) -> Optional[IdealWeightRange]:
    """Calculate the healthy weight range for a height.

    Bounds are the weights giving BMI 18.5 and 24.9, each rounded to
    one decimal.

    Returns:
        Optional[IdealWeightRange]: Bounds in kg, None if height <= 0

    Example:
        >>> calculate_ideal_weight_range(170)
        IdealWeightRange(lower=53.5, upper=72.0)
    """
    if height_cm <= 0:
        return None

    height_m = height_cm / 100
    height_m_squared = height_m * height_m

    return IdealWeightRange(
        lower=round_one_decimal(HEALTHY_BMI_LOWER * height_m_squared),
        upper=round_one_decimal(HEALTHY_BMI_UPPER * height_m_squared),
    )


def is_overweight(bmi: Optional[float]) -> bool:
    """A person is overweight iff BMI > 24.9."""
    return bmi is not None and bmi > HEALTHY_BMI_UPPER


def calculate_overweight_amount(
    weight_kg: float, ideal_upper_kg: float
) -> Optional[float]:
    """Kilograms above the ideal upper bound.

    Returns:
        Optional[float]: Excess weight rounded to one decimal, None when
        the weight does not exceed the bound (never negative)

    Example:
        >>> calculate_overweight_amount(90, 72.0)
        18.0
        >>> calculate_overweight_amount(70, 72.0) is None
        True
    """
    excess = weight_kg - ideal_upper_kg
    if excess <= 0:
        return None
    return round_one_decimal(excess)


def bmi_category(bmi: Optional[float]) -> Optional[str]:
    """Get BMI category classification.

    The normal band ends at ``HEALTHY_BMI_UPPER``, so a BMI that counts
    as overweight is never reported as normal.

    Returns:
        Optional[str]: underweight, normal, overweight, obese_class_1,
        obese_class_2 or obese_class_3; None when BMI is unavailable
    """
    if bmi is None:
        return None
    if bmi < HEALTHY_BMI_LOWER:
        return "underweight"
    elif bmi < HEALTHY_BMI_UPPER:
        return "normal"
    elif bmi < 29.9:
        return "overweight"
    elif bmi < 34.9:
        return "obese_class_1"
    elif bmi < 39.9:
        return "obese_class_2"
    else:
        return "obese_class_3"
