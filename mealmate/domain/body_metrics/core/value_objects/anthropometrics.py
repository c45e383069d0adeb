"""Anthropometrics value object - raw body measurements."""

from dataclasses import dataclass

from .gender import Gender


@dataclass(frozen=True)
class Anthropometrics:
    """Body measurements supplied by the user.

    No range validation happens here: calculators treat non-positive
    values as "unavailable" instead of rejecting the record.

    Attributes:
        gender: Gender for the BMR equation
        height_cm: Height in centimeters
        weight_kg: Body weight in kilograms
        age: Age in years
    """

    gender: Gender
    height_cm: float
    weight_kg: float
    age: int

    @property
    def height_m(self) -> float:
        return self.height_cm / 100
