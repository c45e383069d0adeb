"""IdealWeightRange value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdealWeightRange:
    """Healthy weight bounds (BMI 18.5 - 24.9) for a given height.

    Attributes:
        lower: Lower bound in kg, one decimal
        upper: Upper bound in kg, one decimal
    """

    lower: float
    upper: float

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(
                f"Lower bound {self.lower} exceeds upper bound {self.upper}"
            )

    def contains(self, weight_kg: float) -> bool:
        return self.lower <= weight_kg <= self.upper

    def __str__(self) -> str:
        return f"{self.lower:.1f} - {self.upper:.1f} kg"
