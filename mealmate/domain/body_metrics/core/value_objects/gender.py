"""Gender value object - selects the Mifflin-St Jeor constant."""

from enum import Enum


class Gender(str, Enum):
    """Gender used by the BMR equation.

    - MALE: +5 kcal constant
    - FEMALE: -161 kcal constant
    """

    MALE = "male"
    FEMALE = "female"

    def bmr_constant(self) -> float:
        """Get the sex-specific constant of the Mifflin-St Jeor equation.

        Example:
            >>> Gender.FEMALE.bmr_constant()
            -161.0
        """
        constants = {
            Gender.MALE: 5.0,
            Gender.FEMALE: -161.0,
        }
        return constants[self]
