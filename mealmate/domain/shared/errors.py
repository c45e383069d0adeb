"""Root of the domain exception hierarchy."""


class MealmateDomainError(Exception):
    """Base exception for all mealmate domain errors."""

    pass
