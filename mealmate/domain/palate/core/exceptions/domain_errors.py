"""Domain exceptions for palate profile."""

from mealmate.domain.shared.errors import MealmateDomainError


class PalateDomainError(MealmateDomainError):
    """Base exception for palate domain errors."""

    pass


class InvalidFeedbackError(PalateDomainError):
    """Raised when a feedback submission fails validation."""

    pass


class EmptyFeedbackError(InvalidFeedbackError):
    """Raised when a feedback submission carries no signal at all."""

    def __init__(self) -> None:
        super().__init__(
            "Feedback must include a rating, an aspect or a comment"
        )


class PalateProfileConflictError(PalateDomainError):
    """Raised when an aspect is both preferred and disliked."""

    def __init__(self, aspects: tuple[str, ...]):
        super().__init__(
            f"Aspects cannot be both preferred and disliked: {', '.join(aspects)}"
        )
        self.aspects = aspects
