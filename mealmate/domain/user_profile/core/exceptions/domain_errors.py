"""Domain exceptions for user profile."""

from mealmate.domain.shared.errors import MealmateDomainError


class UserProfileDomainError(MealmateDomainError):
    """Base exception for user profile domain errors."""

    pass


class InvalidUserProfileError(UserProfileDomainError):
    """Raised when user profile validation fails."""

    pass


class UserProfileNotFoundError(UserProfileDomainError):
    """Raised when no profile is stored for a user."""

    def __init__(self, user_id: str):
        super().__init__(f"User profile not found: {user_id}")
        self.user_id = user_id
