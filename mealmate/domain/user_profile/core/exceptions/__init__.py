"""Domain exceptions for user profile."""

from .domain_errors import (
    InvalidUserProfileError,
    UserProfileDomainError,
    UserProfileNotFoundError,
)

__all__ = [
    "UserProfileDomainError",
    "InvalidUserProfileError",
    "UserProfileNotFoundError",
]
