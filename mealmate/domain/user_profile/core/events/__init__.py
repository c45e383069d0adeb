"""Domain events for user profile."""

from .user_profile_saved import UserProfileSaved

__all__ = [
    "UserProfileSaved",
]
