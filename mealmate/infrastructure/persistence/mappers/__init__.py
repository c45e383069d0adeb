"""Document mappers for persistence adapters."""

from .user_profile_mapper import UserProfileMapper

__all__ = [
    "UserProfileMapper",
]
