"""MongoDB persistence adapters."""

from .base import MongoBaseRepository
from .user_profile_repository import MongoUserProfileRepository

__all__ = [
    "MongoBaseRepository",
    "MongoUserProfileRepository",
]
