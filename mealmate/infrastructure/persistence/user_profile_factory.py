"""Factory for creating user profile repository instances."""

import logging
from typing import Optional

from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)
from mealmate.infrastructure.config import get_mongodb_uri, get_repository_backend
from mealmate.infrastructure.persistence.in_memory.user_profile_repository import (
    InMemoryUserProfileRepository,
)

logger = logging.getLogger(__name__)

# Singleton instance
_user_profile_repository: Optional[IUserProfileRepository] = None


def create_user_profile_repository() -> IUserProfileRepository:
    """
    Create user profile repository based on REPOSITORY_BACKEND.

    Environment Variables:
        REPOSITORY_BACKEND: 'inmemory' (default) or 'mongodb'
        MONGODB_URI: MongoDB connection URI (required if 'mongodb')

    Returns:
        IUserProfileRepository implementation

    Raises:
        ValueError: If REPOSITORY_BACKEND='mongodb' but MONGODB_URI not set
    """
    backend = get_repository_backend()

    if backend == "inmemory":
        return InMemoryUserProfileRepository()

    elif backend == "mongodb":
        if not get_mongodb_uri():
            raise ValueError("REPOSITORY_BACKEND='mongodb' requires MONGODB_URI env var")

        from mealmate.infrastructure.persistence.mongodb.user_profile_repository import (
            MongoUserProfileRepository,
        )

        return MongoUserProfileRepository()

    else:
        logger.warning(
            "Unknown repository backend, falling back to inmemory",
            extra={"backend": backend},
        )
        return InMemoryUserProfileRepository()


def get_user_profile_repository() -> IUserProfileRepository:
    """
    Get singleton user profile repository instance.

    Lazy initialization on first call.
    """
    global _user_profile_repository
    if _user_profile_repository is None:
        _user_profile_repository = create_user_profile_repository()
    return _user_profile_repository


def reset_user_profile_repository() -> None:
    """Reset singleton instance (test isolation)."""
    global _user_profile_repository
    _user_profile_repository = None
