"""IUserProfileRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user_profile import UserProfile


class IUserProfileRepository(ABC):
    """Port for user profile persistence.

    The domain depends on this abstraction; loading before and storing
    after a palate update is the caller's job, not the fold's.
    """

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        """Save profile (create or update).

        Args:
            profile: Profile to save
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        """Find profile by user ID.

        Args:
            user_id: User identifier

        Returns:
            Optional[UserProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete profile.

        Args:
            user_id: User identifier

        Returns:
            bool: True if a profile was deleted
        """
        pass

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Check if profile exists for user."""
        pass
