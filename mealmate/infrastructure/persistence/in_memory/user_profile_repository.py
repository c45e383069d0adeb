"""In-memory implementation of IUserProfileRepository."""

from copy import deepcopy
from typing import Optional

from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)


class InMemoryUserProfileRepository(IUserProfileRepository):
    """
    In-memory implementation of user profile repository.

    Profiles are keyed by user ID and deep-copied on the way in and out,
    so callers never alias stored state. Data is lost when the
    application stops.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}

    async def save(self, profile: UserProfile) -> None:
        self._profiles[profile.user_id] = deepcopy(profile)

    async def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        profile = self._profiles.get(user_id)
        return deepcopy(profile) if profile else None

    async def delete(self, user_id: str) -> bool:
        return self._profiles.pop(user_id, None) is not None

    async def exists(self, user_id: str) -> bool:
        return user_id in self._profiles

    def clear(self) -> None:
        """Clear all profiles from memory (test cleanup)."""
        self._profiles.clear()

    def count(self) -> int:
        return len(self._profiles)
