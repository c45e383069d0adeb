"""GetUserProfileQuery - retrieve a user's profile."""

from dataclasses import dataclass
from typing import Optional

from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)


@dataclass(frozen=True)
class GetUserProfileQuery:
    """Query to retrieve profile by user ID.

    Attributes:
        user_id: User identifier
    """

    user_id: str


class GetUserProfileQueryHandler:
    """Read-only access to profiles via repository."""

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, query: GetUserProfileQuery) -> Optional[UserProfile]:
        return await self._repository.find_by_user_id(query.user_id)
