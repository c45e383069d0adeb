"""MongoDB implementation of IUserProfileRepository."""

from typing import Any, Dict, Optional

from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)

from ..mappers.user_profile_mapper import UserProfileMapper
from .base import MongoBaseRepository


class MongoUserProfileRepository(
    MongoBaseRepository[UserProfile],
    IUserProfileRepository,
):
    """MongoDB implementation of user profile repository.

    One document per user, ``_id`` is the user ID; saves replace the
    whole document (upsert).
    """

    @property
    def collection_name(self) -> str:
        return "user_profiles"

    def to_document(self, entity: UserProfile) -> Dict[str, Any]:
        return UserProfileMapper.to_document(entity)

    def from_document(self, doc: Dict[str, Any]) -> UserProfile:
        return UserProfileMapper.from_document(doc)

    async def save(self, profile: UserProfile) -> None:
        await self._replace_one({"_id": profile.user_id}, self.to_document(profile))

    async def find_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        doc = await self._find_one({"_id": user_id})
        return self.from_document(doc) if doc else None

    async def delete(self, user_id: str) -> bool:
        return await self._delete_one({"_id": user_id}) > 0

    async def exists(self, user_id: str) -> bool:
        return await self._count({"_id": user_id}) > 0
