"""Integration tests for MongoUserProfileRepository.

Requires REPOSITORY_BACKEND=mongodb and MONGODB_URI in the environment.
"""

import os

import pytest
import pytest_asyncio

from mealmate.domain.body_metrics.core.value_objects import Anthropometrics, Gender
from mealmate.domain.palate.core.value_objects import MealFeedback
from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.infrastructure.persistence.mongodb.user_profile_repository import (
    MongoUserProfileRepository,
)

pytestmark = pytest.mark.skipif(
    os.getenv("REPOSITORY_BACKEND") != "mongodb",
    reason="MongoDB integration tests require REPOSITORY_BACKEND=mongodb",
)


@pytest_asyncio.fixture
async def mongo_repo():
    repo = MongoUserProfileRepository()
    yield repo
    await repo.collection.delete_many({"_id": {"$regex": "^test_user_"}})
    await repo.close()


@pytest.mark.asyncio
class TestMongoUserProfileRepository:
    async def test_save_find_delete(self, mongo_repo):
        profile = UserProfile(
            user_id="test_user_001",
            anthropometrics=Anthropometrics(
                gender=Gender.FEMALE, height_cm=165.0, weight_kg=60.0, age=28
            ),
        )
        profile.apply_feedback(MealFeedback(rating=4, liked_aspects=("مرغ",)))

        await mongo_repo.save(profile)
        found = await mongo_repo.find_by_user_id("test_user_001")

        assert found is not None
        assert found.palate_profile.preferred_aspects == ("مرغ",)
        assert await mongo_repo.exists("test_user_001")
        assert await mongo_repo.delete("test_user_001")
        assert await mongo_repo.find_by_user_id("test_user_001") is None
