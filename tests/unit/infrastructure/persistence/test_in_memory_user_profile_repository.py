"""Unit tests for InMemoryUserProfileRepository."""

import pytest

from mealmate.domain.palate.core.value_objects import MealFeedback
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)
from mealmate.infrastructure.persistence.in_memory.user_profile_repository import (
    InMemoryUserProfileRepository,
)


class TestInMemoryUserProfileRepository:
    def test_implements_port(self, repository) -> None:
        assert isinstance(repository, IUserProfileRepository)

    @pytest.mark.asyncio
    async def test_save_and_find(self, repository, user_profile) -> None:
        await repository.save(user_profile)

        found = await repository.find_by_user_id("user123")

        assert found is not None
        assert found.user_id == "user123"
        assert found.anthropometrics == user_profile.anthropometrics

    @pytest.mark.asyncio
    async def test_find_missing(self, repository) -> None:
        assert await repository.find_by_user_id("ghost") is None

    @pytest.mark.asyncio
    async def test_stored_copy_is_isolated(self, repository, user_profile) -> None:
        await repository.save(user_profile)

        user_profile.apply_feedback(MealFeedback(liked_aspects=("مرغ",)))
        loaded = await repository.find_by_user_id("user123")
        loaded.reset_feedback()

        again = await repository.find_by_user_id("user123")
        assert again.palate_profile.is_empty()
        assert len(again.feedback_history) == 0

    @pytest.mark.asyncio
    async def test_save_replaces(self, repository, user_profile) -> None:
        await repository.save(user_profile)
        user_profile.apply_feedback(MealFeedback(liked_aspects=("مرغ",)))
        await repository.save(user_profile)

        found = await repository.find_by_user_id("user123")

        assert found.palate_profile.preferred_aspects == ("مرغ",)
        assert repository.count() == 1

    @pytest.mark.asyncio
    async def test_exists_and_delete(self, repository, user_profile) -> None:
        await repository.save(user_profile)

        assert await repository.exists("user123")
        assert await repository.delete("user123") is True
        assert await repository.delete("user123") is False
        assert not await repository.exists("user123")

    @pytest.mark.asyncio
    async def test_clear(self, user_profile) -> None:
        repository = InMemoryUserProfileRepository()
        await repository.save(user_profile)

        repository.clear()

        assert repository.count() == 0
