"""Unit tests for SubmitMealFeedbackCommand and handler."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from mealmate.application.palate.commands.submit_feedback import (
    SubmitMealFeedbackCommand,
    SubmitMealFeedbackHandler,
)
from mealmate.domain.palate.core.events.palate_profile_updated import (
    PalateProfileUpdated,
)
from mealmate.domain.palate.core.exceptions.domain_errors import (
    EmptyFeedbackError,
    InvalidFeedbackError,
)
from mealmate.domain.palate.core.value_objects import MealFeedback
from mealmate.domain.user_profile.core.exceptions.domain_errors import (
    UserProfileNotFoundError,
)
from mealmate.infrastructure.persistence.in_memory.user_profile_repository import (
    InMemoryUserProfileRepository,
)


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def handler(repository, mock_event_bus) -> SubmitMealFeedbackHandler:
    return SubmitMealFeedbackHandler(repository=repository, event_bus=mock_event_bus)


@pytest.mark.asyncio
async def test_submit_feedback_updates_profile(handler, repository, user_profile, mock_event_bus):
    await repository.save(user_profile)
    command = SubmitMealFeedbackCommand(
        user_id="user123",
        feedback=MealFeedback(
            rating=4, liked_aspects=("طعم تند",), improvement_aspects=("بافت نرم",)
        ),
    )

    result = await handler.handle(command)

    assert result.update.profile.preferred_aspects == ("طعم تند",)
    assert result.update.profile.disliked_aspects == ("بافت نرم",)

    stored = await repository.find_by_user_id("user123")
    assert stored.palate_profile == result.update.profile
    assert len(stored.feedback_history) == 1

    event = mock_event_bus.publish.call_args[0][0]
    assert isinstance(event, PalateProfileUpdated)
    assert event.user_id == "user123"
    assert event.history_length == 1
    assert event.rating == 4


@pytest.mark.asyncio
async def test_sixth_submission_drops_oldest(handler, repository, user_profile):
    await repository.save(user_profile)

    for i in range(6):
        await handler.handle(
            SubmitMealFeedbackCommand(
                user_id="user123",
                feedback=MealFeedback(rating=3, other_comments=f"meal {i}"),
            )
        )

    stored = await repository.find_by_user_id("user123")
    assert [f.other_comments for f in stored.feedback_history] == [
        "meal 1", "meal 2", "meal 3", "meal 4", "meal 5",
    ]


@pytest.mark.asyncio
async def test_empty_feedback_rejected(handler, repository, user_profile, mock_event_bus):
    await repository.save(user_profile)

    with pytest.raises(EmptyFeedbackError):
        await handler.handle(SubmitMealFeedbackCommand(user_id="user123", feedback=MealFeedback()))

    mock_event_bus.publish.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, 6])
async def test_out_of_range_rating_rejected(handler, repository, user_profile, rating):
    await repository.save(user_profile)

    with pytest.raises(InvalidFeedbackError, match="Rating must be 1-5"):
        await handler.handle(
            SubmitMealFeedbackCommand(user_id="user123", feedback=MealFeedback(rating=rating))
        )

    stored = await repository.find_by_user_id("user123")
    assert len(stored.feedback_history) == 0


@pytest.mark.asyncio
async def test_unknown_user(handler):
    with pytest.raises(UserProfileNotFoundError) as exc_info:
        await handler.handle(
            SubmitMealFeedbackCommand(user_id="ghost", feedback=MealFeedback(rating=5))
        )

    assert exc_info.value.user_id == "ghost"


@pytest.mark.asyncio
async def test_repository_error_propagates(user_profile):
    repository = AsyncMock()
    repository.find_by_user_id.return_value = user_profile
    repository.save.side_effect = RuntimeError("store down")
    handler = SubmitMealFeedbackHandler(repository=repository)

    with pytest.raises(RuntimeError, match="store down"):
        await handler.handle(
            SubmitMealFeedbackCommand(user_id="user123", feedback=MealFeedback(rating=5))
        )


class YieldingUserProfileRepository(InMemoryUserProfileRepository):
    """In-memory store that yields to the event loop on every load, like a driver."""

    async def find_by_user_id(self, user_id):
        await asyncio.sleep(0)
        return await super().find_by_user_id(user_id)


@pytest.mark.asyncio
async def test_concurrent_submissions_for_one_user_are_all_kept(user_profile):
    repository = YieldingUserProfileRepository()
    await repository.save(user_profile)

    await asyncio.gather(
        SubmitMealFeedbackHandler(repository=repository).handle(
            SubmitMealFeedbackCommand(
                user_id="user123", feedback=MealFeedback(liked_aspects=("a",))
            )
        ),
        SubmitMealFeedbackHandler(repository=repository).handle(
            SubmitMealFeedbackCommand(
                user_id="user123", feedback=MealFeedback(liked_aspects=("b",))
            )
        ),
    )

    stored = await repository.find_by_user_id("user123")
    assert len(stored.feedback_history) == 2
    assert stored.palate_profile.preferred_aspects == ("a", "b")
