"""Unit tests for SaveUserProfileCommand and handler."""

from unittest.mock import AsyncMock

import pytest

from mealmate.application.user_profile.commands.save_profile import (
    SaveUserProfileCommand,
    SaveUserProfileHandler,
)
from mealmate.domain.body_metrics.core.value_objects import Anthropometrics, Gender
from mealmate.domain.meal_planning.vocabulary import DietaryGoal
from mealmate.domain.palate.core.value_objects import MealFeedback
from mealmate.domain.user_profile.core.events.user_profile_saved import (
    UserProfileSaved,
)
from mealmate.domain.user_profile.core.exceptions.domain_errors import (
    InvalidUserProfileError,
)


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def handler(repository, mock_event_bus) -> SaveUserProfileHandler:
    """Create handler with in-memory repository and mock bus."""
    return SaveUserProfileHandler(repository=repository, event_bus=mock_event_bus)


@pytest.fixture
def sample_command(anthropometrics) -> SaveUserProfileCommand:
    return SaveUserProfileCommand(
        user_id="user123",
        anthropometrics=anthropometrics,
        dietary_goal=DietaryGoal.MAINTENANCE,
        illnesses=("دیابت",),
        current_mood="خسته",
    )


@pytest.mark.asyncio
async def test_save_creates_profile(handler, repository, sample_command, mock_event_bus):
    result = await handler.handle(sample_command)

    assert result.created is True
    stored = await repository.find_by_user_id("user123")
    assert stored is not None
    assert stored.dietary_goal == DietaryGoal.MAINTENANCE
    assert stored.illnesses == ("دیابت",)
    assert stored.current_mood == "خسته"

    mock_event_bus.publish.assert_called_once()
    event = mock_event_bus.publish.call_args[0][0]
    assert isinstance(event, UserProfileSaved)
    assert event.created is True
    assert event.feedback_reset is False


@pytest.mark.asyncio
async def test_save_updates_and_keeps_palate_profile(
    handler, repository, user_profile, sample_command
):
    user_profile.apply_feedback(MealFeedback(liked_aspects=("مرغ",)))
    await repository.save(user_profile)

    result = await handler.handle(sample_command)

    assert result.created is False
    stored = await repository.find_by_user_id("user123")
    assert stored.dietary_goal == DietaryGoal.MAINTENANCE
    assert stored.palate_profile.preferred_aspects == ("مرغ",)
    assert len(stored.feedback_history) == 1


@pytest.mark.asyncio
async def test_save_with_reset_feedback(
    handler, repository, user_profile, anthropometrics, mock_event_bus
):
    user_profile.apply_feedback(MealFeedback(liked_aspects=("مرغ",)))
    await repository.save(user_profile)

    await handler.handle(
        SaveUserProfileCommand(
            user_id="user123", anthropometrics=anthropometrics, reset_feedback=True
        )
    )

    stored = await repository.find_by_user_id("user123")
    assert stored.palate_profile.is_empty()
    assert len(stored.feedback_history) == 0
    event = mock_event_bus.publish.call_args[0][0]
    assert event.feedback_reset is True


@pytest.mark.asyncio
async def test_reset_flag_on_new_profile_is_not_reported(handler, anthropometrics, mock_event_bus):
    await handler.handle(
        SaveUserProfileCommand(
            user_id="new-user", anthropometrics=anthropometrics, reset_feedback=True
        )
    )

    event = mock_event_bus.publish.call_args[0][0]
    assert event.created is True
    assert event.feedback_reset is False


@pytest.mark.asyncio
async def test_save_without_event_bus(repository):
    handler = SaveUserProfileHandler(repository=repository)
    body = Anthropometrics(gender=Gender.FEMALE, height_cm=160, weight_kg=55, age=25)

    result = await handler.handle(SaveUserProfileCommand(user_id="u1", anthropometrics=body))

    assert result.profile.anthropometrics == body


@pytest.mark.asyncio
async def test_save_empty_user_id_rejected(handler, repository, anthropometrics):
    with pytest.raises(InvalidUserProfileError):
        await handler.handle(SaveUserProfileCommand(user_id="", anthropometrics=anthropometrics))

    assert repository.count() == 0
