"""Shared test fixtures.

Unit tests use the in-memory repository and event bus only; nothing
here needs the FastAPI app or a running database.
"""

import pytest

from mealmate.domain.body_metrics.core.value_objects.anthropometrics import (
    Anthropometrics,
)
from mealmate.domain.body_metrics.core.value_objects.gender import Gender
from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.infrastructure.events.in_memory_bus import InMemoryEventBus
from mealmate.infrastructure.persistence.in_memory.user_profile_repository import (
    InMemoryUserProfileRepository,
)


@pytest.fixture
def anthropometrics() -> Anthropometrics:
    """Male, 170 cm, 70 kg, 30 years."""
    return Anthropometrics(gender=Gender.MALE, height_cm=170.0, weight_kg=70.0, age=30)


@pytest.fixture
def user_profile(anthropometrics: Anthropometrics) -> UserProfile:
    return UserProfile(user_id="user123", anthropometrics=anthropometrics)


@pytest.fixture
def repository() -> InMemoryUserProfileRepository:
    """Fixture providing clean in-memory repository."""
    return InMemoryUserProfileRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    """Fixture providing clean InMemoryEventBus."""
    return InMemoryEventBus()
