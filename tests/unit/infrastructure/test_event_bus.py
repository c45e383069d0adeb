"""Unit tests for InMemoryEventBus.

Tests focus on:
- Handler subscription and unsubscription
- Event publishing to handlers in subscription order
- Error handling (failed handlers don't block others)
"""

from typing import List

import pytest

from mealmate.domain.palate.core.events.palate_profile_updated import (
    PalateProfileUpdated,
)
from mealmate.domain.palate.core.value_objects import PalateProfile
from mealmate.domain.user_profile.core.events.user_profile_saved import (
    UserProfileSaved,
)
from mealmate.infrastructure.events.in_memory_bus import InMemoryEventBus


@pytest.fixture
def palate_event() -> PalateProfileUpdated:
    return PalateProfileUpdated.create(
        user_id="user123",
        profile=PalateProfile(preferred_aspects=("مرغ",)),
        history_length=1,
        rating=5,
    )


class TestSubscribe:
    def test_subscribe_counts_handlers(self, event_bus: InMemoryEventBus) -> None:
        async def handler(event: PalateProfileUpdated) -> None:
            pass

        event_bus.subscribe(PalateProfileUpdated, handler)
        event_bus.subscribe(PalateProfileUpdated, handler)

        assert event_bus.get_handler_count(PalateProfileUpdated) == 2
        assert event_bus.get_handler_count(UserProfileSaved) == 0

    def test_unsubscribe(self, event_bus: InMemoryEventBus) -> None:
        async def handler(event: PalateProfileUpdated) -> None:
            pass

        event_bus.subscribe(PalateProfileUpdated, handler)

        assert event_bus.unsubscribe(PalateProfileUpdated, handler) is True
        assert event_bus.unsubscribe(PalateProfileUpdated, handler) is False
        assert event_bus.unsubscribe(UserProfileSaved, handler) is False

    def test_clear(self, event_bus: InMemoryEventBus) -> None:
        async def handler(event: PalateProfileUpdated) -> None:
            pass

        event_bus.subscribe(PalateProfileUpdated, handler)
        event_bus.clear()

        assert event_bus.get_handler_count(PalateProfileUpdated) == 0


class TestPublish:
    @pytest.mark.asyncio
    async def test_handlers_called_in_order(
        self, event_bus: InMemoryEventBus, palate_event: PalateProfileUpdated
    ) -> None:
        calls: List[str] = []

        async def first(event: PalateProfileUpdated) -> None:
            calls.append("first")

        async def second(event: PalateProfileUpdated) -> None:
            calls.append("second")

        event_bus.subscribe(PalateProfileUpdated, first)
        event_bus.subscribe(PalateProfileUpdated, second)

        await event_bus.publish(palate_event)

        assert calls == ["first", "second"]

    @pytest.mark.asyncio
    async def test_only_matching_type_receives_event(
        self, event_bus: InMemoryEventBus, palate_event: PalateProfileUpdated
    ) -> None:
        received: List[UserProfileSaved] = []

        async def handler(event: UserProfileSaved) -> None:
            received.append(event)

        event_bus.subscribe(UserProfileSaved, handler)

        await event_bus.publish(palate_event)

        assert received == []

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_block_others(
        self,
        event_bus: InMemoryEventBus,
        palate_event: PalateProfileUpdated,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        received: List[PalateProfileUpdated] = []

        async def failing(event: PalateProfileUpdated) -> None:
            raise RuntimeError("boom")

        async def working(event: PalateProfileUpdated) -> None:
            received.append(event)

        event_bus.subscribe(PalateProfileUpdated, failing)
        event_bus.subscribe(PalateProfileUpdated, working)

        await event_bus.publish(palate_event)

        assert received == [palate_event]
        assert "Event handler failed" in caplog.text

    @pytest.mark.asyncio
    async def test_publish_without_handlers(
        self, event_bus: InMemoryEventBus, palate_event: PalateProfileUpdated
    ) -> None:
        await event_bus.publish(palate_event)


class TestEvents:
    def test_palate_event_copies_profile(self, palate_event: PalateProfileUpdated) -> None:
        assert palate_event.preferred_aspects == ("مرغ",)
        assert palate_event.disliked_aspects == ()
        assert palate_event.occurred_at.tzinfo is not None

    def test_event_ids_unique(self) -> None:
        first = UserProfileSaved.create(user_id="u1", created=True)
        second = UserProfileSaved.create(user_id="u1", created=True)

        assert first.event_id != second.event_id
