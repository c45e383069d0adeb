"""Event handlers that record domain events in the application log."""

import logging

from mealmate.domain.palate.core.events.palate_profile_updated import (
    PalateProfileUpdated,
)
from mealmate.domain.shared.ports.event_bus import IEventBus
from mealmate.domain.user_profile.core.events.user_profile_saved import (
    UserProfileSaved,
)

logger = logging.getLogger(__name__)


async def log_palate_profile_updated(event: PalateProfileUpdated) -> None:
    logger.info(
        "event.palate_profile_updated",
        extra={
            "event_id": event.event_id,
            "user_id": event.user_id,
            "preferred_aspects": list(event.preferred_aspects),
            "disliked_aspects": list(event.disliked_aspects),
            "history_length": event.history_length,
            "rating": event.rating,
        },
    )


async def log_user_profile_saved(event: UserProfileSaved) -> None:
    logger.info(
        "event.user_profile_saved",
        extra={
            "event_id": event.event_id,
            "user_id": event.user_id,
            "created": event.created,
            "feedback_reset": event.feedback_reset,
        },
    )


def register_log_subscribers(event_bus: IEventBus) -> None:
    """Subscribe the log handlers to every event the application publishes."""
    event_bus.subscribe(PalateProfileUpdated, log_palate_profile_updated)
    event_bus.subscribe(UserProfileSaved, log_user_profile_saved)
