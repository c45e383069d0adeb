"""PalateProfileUpdated domain event."""

from dataclasses import dataclass
from typing import Optional

from mealmate.domain.shared.events import DomainEvent

from ..value_objects.palate_profile import PalateProfile


@dataclass(frozen=True)
class PalateProfileUpdated(DomainEvent):
    """Event emitted after a feedback submission is folded in.

    Attributes:
        user_id: Owner of the palate profile
        preferred_aspects: Preferred aspects after the update
        disliked_aspects: Disliked aspects after the update
        history_length: Feedback history size after the update
        rating: Rating of the submitted feedback, if any
    """

    user_id: str
    preferred_aspects: tuple[str, ...]
    disliked_aspects: tuple[str, ...]
    history_length: int
    rating: Optional[int] = None

    @staticmethod
    def create(
        user_id: str,
        profile: PalateProfile,
        history_length: int,
        rating: Optional[int] = None,
    ) -> "PalateProfileUpdated":
        """Factory method to create event."""
        return PalateProfileUpdated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            user_id=user_id,
            preferred_aspects=profile.preferred_aspects,
            disliked_aspects=profile.disliked_aspects,
            history_length=history_length,
            rating=rating,
        )
