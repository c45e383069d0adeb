"""UserProfileSaved domain event."""

from dataclasses import dataclass

from mealmate.domain.shared.events import DomainEvent


@dataclass(frozen=True)
class UserProfileSaved(DomainEvent):
    """Event emitted when a user submits the profile form.

    Attributes:
        user_id: Profile owner
        created: True for a new profile, False for an update
        feedback_reset: Whether history and palate profile were cleared
    """

    user_id: str
    created: bool
    feedback_reset: bool = False

    @staticmethod
    def create(
        user_id: str, created: bool, feedback_reset: bool = False
    ) -> "UserProfileSaved":
        """Factory method to create event."""
        return UserProfileSaved(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            user_id=user_id,
            created=created,
            feedback_reset=feedback_reset,
        )
