"""SubmitMealFeedbackCommand - learn from feedback on a meal suggestion."""

import logging
from dataclasses import dataclass
from typing import Optional

from mealmate.application.shared.profile_locks import ProfileLocks, profile_locks
from mealmate.domain.palate.core.events.palate_profile_updated import (
    PalateProfileUpdated,
)
from mealmate.domain.palate.core.exceptions.domain_errors import (
    EmptyFeedbackError,
    InvalidFeedbackError,
)
from mealmate.domain.palate.core.value_objects.meal_feedback import (
    MAX_RATING,
    MIN_RATING,
    MealFeedback,
)
from mealmate.domain.palate.services.palate_profile_updater import PalateUpdate
from mealmate.domain.shared.ports.event_bus import IEventBus
from mealmate.domain.user_profile.core.exceptions.domain_errors import (
    UserProfileNotFoundError,
)
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitMealFeedbackCommand:
    """Command to submit feedback on the last meal suggestion.

    Attributes:
        user_id: User giving feedback
        feedback: Feedback event
    """

    user_id: str
    feedback: MealFeedback


@dataclass(frozen=True)
class SubmitMealFeedbackResult:
    """Result of a feedback submission.

    Attributes:
        user_id: User the update belongs to
        update: New palate profile and feedback history
    """

    user_id: str
    update: PalateUpdate


class SubmitMealFeedbackHandler:
    """Handler for SubmitMealFeedbackCommand.

    Flow:
    1. Validate the submission (not empty, rating 1-5)
    2. Under the user's lock: load the profile, fold the feedback into
       history and palate profile, persist
    3. Publish PalateProfileUpdated
    """

    def __init__(
        self,
        repository: IUserProfileRepository,
        event_bus: Optional[IEventBus] = None,
        locks: Optional[ProfileLocks] = None,
    ):
        self._repository = repository
        self._event_bus = event_bus
        self._locks = locks if locks is not None else profile_locks

    async def handle(
        self, command: SubmitMealFeedbackCommand
    ) -> SubmitMealFeedbackResult:
        """
        Handle feedback submission.

        Args:
            command: SubmitMealFeedbackCommand with user ID and feedback

        Returns:
            SubmitMealFeedbackResult with the new palate profile and history

        Raises:
            EmptyFeedbackError: If no rating, aspect or comment is given
            InvalidFeedbackError: If rating is outside 1-5
            UserProfileNotFoundError: If the user has no profile
        """
        feedback = command.feedback
        if feedback.is_empty():
            raise EmptyFeedbackError()
        if not feedback.has_valid_rating():
            raise InvalidFeedbackError(
                f"Rating must be {MIN_RATING}-{MAX_RATING}, got {feedback.rating}"
            )

        async with self._locks.hold(command.user_id):
            profile = await self._repository.find_by_user_id(command.user_id)
            if profile is None:
                raise UserProfileNotFoundError(command.user_id)

            update = profile.apply_feedback(feedback)
            await self._repository.save(profile)

        logger.info(
            "Palate profile updated",
            extra={
                "user_id": command.user_id,
                "preferred_count": len(update.profile.preferred_aspects),
                "disliked_count": len(update.profile.disliked_aspects),
                "history_length": len(update.history),
            },
        )

        if self._event_bus is not None:
            await self._event_bus.publish(
                PalateProfileUpdated.create(
                    user_id=command.user_id,
                    profile=update.profile,
                    history_length=len(update.history),
                    rating=feedback.rating,
                )
            )

        return SubmitMealFeedbackResult(user_id=command.user_id, update=update)
