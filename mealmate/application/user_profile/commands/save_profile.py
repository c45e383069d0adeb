"""SaveUserProfileCommand - create or update a user's profile form data."""

import logging
from dataclasses import dataclass
from typing import Optional

from mealmate.application.shared.profile_locks import ProfileLocks, profile_locks
from mealmate.domain.body_metrics.core.value_objects.anthropometrics import (
    Anthropometrics,
)
from mealmate.domain.meal_planning.vocabulary import DietaryGoal
from mealmate.domain.shared.ports.event_bus import IEventBus
from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.domain.user_profile.core.events.user_profile_saved import (
    UserProfileSaved,
)
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)
from mealmate.domain.user_profile.core.value_objects.athlete_profile import (
    AthleteProfile,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveUserProfileCommand:
    """Command to save the profile form.

    Attributes:
        user_id: User identifier
        anthropometrics: Body measurements
        dietary_goal: Dietary goal
        illnesses: Selected predefined illnesses
        other_illness_details: Free-text health notes
        current_mood: Optional mood
        current_craving: Optional craving
        athlete: Sport-nutrition context (None for non-athletes)
        reset_feedback: Clear feedback history and palate profile
    """

    user_id: str
    anthropometrics: Anthropometrics
    dietary_goal: DietaryGoal = DietaryGoal.WEIGHT_LOSS
    illnesses: tuple[str, ...] = ()
    other_illness_details: str = ""
    current_mood: Optional[str] = None
    current_craving: Optional[str] = None
    athlete: Optional[AthleteProfile] = None
    reset_feedback: bool = False


@dataclass(frozen=True)
class SaveUserProfileResult:
    """Result of saving a profile.

    Attributes:
        profile: Stored profile
        created: Whether the profile was new
    """

    profile: UserProfile
    created: bool


class SaveUserProfileHandler:
    """Handler for SaveUserProfileCommand.

    New profiles start with an empty history and palate profile; existing
    ones keep what was learned unless ``reset_feedback`` is set.
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

    async def handle(self, command: SaveUserProfileCommand) -> SaveUserProfileResult:
        """
        Handle save profile command.

        Args:
            command: SaveUserProfileCommand with form data

        Returns:
            SaveUserProfileResult with stored profile

        Raises:
            InvalidUserProfileError: If user ID is empty
        """
        async with self._locks.hold(command.user_id):
            profile = await self._repository.find_by_user_id(command.user_id)
            created = profile is None

            if profile is None:
                profile = UserProfile(
                    user_id=command.user_id,
                    anthropometrics=command.anthropometrics,
                    dietary_goal=command.dietary_goal,
                    illnesses=command.illnesses,
                    other_illness_details=command.other_illness_details,
                    current_mood=command.current_mood,
                    current_craving=command.current_craving,
                    athlete=command.athlete,
                )
            else:
                profile.update_details(
                    anthropometrics=command.anthropometrics,
                    dietary_goal=command.dietary_goal,
                    illnesses=command.illnesses,
                    other_illness_details=command.other_illness_details,
                    current_mood=command.current_mood,
                    current_craving=command.current_craving,
                    athlete=command.athlete,
                )
                if command.reset_feedback:
                    profile.reset_feedback()

            await self._repository.save(profile)

        logger.info(
            "User profile saved",
            extra={
                "user_id": command.user_id,
                "created": created,
                "feedback_reset": command.reset_feedback and not created,
            },
        )

        if self._event_bus is not None:
            await self._event_bus.publish(
                UserProfileSaved.create(
                    user_id=command.user_id,
                    created=created,
                    feedback_reset=command.reset_feedback and not created,
                )
            )

        return SaveUserProfileResult(profile=profile, created=created)
