"""UserProfile entity - aggregate root for a planner user."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from mealmate.domain.body_metrics.core.value_objects.anthropometrics import (
    Anthropometrics,
)
from mealmate.domain.meal_planning.vocabulary import DietaryGoal
from mealmate.domain.palate.core.value_objects.feedback_history import (
    FeedbackHistory,
)
from mealmate.domain.palate.core.value_objects.meal_feedback import MealFeedback
from mealmate.domain.palate.core.value_objects.palate_profile import PalateProfile
from mealmate.domain.palate.services.palate_profile_updater import (
    PalateUpdate,
    update_palate_profile,
)

from ..exceptions.domain_errors import InvalidUserProfileError
from ..value_objects.athlete_profile import AthleteProfile


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserProfile:
    """User profile aggregate root.

    Holds everything the planner knows about a user:
    - Body measurements for the metrics dashboard
    - Dietary goal, health conditions, mood and craving
    - Feedback history (last 5 submissions) and the learned palate profile
    - Optional athlete context

    The palate profile is only ever replaced by the result of
    ``update_palate_profile``; it is never edited in place.

    Attributes:
        user_id: Owner identifier
        anthropometrics: Body measurements
        dietary_goal: Dietary goal
        illnesses: Selected predefined illnesses
        other_illness_details: Free-text health notes
        current_mood: Optional mood for the next suggestion
        current_craving: Optional craving for the next suggestion
        feedback_history: Most recent feedback, oldest first
        palate_profile: Learned preferred / disliked aspects
        athlete: Sport-nutrition context, None for non-athletes
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    user_id: str
    anthropometrics: Anthropometrics
    dietary_goal: DietaryGoal = DietaryGoal.WEIGHT_LOSS
    illnesses: tuple[str, ...] = ()
    other_illness_details: str = ""
    current_mood: Optional[str] = None
    current_craving: Optional[str] = None
    feedback_history: FeedbackHistory = field(default_factory=FeedbackHistory)
    palate_profile: PalateProfile = field(default_factory=PalateProfile.empty)
    athlete: Optional[AthleteProfile] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        self.illnesses = tuple(self.illnesses)
        self.validate_invariants()

    def validate_invariants(self) -> None:
        """Validate domain invariants.

        Raises:
            InvalidUserProfileError: If any invariant is violated
        """
        if not self.user_id or not self.user_id.strip():
            raise InvalidUserProfileError("User ID cannot be empty")

    @property
    def is_athlete(self) -> bool:
        return self.athlete is not None

    def update_details(
        self,
        anthropometrics: Anthropometrics,
        dietary_goal: DietaryGoal,
        illnesses: tuple[str, ...] = (),
        other_illness_details: str = "",
        current_mood: Optional[str] = None,
        current_craving: Optional[str] = None,
        athlete: Optional[AthleteProfile] = None,
    ) -> None:
        """Replace the form data, keeping feedback and palate profile."""
        self.anthropometrics = anthropometrics
        self.dietary_goal = dietary_goal
        self.illnesses = tuple(illnesses)
        self.other_illness_details = other_illness_details
        self.current_mood = current_mood
        self.current_craving = current_craving
        self.athlete = athlete
        self.updated_at = _utcnow()

    def reset_feedback(self) -> None:
        """Forget feedback history and the learned palate profile."""
        self.feedback_history = FeedbackHistory()
        self.palate_profile = PalateProfile.empty()
        self.updated_at = _utcnow()

    def apply_feedback(self, feedback: MealFeedback) -> PalateUpdate:
        """Fold a feedback submission into history and palate profile.

        Args:
            feedback: New feedback event

        Returns:
            PalateUpdate: The new profile/history pair now held by the entity
        """
        update = update_palate_profile(
            self.palate_profile, self.feedback_history, feedback
        )
        self.palate_profile = update.profile
        self.feedback_history = update.history
        self.updated_at = _utcnow()
        return update

    def __str__(self) -> str:
        return (
            f"UserProfile {self.user_id} - Goal: {self.dietary_goal.value} - "
            f"{len(self.feedback_history)} feedback(s)"
        )
