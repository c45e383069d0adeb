"""Palate profile update - folds one feedback event into the profile."""

from dataclasses import dataclass

from ..core.value_objects.feedback_history import FeedbackHistory
from ..core.value_objects.meal_feedback import MealFeedback
from ..core.value_objects.palate_profile import PalateProfile


@dataclass(frozen=True)
class PalateUpdate:
    """Result of folding a feedback event.

    Attributes:
        profile: Recomputed palate profile
        history: History including the new feedback (at most 5 entries)
    """

    profile: PalateProfile
    history: FeedbackHistory


def update_palate_profile(
    profile: PalateProfile,
    history: FeedbackHistory,
    feedback: MealFeedback,
) -> PalateUpdate:
    """Fold a feedback event into the palate profile and history.

    Algorithm:
        1. Append feedback to history, keeping the 5 most recent entries
        2. Liked aspects join the preferred set and leave the disliked set
        3. Improvement aspects join the disliked set and leave the
           preferred set

    Improvement aspects are applied after liked ones, so a tag present
    in both lists of the same event ends up disliked.

    The inputs are never mutated; rating and comments do not affect the
    profile. Empty aspect lists leave the profile unchanged.

    Args:
        profile: Current palate profile (empty when the user has none)
        history: Current feedback history
        feedback: New feedback event

    Returns:
        PalateUpdate: New profile and history

    Example:
        >>> update = update_palate_profile(
        ...     PalateProfile.empty(),
        ...     FeedbackHistory(),
        ...     MealFeedback(liked_aspects=("تند",), improvement_aspects=("تند",)),
        ... )
        >>> update.profile.disliked_aspects
        ('تند',)
    """
    preferred = list(profile.preferred_aspects)
    disliked = list(profile.disliked_aspects)

    for aspect in feedback.liked_aspects:
        if aspect not in preferred:
            preferred.append(aspect)
        disliked = [a for a in disliked if a != aspect]

    for aspect in feedback.improvement_aspects:
        if aspect not in disliked:
            disliked.append(aspect)
        preferred = [a for a in preferred if a != aspect]

    return PalateUpdate(
        profile=PalateProfile(
            preferred_aspects=tuple(preferred),
            disliked_aspects=tuple(disliked),
        ),
        history=history.append(feedback),
    )
