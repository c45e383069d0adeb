"""MealFeedback value object - one user feedback submission."""

from dataclasses import dataclass
from typing import Optional

from ._aspects import unique_aspects

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class MealFeedback:
    """Feedback on a single meal suggestion.

    Created once per submission and never mutated. Only the aspect tags
    influence the palate profile; rating and comments travel with the
    history for prompt context.

    Attributes:
        rating: Star rating 1-5 (optional)
        liked_aspects: Tags the user liked, e.g. "طعم تند"
        improvement_aspects: Tags the user wants improved
        other_comments: Free text
    """

    rating: Optional[int] = None
    liked_aspects: tuple[str, ...] = ()
    improvement_aspects: tuple[str, ...] = ()
    other_comments: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable of tags, store as de-duplicated tuples
        object.__setattr__(self, "liked_aspects", unique_aspects(self.liked_aspects))
        object.__setattr__(
            self, "improvement_aspects", unique_aspects(self.improvement_aspects)
        )

    def has_aspects(self) -> bool:
        return bool(self.liked_aspects or self.improvement_aspects)

    def is_empty(self) -> bool:
        """True when the submission carries no signal at all."""
        return (
            self.rating is None
            and not self.has_aspects()
            and not self.other_comments.strip()
        )

    def has_valid_rating(self) -> bool:
        return self.rating is None or MIN_RATING <= self.rating <= MAX_RATING
