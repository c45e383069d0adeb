"""PalateProfile value object - learned taste preferences."""

from dataclasses import dataclass

from ..exceptions.domain_errors import PalateProfileConflictError
from ._aspects import unique_aspects


@dataclass(frozen=True)
class PalateProfile:
    """Two disjoint sets of aspect tags.

    Tags keep set semantics (no duplicates) but are stored as tuples in
    first-insertion order so serialized profiles stay stable.

    Attributes:
        preferred_aspects: Aspects the user enjoys
        disliked_aspects: Aspects the user wants avoided or improved
    """

    preferred_aspects: tuple[str, ...] = ()
    disliked_aspects: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize tags and enforce mutual exclusivity.

        Raises:
            PalateProfileConflictError: If a tag is in both sets
        """
        preferred = unique_aspects(self.preferred_aspects)
        disliked = unique_aspects(self.disliked_aspects)
        object.__setattr__(self, "preferred_aspects", preferred)
        object.__setattr__(self, "disliked_aspects", disliked)

        overlap = tuple(a for a in preferred if a in disliked)
        if overlap:
            raise PalateProfileConflictError(overlap)

    @staticmethod
    def empty() -> "PalateProfile":
        """Profile of a user who has not given feedback yet."""
        return PalateProfile()

    def is_empty(self) -> bool:
        return not self.preferred_aspects and not self.disliked_aspects

    def prefers(self, aspect: str) -> bool:
        return aspect in self.preferred_aspects

    def dislikes(self, aspect: str) -> bool:
        return aspect in self.disliked_aspects
