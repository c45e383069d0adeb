"""FeedbackHistory value object - bounded, chronological feedback log."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .meal_feedback import MealFeedback

FEEDBACK_HISTORY_LIMIT = 5


@dataclass(frozen=True)
class FeedbackHistory:
    """The most recent feedback events, oldest first.

    Holds at most FEEDBACK_HISTORY_LIMIT entries. Appending returns a new
    history; once the cap is exceeded the oldest entries are dropped.

    Attributes:
        entries: Feedback events in insertion order (most recent last)
    """

    entries: tuple[MealFeedback, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        if len(self.entries) > FEEDBACK_HISTORY_LIMIT:
            raise ValueError(
                f"Feedback history holds at most {FEEDBACK_HISTORY_LIMIT} entries, "
                f"got {len(self.entries)}"
            )

    @classmethod
    def from_entries(cls, entries: Iterable[MealFeedback]) -> "FeedbackHistory":
        """Build a history keeping only the most recent entries."""
        return cls(entries=tuple(entries)[-FEEDBACK_HISTORY_LIMIT:])

    def append(self, feedback: MealFeedback) -> "FeedbackHistory":
        """Return a new history with ``feedback`` appended (FIFO eviction)."""
        return FeedbackHistory.from_entries(self.entries + (feedback,))

    @property
    def latest(self) -> Optional[MealFeedback]:
        return self.entries[-1] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[MealFeedback]:
        return iter(self.entries)
