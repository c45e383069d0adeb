"""TasteReport value object - summary of liked aspects."""

from dataclasses import dataclass
from enum import Enum


class TasteReportStatus(str, Enum):
    """Outcome of building a taste report."""

    NO_FEEDBACK = "no_feedback"
    NO_LIKED_ASPECTS = "no_liked_aspects"
    OK = "ok"


@dataclass(frozen=True)
class AspectCount:
    """How many feedback events liked an aspect."""

    aspect: str
    count: int


@dataclass(frozen=True)
class TasteReport:
    """Most liked aspects across the feedback history.

    Attributes:
        status: Whether there was enough feedback for a report
        top_aspects: Up to three aspects, most frequent first
        message: User-facing summary text
    """

    status: TasteReportStatus
    top_aspects: tuple[AspectCount, ...]
    message: str
