"""Helpers for aspect tag collections."""

from typing import Iterable


def unique_aspects(aspects: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicate tags, keeping first-insertion order."""
    return tuple(dict.fromkeys(aspects))
