"""Domain events for palate profile."""

from .palate_profile_updated import PalateProfileUpdated

__all__ = [
    "PalateProfileUpdated",
]
