"""Value objects for user profile domain."""

from .athlete_profile import AthleteProfile

__all__ = [
    "AthleteProfile",
]
