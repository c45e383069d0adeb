"""Palate domain services."""

from .palate_profile_updater import PalateUpdate, update_palate_profile
from .taste_report import TOP_ASPECTS_LIMIT, build_taste_report

__all__ = [
    "PalateUpdate",
    "update_palate_profile",
    "TOP_ASPECTS_LIMIT",
    "build_taste_report",
]
