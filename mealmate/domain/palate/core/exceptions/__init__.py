"""Domain exceptions for palate profile."""

from .domain_errors import (
    EmptyFeedbackError,
    InvalidFeedbackError,
    PalateDomainError,
    PalateProfileConflictError,
)

__all__ = [
    "PalateDomainError",
    "InvalidFeedbackError",
    "EmptyFeedbackError",
    "PalateProfileConflictError",
]
