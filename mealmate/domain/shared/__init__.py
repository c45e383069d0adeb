"""Shared domain building blocks."""

from .errors import MealmateDomainError
from .events import DomainEvent

__all__ = [
    "MealmateDomainError",
    "DomainEvent",
]
