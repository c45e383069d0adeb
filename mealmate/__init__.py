"""mealmate backend.

Deterministic core of the meal-planning assistant (body metrics and
palate-profile learning) exposed through a GraphQL API.
"""

__version__ = "0.1.0"
