"""Palate GraphQL resolvers."""

from mealmate.graphql.resolvers.palate.mutations import PalateMutations
from mealmate.graphql.resolvers.palate.queries import PalateQueries

__all__ = [
    "PalateMutations",
    "PalateQueries",
]
