"""User profile GraphQL resolvers."""

from mealmate.graphql.resolvers.user_profile.mutations import UserProfileMutations
from mealmate.graphql.resolvers.user_profile.queries import UserProfileQueries

__all__ = [
    "UserProfileMutations",
    "UserProfileQueries",
]
