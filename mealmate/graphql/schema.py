"""Main GraphQL schema for the mealmate backend.

Usage:
    from mealmate.graphql.schema import create_schema
    schema = create_schema()
"""

import strawberry

from mealmate.graphql.resolvers.body_metrics import BodyMetricsQueries
from mealmate.graphql.resolvers.palate import PalateMutations, PalateQueries
from mealmate.graphql.resolvers.user_profile import (
    UserProfileMutations,
    UserProfileQueries,
)
from mealmate.infrastructure.config import get_app_version


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field
    def version(self) -> str:
        return get_app_version()

    @strawberry.field(description="Body metrics queries")  # type: ignore[misc]
    def body_metrics(self) -> BodyMetricsQueries:
        """BMI, BMR and ideal weight range.

        Example:
            query {
              bodyMetrics {
                forUser(userId: "user123") { bmi bmr overweightAmountKg }
              }
            }
        """
        return BodyMetricsQueries()

    @strawberry.field(description="Palate profile queries")  # type: ignore[misc]
    def palate(self) -> PalateQueries:
        """Palate profile, taste report and current meal time.

        Example:
            query {
              palate {
                tasteReport(userId: "user123") { status message }
                currentMealTime { code name }
              }
            }
        """
        return PalateQueries()

    @strawberry.field(description="User profile queries")  # type: ignore[misc]
    def user_profile(self) -> UserProfileQueries:
        return UserProfileQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Palate profile mutations")  # type: ignore[misc]
    def palate(self) -> PalateMutations:
        """Feedback submission.

        Example:
            mutation {
              palate {
                submitFeedback(input: {...}) { palateProfile { preferredAspects } }
              }
            }
        """
        return PalateMutations()

    @strawberry.field(description="User profile mutations")  # type: ignore[misc]
    def user_profile(self) -> UserProfileMutations:
        return UserProfileMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all resolvers."""
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
    )
