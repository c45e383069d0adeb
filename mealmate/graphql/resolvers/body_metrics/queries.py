"""Query resolvers for body metrics domain.

- calculate: Metrics for ad-hoc measurements
- forUser: Metrics for a stored user profile
"""

from typing import Optional

import strawberry

from mealmate.application.body_metrics.queries.get_body_metrics import (
    GetBodyMetricsQuery,
    GetBodyMetricsQueryHandler,
)
from mealmate.domain.body_metrics.calculation.body_metrics_service import (
    BodyMetricsService,
)
from mealmate.domain.body_metrics.core.value_objects.anthropometrics import (
    Anthropometrics,
)
from mealmate.domain.body_metrics.core.value_objects.body_metrics_report import (
    BodyMetricsReport,
)
from mealmate.domain.body_metrics.core.value_objects.gender import Gender
from mealmate.domain.user_profile.core.exceptions.domain_errors import (
    UserProfileNotFoundError,
)
from mealmate.graphql.types_body_metrics import (
    AnthropometricsInput,
    BodyMetricsType,
    IdealWeightRangeType,
)


def map_report_to_graphql(report: BodyMetricsReport) -> BodyMetricsType:
    """Map domain BodyMetricsReport to GraphQL BodyMetricsType."""
    ideal_range = report.ideal_weight_range
    return BodyMetricsType(
        bmi=report.bmi,
        bmi_category=report.bmi_category,
        bmr=report.bmr,
        ideal_weight_range=(
            IdealWeightRangeType(lower=ideal_range.lower, upper=ideal_range.upper)
            if ideal_range is not None
            else None
        ),
        overweight_amount_kg=report.overweight_amount_kg,
    )


def map_anthropometrics_input(input: AnthropometricsInput) -> Anthropometrics:
    return Anthropometrics(
        gender=Gender(input.gender.value),
        height_cm=input.height_cm,
        weight_kg=input.weight_kg,
        age=input.age,
    )


@strawberry.type
class BodyMetricsQueries:
    """GraphQL queries for body metrics domain."""

    @strawberry.field
    def calculate(
        self,
        info: strawberry.types.Info,
        input: AnthropometricsInput,
    ) -> BodyMetricsType:
        """Calculate BMI, BMR and ideal weight range for measurements.

        Example:
            query {
              bodyMetrics {
                calculate(input: {
                  gender: MALE, heightCm: 170, weightKg: 90, age: 30
                }) {
                  bmi
                  bmr
                  idealWeightRange { lower upper }
                  overweightAmountKg
                }
              }
            }
        """
        calculator = info.context.get("body_metrics_calculator") or BodyMetricsService()
        report = calculator.report(map_anthropometrics_input(input))
        return map_report_to_graphql(report)

    @strawberry.field
    async def for_user(
        self,
        info: strawberry.types.Info,
        user_id: str,
    ) -> Optional[BodyMetricsType]:
        """Body metrics from the user's stored measurements.

        Returns:
            BodyMetricsType or None if the user has no profile
        """
        repository = info.context.get("user_profile_repository")
        if not repository:
            raise Exception("Missing user_profile_repository in GraphQL context")

        handler = GetBodyMetricsQueryHandler(
            repository=repository,
            calculator=info.context.get("body_metrics_calculator"),
        )
        try:
            report = await handler.handle(GetBodyMetricsQuery(user_id=user_id))
        except UserProfileNotFoundError:
            return None
        return map_report_to_graphql(report)
