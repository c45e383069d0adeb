"""GetBodyMetricsQuery - dashboard metrics for a stored user."""

from dataclasses import dataclass
from typing import Optional

from mealmate.domain.body_metrics.calculation.body_metrics_service import (
    BodyMetricsService,
)
from mealmate.domain.body_metrics.core.ports.calculators import (
    IBodyMetricsCalculator,
)
from mealmate.domain.body_metrics.core.value_objects.body_metrics_report import (
    BodyMetricsReport,
)
from mealmate.domain.user_profile.core.exceptions.domain_errors import (
    UserProfileNotFoundError,
)
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)


@dataclass(frozen=True)
class GetBodyMetricsQuery:
    """Query for the body metrics of a user.

    Attributes:
        user_id: User identifier
    """

    user_id: str


class GetBodyMetricsQueryHandler:
    """Computes body metrics from the stored measurements."""

    def __init__(
        self,
        repository: IUserProfileRepository,
        calculator: Optional[IBodyMetricsCalculator] = None,
    ):
        self._repository = repository
        self._calculator = calculator or BodyMetricsService()

    async def handle(self, query: GetBodyMetricsQuery) -> BodyMetricsReport:
        """
        Handle body metrics query.

        Args:
            query: GetBodyMetricsQuery with user ID

        Returns:
            BodyMetricsReport: Metrics, unavailable ones set to None

        Raises:
            UserProfileNotFoundError: If the user has no profile
        """
        profile = await self._repository.find_by_user_id(query.user_id)
        if profile is None:
            raise UserProfileNotFoundError(query.user_id)
        return self._calculator.report(profile.anthropometrics)
