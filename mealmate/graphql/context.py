"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- User profile repository
- Event bus (domain events)
- Body metrics calculator
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from mealmate.domain.body_metrics.core.ports.calculators import (
    IBodyMetricsCalculator,
)
from mealmate.domain.shared.ports.event_bus import IEventBus
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using ``info.context.get("name")``.

    Attributes:
        user_profile_repository: Repository for user profiles
        event_bus: Event bus for domain events
        body_metrics_calculator: Calculator for dashboard metrics
        request: FastAPI request object (None outside HTTP)
    """

    def __init__(
        self,
        user_profile_repository: IUserProfileRepository,
        event_bus: IEventBus,
        body_metrics_calculator: IBodyMetricsCalculator,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.user_profile_repository = user_profile_repository
        self.event_bus = event_bus
        self.body_metrics_calculator = body_metrics_calculator
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name, None if not found.

        Example:
            >>> repository = info.context.get("user_profile_repository")
        """
        return getattr(self, key, None)


def create_context(
    user_profile_repository: IUserProfileRepository,
    event_bus: IEventBus,
    body_metrics_calculator: IBodyMetricsCalculator,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> context = create_context(
        ...     user_profile_repository=InMemoryUserProfileRepository(),
        ...     event_bus=InMemoryEventBus(),
        ...     body_metrics_calculator=BodyMetricsService(),
        ... )
    """
    return GraphQLContext(
        user_profile_repository=user_profile_repository,
        event_bus=event_bus,
        body_metrics_calculator=body_metrics_calculator,
        request=request,
    )
