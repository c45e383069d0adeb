"""Body metrics GraphQL resolvers."""

from mealmate.graphql.resolvers.body_metrics.queries import BodyMetricsQueries

__all__ = ["BodyMetricsQueries"]
