"""FastAPI application exposing the mealmate GraphQL API.

Run with:
    uvicorn mealmate.app:app --reload
"""

import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, Final

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from mealmate.domain.body_metrics.calculation.body_metrics_service import (
    BodyMetricsService,
)
from mealmate.graphql.context import GraphQLContext, create_context
from mealmate.graphql.schema import create_schema
from mealmate.infrastructure.config import (
    get_app_version,
    get_log_level,
    get_repository_backend,
    load_environment,
)
from mealmate.infrastructure.events.in_memory_bus import InMemoryEventBus
from mealmate.infrastructure.events.log_subscribers import register_log_subscribers
from mealmate.infrastructure.persistence.user_profile_factory import (
    get_user_profile_repository,
)

load_environment()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:
    """Log startup configuration, close the store on shutdown."""
    logger.info(
        "lifespan.startup",
        extra={
            "version": APP_VERSION,
            "repository_backend": get_repository_backend(),
            "repository": type(_user_profile_repository).__name__,
        },
    )
    yield
    logger.info("lifespan.shutdown", extra={"status": "cleanup"})
    close = getattr(_user_profile_repository, "close", None)
    if close is not None:
        await close()


app = FastAPI(
    title="Mealmate Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# Singletons shared across requests
# REPOSITORY_BACKEND: "inmemory" (default) | "mongodb"
_user_profile_repository = get_user_profile_repository()
_event_bus = InMemoryEventBus()
register_log_subscribers(_event_bus)
_body_metrics_calculator = BodyMetricsService()


def get_graphql_context() -> GraphQLContext:
    """Create GraphQL context with the shared dependencies."""
    return create_context(
        user_profile_repository=_user_profile_repository,
        event_bus=_event_bus,
        body_metrics_calculator=_body_metrics_calculator,
    )


schema = create_schema()

graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
