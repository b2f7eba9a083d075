from __future__ import annotations

import logging as _logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final, Optional

from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

from api.graphql.context import GraphQLContext, create_context
from api.graphql.schema import create_schema
from infrastructure.config import (
    get_app_version,
    get_consistency_job_cron,
    get_repository_backend,
    is_consistency_job_enabled,
)
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.persistence.factory import get_walking_repository
from infrastructure.scheduler import ConsistencyRecalculationJob, SchedulerManager

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()

schema = create_schema()

# Singletons shared by every request
_walking_repository = get_walking_repository()
_event_bus = InMemoryEventBus()
_scheduler_manager: Optional[SchedulerManager] = None


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle: schedules the consistency job, stops it on shutdown."""
    global _scheduler_manager

    logger.info(
        "startup.config",
        extra={
            "repository_backend": get_repository_backend(),
            "consistency_job_enabled": is_consistency_job_enabled(),
            "version": APP_VERSION,
        },
    )

    if is_consistency_job_enabled():
        _scheduler_manager = SchedulerManager()
        _scheduler_manager.initialize(
            ConsistencyRecalculationJob(_walking_repository),
            cron_expression=get_consistency_job_cron(),
        )
        _scheduler_manager.start()

    logger.info("lifespan.ready", extra={"status": "serving"})
    try:
        yield
    finally:
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        if _scheduler_manager is not None:
            _scheduler_manager.shutdown(wait=False)
            _scheduler_manager = None


app = FastAPI(
    title="Stepwise Walking Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context(request: Request) -> GraphQLContext:
    """Create GraphQL context with the shared repository and event bus."""
    return create_context(
        walking_repository=_walking_repository,
        event_bus=_event_bus,
        request=request,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
