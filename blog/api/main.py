"""FastAPI application entry point.

Application lifecycle:
  1. Startup: Configure logging
  2. Runtime: Handle HTTP requests; each repository call draws a connection
     from the shared engine pool
  3. Shutdown: Dispose the engine and its pooled connections

Run with:
    uvicorn blog.api.main:app
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI

from blog.api.errors import register_exception_handlers
from blog.api.routers import comments_router
from blog.config import constants
from blog.infra.db import dispose_engine


def _configure_logging() -> None:
    """Configure structlog for structured JSON output.

    Sets up stdlib logging at the configured level so that third-party
    libraries (FastAPI, uvicorn, SQLAlchemy) emit through the same pipeline
    as application code. All output is serialised as JSON to stdout.
    """
    log_level = getattr(logging, constants.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle: startup and shutdown.

    The engine itself is created lazily by the first repository call, so
    startup does not need a reachable database.
    """
    _configure_logging()

    log = structlog.get_logger().bind(
        service=constants.SERVICE_NAME,
        component="api",
    )
    log.info("api.startup.complete")

    yield

    log.info("api.shutdown.disposing_engine")
    await dispose_engine()
    log.info("api.shutdown.complete")


app = FastAPI(
    title="Blog Comments",
    description="Comments on blog stories.",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(comments_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "service": constants.SERVICE_NAME}
