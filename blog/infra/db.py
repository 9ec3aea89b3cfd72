"""Database infrastructure.

Exposes:
  - metadata:         SQLAlchemy MetaData instance shared across all table
                      definitions and Alembic autogenerate.
  - get_engine():     Returns the singleton async engine (lazy init).
  - get_connection(): Async context manager that yields a transactional
                      AsyncConnection from the engine pool.
  - dispose_engine(): Closes pooled connections at application shutdown.

Usage in repositories:
    async with get_connection() as conn:
        result = await conn.execute(stmt)
        # Connection is committed and returned to pool on clean exit.
        # Rolled back automatically on exception.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

# Shared MetaData instance. All SQLAlchemy Table objects must be constructed
# with this metadata so that Alembic's autogenerate can discover them.
metadata: MetaData = MetaData()

_engine: AsyncEngine | None = None


def get_engine() -> AsyncEngine:
    """Return the singleton async engine, creating it on first call.

    The engine manages the connection pool, the only resource shared between
    requests. Pool exhaustion surfaces as a SQLAlchemy TimeoutError, which
    the API classifies as a transient persistence failure.

    constants is imported here (not at module level) so that importing this
    module for its `metadata` object alone — e.g. from Alembic env.py in an
    init container — does not trigger the full env-var validation in constants.
    """
    from blog.config import constants  # lazy import, see docstring

    global _engine
    if _engine is None:
        _engine = create_async_engine(
            constants.DATABASE_URL,
            echo=False,
            pool_pre_ping=True,
            pool_size=constants.DB_POOL_SIZE,
            max_overflow=constants.DB_MAX_OVERFLOW,
        )
    return _engine


async def dispose_engine() -> None:
    """Close all pooled connections and drop the singleton engine."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None


@asynccontextmanager
async def get_connection() -> AsyncGenerator[AsyncConnection, None]:
    """Yield a transactional AsyncConnection from the engine pool.

    The connection is automatically committed on clean exit and rolled back
    if an exception is raised, then returned to the pool in both cases.

    Raises:
        Any SQLAlchemy exception propagated from the driver. Callers
        (the API exception handlers) are responsible for mapping these to
        domain exceptions.
    """
    async with get_engine().begin() as conn:
        yield conn
