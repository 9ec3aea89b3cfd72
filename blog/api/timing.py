"""Per-endpoint latency instrumentation.

``@timed("api.comments.create")`` wraps an async route handler and emits an
``<event>.timed`` log event carrying ``duration_ms`` after every call,
including calls that raise. Apply it below the router decorator so FastAPI
registers the wrapper.

Modules defining routes wrapped by ``timed`` must not use
``from __future__ import annotations``: FastAPI resolves string annotations
against the wrapper's globals, which are this module's.
"""

from __future__ import annotations

import functools
import time
from typing import Any, Awaitable, Callable, TypeVar

import structlog

from blog.config import constants

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def timed(event: str) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            started_at = time.monotonic()
            outcome = "completed"
            try:
                return await func(*args, **kwargs)
            except Exception:
                outcome = "failed"
                raise
            finally:
                duration_ms = int((time.monotonic() - started_at) * 1000)
                structlog.get_logger().bind(service=constants.SERVICE_NAME).info(
                    f"{event}.timed",
                    status=outcome,
                    duration_ms=duration_ms,
                )

        return wrapper  # type: ignore[return-value]

    return decorator
