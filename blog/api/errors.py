"""Exception handlers: map exceptions raised during a request to responses.

Mapping:
    BadRequestAlertException   → 400, problem body + X-<app>-error headers
    RequestValidationError     → 400, problem body with fieldErrors
    sqlalchemy SQLAlchemyError → classified, then
                                   PersistenceTransientError  → 503
                                   PersistenceValidationError → 500

Route handlers never catch store errors themselves; they propagate here.
"""

from __future__ import annotations

import sqlalchemy.exc
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog.api import headers
from blog.api.models import FieldError, ProblemResponse
from blog.config import constants
from blog.domain.exceptions import (
    BadRequestAlertException,
    PersistenceError,
    PersistenceTransientError,
    PersistenceValidationError,
)


def classify_sqlalchemy_error(
    exc: sqlalchemy.exc.SQLAlchemyError,
) -> PersistenceTransientError | PersistenceValidationError:
    """Map a SQLAlchemy exception to a domain persistence exception.

    Classification:
        IntegrityError   → PersistenceValidationError (constraint violation)
        OperationalError → PersistenceTransientError (connection / deadlock)
        All others       → PersistenceTransientError (pool timeout, driver errors)
    """
    if isinstance(exc, sqlalchemy.exc.IntegrityError):
        return PersistenceValidationError(str(exc))
    return PersistenceTransientError(str(exc))


def _persistence_response(request: Request, exc: PersistenceError) -> JSONResponse:
    log = structlog.get_logger().bind(
        service=constants.SERVICE_NAME,
        endpoint=request.url.path,
        method=request.method,
    )
    if isinstance(exc, PersistenceTransientError):
        log.error(
            "api.db_transient_error",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        problem = ProblemResponse(
            title="Database temporarily unavailable. Please retry.",
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    else:
        log.error(
            "api.db_error",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        problem = ProblemResponse(
            title="An unexpected database error occurred.",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return JSONResponse(status_code=problem.status, content=problem.render())


async def handle_bad_request_alert(request: Request, exc: BadRequestAlertException) -> JSONResponse:
    structlog.get_logger().bind(
        service=constants.SERVICE_NAME,
        endpoint=request.url.path,
    ).warning(
        "api.bad_request",
        entity_name=exc.entity_name,
        error_key=exc.error_key,
    )
    problem = ProblemResponse(
        title=exc.message,
        status=status.HTTP_400_BAD_REQUEST,
        message=f"error.{exc.error_key}",
        entity_name=exc.entity_name,
        error_key=exc.error_key,
        params=exc.entity_name,
    )
    return JSONResponse(
        status_code=problem.status,
        content=problem.render(),
        headers=headers.failure_alert(exc.entity_name, exc.error_key),
    )


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field_errors.append(
            FieldError(
                object_name=loc[0] if loc else "request",
                field=".".join(loc[1:]) or (loc[0] if loc else ""),
                message=str(error.get("msg", "")),
            )
        )
    problem = ProblemResponse(
        title="Method argument not valid",
        status=status.HTTP_400_BAD_REQUEST,
        message="error.validation",
        field_errors=field_errors,
    )
    return JSONResponse(status_code=problem.status, content=problem.render())


async def handle_sqlalchemy_error(
    request: Request, exc: sqlalchemy.exc.SQLAlchemyError
) -> JSONResponse:
    return _persistence_response(request, classify_sqlalchemy_error(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register every handler in this module on ``app``."""
    app.add_exception_handler(BadRequestAlertException, handle_bad_request_alert)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(sqlalchemy.exc.SQLAlchemyError, handle_sqlalchemy_error)  # type: ignore[arg-type]
