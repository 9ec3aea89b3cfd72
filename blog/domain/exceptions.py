"""Domain exceptions.

All application exceptions are domain-level. Infrastructure errors (DB driver
errors, pool exhaustion) are classified at the API boundary and mapped to the
appropriate domain exception here before being rendered as a response.

Hierarchy:
    BlogError                           — root for all application errors
    ├── BadRequestAlertException        — client input rejected (HTTP 400)
    └── PersistenceError                — database persistence errors
        ├── PersistenceTransientError   — transient, safe to retry (HTTP 503)
        └── PersistenceValidationError  — constraint violation (HTTP 500)

Rules:
- No bare `except` anywhere in the codebase — always catch a specific type.
- Repositories never catch; SQLAlchemy errors propagate to the exception
  handlers in blog.api.errors, which classify them.
"""

from __future__ import annotations


class BlogError(Exception):
    """Root exception for all application-level errors."""


# ---------------------------------------------------------------------------
# Client errors
# ---------------------------------------------------------------------------


class BadRequestAlertException(BlogError):
    """Raised when a request is well-formed but semantically rejected.

    Carries what the UI needs to show a failure toast:
      - ``message``:     human-readable description.
      - ``entity_name``: stable short name of the entity (e.g. ``"comment"``).
      - ``error_key``:   stable machine key (e.g. ``"idexists"``), rendered as
                         ``error.<error_key>``.
    """

    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


# ---------------------------------------------------------------------------
# Persistence errors
# ---------------------------------------------------------------------------


class PersistenceError(BlogError):
    """Base class for all database persistence errors."""


class PersistenceTransientError(PersistenceError):
    """Transient database error that is safe to retry.

    This covers:
    - Connection pool exhaustion
    - Connection lost mid-operation
    - Deadlock or lock timeout
    - Generic SQLAlchemy OperationalError
    """


class PersistenceValidationError(PersistenceError):
    """Non-retryable database error.

    This covers:
    - Foreign key violations (comment referencing an unknown story or user)
    - Not-null constraint violations on required columns
    - Unexpected unique constraint violations
    """
