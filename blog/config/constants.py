"""Constants module.

All configuration values are sourced exclusively from environment variables.
This module is the single gateway between the environment and the codebase:

    Environment variables
            │
            ▼
    blog.config.constants    ← os.environ["KEY"]
            │
            ▼
    All other modules        ← import from blog.config.constants

Rules:
- No module outside this file may call os.environ directly.
- os.environ["KEY"] is used (not .get) for required values so that a missing
  variable raises KeyError at import time, causing a hard startup failure
  rather than a silent runtime error.
"""

import os

# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

DB_HOST: str = os.environ["DB_HOST"]
DB_PORT: str = os.environ["DB_PORT"]
DB_NAME: str = os.environ["DB_NAME"]
DB_USER: str = os.environ["DB_USER"]
DB_PASSWORD: str = os.environ["DB_PASSWORD"]

# Async SQLAlchemy URL used by the application at runtime. DATABASE_URL takes
# precedence when set (e.g. sqlite+aiosqlite for local development).
DATABASE_URL: str = os.environ.get("DATABASE_URL") or (
    f"postgresql+asyncpg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

DB_POOL_SIZE: int = int(os.environ.get("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW: int = int(os.environ.get("DB_MAX_OVERFLOW", "10"))

# ---------------------------------------------------------------------------
# Observability
# ---------------------------------------------------------------------------

SERVICE_NAME: str = os.environ["SERVICE_NAME"]
LOG_LEVEL: str = os.environ["LOG_LEVEL"]

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

# Prefix of the alert headers read by the UI toast layer: X-<name>-alert,
# X-<name>-params and X-<name>-error.
APPLICATION_NAME: str = os.environ.get("APPLICATION_NAME", "blogApp")

# Page size used when GET /api/comments is called without ?size=.
DEFAULT_PAGE_SIZE: int = int(os.environ.get("DEFAULT_PAGE_SIZE", "20"))

# Upper bound accepted for ?size=. Larger values are rejected with 400.
MAX_PAGE_SIZE: int = int(os.environ.get("MAX_PAGE_SIZE", "2000"))
