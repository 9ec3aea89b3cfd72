"""Global pytest configuration.

Sets required environment variables at module level so that
``blog.config.constants`` can be imported without raising ``KeyError``.

``blog.config.constants`` reads ``os.environ["KEY"]`` (not ``.get``) at import
time. ``conftest.py`` files are loaded by pytest *before* test modules are
collected or imported, which makes this the only reliable injection point
for mandatory env vars.

Rules:
- Do NOT import from ``blog.*`` at module level here — constants must not be
  imported until after the env vars below have been applied. Fixtures import
  lazily inside their bodies.
- Use ``setdefault`` so that real env vars set by CI/CD or the developer's
  shell are not clobbered.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterator

import pytest

# ---------------------------------------------------------------------------
# Mandatory environment variables consumed by blog.config.constants
# ---------------------------------------------------------------------------

_TEST_ENV: dict[str, str] = {
    # Database
    "DB_HOST": "localhost",
    "DB_PORT": "5432",
    "DB_NAME": "blog_test",
    "DB_USER": "test_user",
    "DB_PASSWORD": "test_password",
    # Observability
    "SERVICE_NAME": "blog-comments-test",
    "LOG_LEVEL": "ERROR",
}

for _key, _value in _TEST_ENV.items():
    os.environ.setdefault(_key, _value)


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Any]:
    """Point the engine singleton at a fresh SQLite file with the schema created.

    The schema is created through a plain synchronous engine; the application
    then talks to the same file through aiosqlite. NullPool opens a new
    connection per transaction, so each TestClient request (which runs on
    its own event loop) never reuses a connection bound to another loop.
    """
    import sqlalchemy as sa
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import NullPool

    import blog.infra.tables  # noqa: F401
    from blog.infra import db

    path = tmp_path / "blog.db"

    sync_engine = sa.create_engine(f"sqlite:///{path}")
    db.metadata.create_all(sync_engine)
    sync_engine.dispose()

    engine = create_async_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)
    monkeypatch.setattr(db, "_engine", engine)
    yield engine


@pytest.fixture
def client(database: Any) -> Iterator[Any]:
    """TestClient over the real app, backed by the ``database`` fixture."""
    from fastapi.testclient import TestClient

    from blog.api.main import app

    yield TestClient(app)
    app.dependency_overrides.clear()
