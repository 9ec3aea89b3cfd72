"""SQLAlchemy Core table definitions.

All table objects are registered against the shared ``metadata`` instance from
``blog.infra.db`` so that Alembic's autogenerate can discover them and the
repository layer can reference them for queries.

No ORM declarative mapping is used. Domain models (Pydantic) are hydrated
manually from query result rows inside the repository layer, keeping the
domain layer free of SQLAlchemy concerns.

Tables:
    story    — Blog stories. Comments reference them by id.
    user     — Blog users. Comments reference them by login (unique).
    comment  — Comments on stories.

Foreign keys enforce the references but declare no ON DELETE action:
removing a story's comments is done explicitly by the application.
"""

from __future__ import annotations

import sqlalchemy as sa

from blog.infra.db import metadata

# SQLite only auto-assigns rowids to INTEGER PRIMARY KEY columns.
_ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")

# ---------------------------------------------------------------------------
# story
# ---------------------------------------------------------------------------

story_table: sa.Table = sa.Table(
    "story",
    metadata,
    sa.Column("id", _ID_TYPE, primary_key=True, autoincrement=True),
    sa.Column("title", sa.VARCHAR(255), nullable=False),
)

# ---------------------------------------------------------------------------
# user
# ---------------------------------------------------------------------------

user_table: sa.Table = sa.Table(
    "user",
    metadata,
    sa.Column("id", _ID_TYPE, primary_key=True, autoincrement=True),
    sa.Column("login", sa.VARCHAR(50), nullable=False),
    sa.UniqueConstraint("login", name="uq_user_login"),
)

# ---------------------------------------------------------------------------
# comment
# ---------------------------------------------------------------------------

comment_table: sa.Table = sa.Table(
    "comment",
    metadata,
    sa.Column("id", _ID_TYPE, primary_key=True, autoincrement=True),
    sa.Column("text", sa.VARCHAR(2000), nullable=False),
    sa.Column("created_date", sa.TIMESTAMP(timezone=True), nullable=True),
    sa.Column(
        "story_id",
        _ID_TYPE,
        sa.ForeignKey("story.id", name="fk_comment_story_id"),
        nullable=False,
    ),
    sa.Column(
        "user_login",
        sa.VARCHAR(50),
        sa.ForeignKey("user.login", name="fk_comment_user_login"),
        nullable=False,
    ),
    sa.Index("ix_comment_story_id", "story_id"),
    sa.Index("ix_comment_user_login", "user_login"),
)
