"""Initial schema: story, user and comment tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates:
    story    — Blog stories.
    user     — Blog users, unique by login.
    comment  — Comments; story_id → story.id, user_login → user.login.

Notes:
    - Foreign keys carry no ON DELETE action. Comments of a story are
      removed by the application (DELETE /api/comments/story/{story_id}).
    - Constraints and indexes are named explicitly to allow future ALTER
      operations.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# Revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None


def upgrade() -> None:
    # ------------------------------------------------------------------
    # story
    # ------------------------------------------------------------------
    op.create_table(
        "story",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("title", sa.VARCHAR(255), nullable=False),
    )

    # ------------------------------------------------------------------
    # user
    # ------------------------------------------------------------------
    op.create_table(
        "user",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("login", sa.VARCHAR(50), nullable=False),
        sa.UniqueConstraint("login", name="uq_user_login"),
    )

    # ------------------------------------------------------------------
    # comment
    # ------------------------------------------------------------------
    op.create_table(
        "comment",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("text", sa.VARCHAR(2000), nullable=False),
        sa.Column("created_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("story_id", sa.BigInteger, nullable=False),
        sa.Column("user_login", sa.VARCHAR(50), nullable=False),
        sa.ForeignKeyConstraint(["story_id"], ["story.id"], name="fk_comment_story_id"),
        sa.ForeignKeyConstraint(["user_login"], ["user.login"], name="fk_comment_user_login"),
    )
    op.create_index("ix_comment_story_id", "comment", ["story_id"])
    op.create_index("ix_comment_user_login", "comment", ["user_login"])


def downgrade() -> None:
    op.drop_index("ix_comment_user_login", table_name="comment")
    op.drop_index("ix_comment_story_id", table_name="comment")
    op.drop_table("comment")
    op.drop_table("user")
    op.drop_table("story")
