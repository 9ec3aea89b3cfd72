"""Database repository layer.

Repositories provide typed, async methods for reading and writing domain
models via SQLAlchemy Core. They do not log and do not contain business
logic — they are pure data access objects.

Responsibilities:
  - Construct and execute SQL statements.
  - Map result rows to domain model instances.
  - Let SQLAlchemy exceptions propagate to callers (the API exception
    handlers) which then classify them as PersistenceTransientError or
    PersistenceValidationError.

What repositories do NOT do:
  - They do not catch exceptions.
  - They do not log.
  - They do not own transactions (each method is one atomic transaction via
    get_connection(), which uses engine.begin()).

Classes:
    CommentRepository — save(), find_one(), find_all(), delete(),
                        find_by_story_id(), delete_by_story(),
                        find_by_user_is_current_user()
"""

from __future__ import annotations

from typing import Any, Optional

import sqlalchemy as sa

from blog.domain.models import (
    Comment,
    Order,
    Page,
    Pageable,
    Principal,
    SortDirection,
    StoryRef,
    UserRef,
)
from blog.infra.db import get_connection
from blog.infra.tables import comment_table


def _row_to_comment(row: sa.engine.Row) -> Comment:  # type: ignore[type-arg]
    """Map a SQLAlchemy result row to a Comment domain model."""
    return Comment(
        id=row.id,
        user=UserRef(login=row.user_login),
        story=StoryRef(id=row.story_id),
        text=row.text,
        created_date=row.created_date,
    )


def _comment_values(comment: Comment) -> dict[str, Any]:
    """Column values for a comment, excluding ``id``."""
    return {
        "text": comment.text,
        "created_date": comment.created_date,
        "story_id": comment.story.id,
        "user_login": comment.user.login,
    }


def _order_by(orders: tuple[Order, ...]) -> list[sa.ColumnElement[Any]]:
    """Translate sort keys into ORDER BY clauses, with ``id`` as tie-breaker."""
    clauses: list[sa.ColumnElement[Any]] = []
    for order in orders:
        column = comment_table.c[order.column]
        clauses.append(column.desc() if order.direction is SortDirection.DESC else column.asc())
    if not any(order.column == "id" for order in orders):
        clauses.append(comment_table.c.id.asc())
    return clauses


# ---------------------------------------------------------------------------
# CommentRepository
# ---------------------------------------------------------------------------


class CommentRepository:
    """Data access layer for the ``comment`` table."""

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment or update an existing one.

        A comment without an id is inserted and receives a store-assigned id.
        A comment with an id updates that row. If no row has that id the
        comment is inserted as new and the store assigns its id; the id the
        caller sent is not kept. Update and fallback insert share one
        transaction.

        Args:
            comment: Comment to persist.

        Returns:
            The persisted Comment, with a non-null ``id``.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Propagated to caller.
        """
        values = _comment_values(comment)

        async with get_connection() as conn:
            if comment.id is None:
                result = await conn.execute(
                    sa.insert(comment_table).values(values).returning(comment_table)
                )
                row = result.fetchone()
            else:
                result = await conn.execute(
                    sa.update(comment_table)
                    .where(comment_table.c.id == comment.id)
                    .values(values)
                    .returning(comment_table)
                )
                row = result.fetchone()
                if row is None:
                    result = await conn.execute(
                        sa.insert(comment_table)
                        .values(values)
                        .returning(comment_table)
                    )
                    row = result.fetchone()

        assert row is not None, "INSERT/UPDATE ... RETURNING returned no row"  # noqa: S101
        return _row_to_comment(row)

    async def find_one(self, comment_id: int) -> Optional[Comment]:
        """Return the comment with the given id, or None if absent."""
        stmt = sa.select(comment_table).where(comment_table.c.id == comment_id)

        async with get_connection() as conn:
            result = await conn.execute(stmt)
            row = result.fetchone()

        return _row_to_comment(row) if row is not None else None

    async def find_all(self, pageable: Pageable) -> Page:
        """Return one page of comments plus the total comment count.

        Args:
            pageable: Page index, page size and sort keys. Without sort keys
                      comments are ordered by id ascending.

        Returns:
            Page whose ``content`` holds at most ``pageable.size`` comments.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Propagated to caller.
        """
        count_stmt = sa.select(sa.func.count()).select_from(comment_table)
        stmt = (
            sa.select(comment_table)
            .order_by(*_order_by(pageable.sort))
            .limit(pageable.size)
            .offset(pageable.offset)
        )

        async with get_connection() as conn:
            total = (await conn.execute(count_stmt)).scalar_one()
            result = await conn.execute(stmt)
            rows = result.fetchall()

        return Page(
            content=[_row_to_comment(row) for row in rows],
            total_elements=total,
            number=pageable.page,
            size=pageable.size,
        )

    async def delete(self, comment_id: int) -> None:
        """Delete the comment with the given id. Deleting a missing id is a no-op."""
        stmt = sa.delete(comment_table).where(comment_table.c.id == comment_id)

        async with get_connection() as conn:
            await conn.execute(stmt)

    async def find_by_story_id(self, story_id: int) -> list[Comment]:
        """Return every comment attached to ``story_id``, ordered by id."""
        stmt = (
            sa.select(comment_table)
            .where(comment_table.c.story_id == story_id)
            .order_by(comment_table.c.id.asc())
        )

        async with get_connection() as conn:
            result = await conn.execute(stmt)
            rows = result.fetchall()

        return [_row_to_comment(row) for row in rows]

    async def delete_by_story(self, story_id: int) -> None:
        """Delete every comment attached to ``story_id``.

        Issued as a single DELETE statement inside one transaction, so either
        all matching comments are removed or none are.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Propagated to caller.
        """
        stmt = sa.delete(comment_table).where(comment_table.c.story_id == story_id)

        async with get_connection() as conn:
            await conn.execute(stmt)

    async def find_by_user_is_current_user(
        self, principal: Optional[Principal]
    ) -> list[Comment]:
        """Return the comments written by ``principal``, ordered by id.

        Args:
            principal: The authenticated caller, or None for an anonymous
                       request. Anonymous callers get an empty list.
        """
        if principal is None:
            return []

        stmt = (
            sa.select(comment_table)
            .where(comment_table.c.user_login == principal.username)
            .order_by(comment_table.c.id.asc())
        )

        async with get_connection() as conn:
            result = await conn.execute(stmt)
            rows = result.fetchall()

        return [_row_to_comment(row) for row in rows]
