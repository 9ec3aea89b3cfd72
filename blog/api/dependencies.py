"""FastAPI dependency injection providers.

Dependencies are injected via function parameters using `Depends()`. This
pattern enables:
  - Clean separation between infrastructure and route handlers
  - Easy test substitution (swap the real principal or repo for a fake via
    ``app.dependency_overrides``)
  - Explicit context passing: the caller's identity is resolved here and
    handed to the repository as an argument, never read from a global

Example usage:
    @router.get("/comments/mine")
    async def get_my_comments(repo: CommentRepoDep, principal: PrincipalDep):
        return await repo.find_by_user_is_current_user(principal)
"""

from typing import Annotated, Optional

from fastapi import Depends, Query, Request

from blog.config import constants
from blog.domain.exceptions import BadRequestAlertException
from blog.domain.models import MAX_ID, Order, Pageable, Principal
from blog.infra.repositories import CommentRepository


# ---------------------------------------------------------------------------
# Database repositories
#
# Repositories are stateless: one instance per request, so there is no
# cross-request state. The underlying AsyncEngine (and
# its connection pool) is a module-level singleton shared across all requests.
# ---------------------------------------------------------------------------


def get_comment_repository() -> CommentRepository:
    """Dependency that provides a CommentRepository instance."""
    return CommentRepository()


CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]


# ---------------------------------------------------------------------------
# Current principal
# ---------------------------------------------------------------------------


def get_current_principal(request: Request) -> Optional[Principal]:
    """Dependency that resolves the authenticated caller, if any.

    Authentication happens upstream: an ASGI authentication middleware
    stores a Starlette ``BaseUser`` in ``scope["user"]``. This service never
    authenticates on its own.

    Returns:
        The caller as a Principal, or None when the request is anonymous or
        no authentication middleware is installed.
    """
    user = request.scope.get("user")
    if user is None or not getattr(user, "is_authenticated", False):
        return None

    username = getattr(user, "username", None) or getattr(user, "display_name", None)
    if not username:
        return None
    return Principal(username=username)


PrincipalDep = Annotated[Optional[Principal], Depends(get_current_principal)]


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


def get_pageable(
    page: int = Query(
        default=0,
        ge=0,
        le=MAX_ID // constants.MAX_PAGE_SIZE,
        description="Zero-based page index.",
    ),
    size: int = Query(
        default=constants.DEFAULT_PAGE_SIZE,
        ge=1,
        le=constants.MAX_PAGE_SIZE,
        description="Number of comments per page.",
    ),
    sort: list[str] = Query(
        default=[],
        description="Sort key as 'field[,asc|desc]'. Repeat for several keys.",
    ),
) -> Pageable:
    """Dependency that binds ?page=&size=&sort= to a Pageable.

    Raises:
        BadRequestAlertException: A sort field is not a sortable property.
    """
    orders: list[Order] = []
    for raw in sort:
        try:
            orders.extend(Order.parse(raw))
        except ValueError as exc:
            raise BadRequestAlertException(str(exc), "comment", "sortinvalid") from exc

    return Pageable(page=page, size=size, sort=tuple(orders))


PageableDep = Annotated[Pageable, Depends(get_pageable)]
