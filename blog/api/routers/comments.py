"""Comment endpoints.

Exposes:
    POST   /api/comments                    — Create a comment.
    PUT    /api/comments                    — Update a comment.
    GET    /api/comments                    — Page through all comments.
    GET    /api/comments/mine               — Comments written by the caller.
    GET    /api/comments/{id}               — Fetch one comment.
    DELETE /api/comments/{id}               — Delete one comment.
    GET    /api/comments/story/{story_id}   — All comments on a story.
    DELETE /api/comments/story/{story_id}   — Delete all comments on a story.

Store errors are not caught here; blog.api.errors maps them to 500/503.
"""

from typing import Union

import structlog
from fastapi import APIRouter, Path, Response, status

from blog.api import headers
from blog.api.dependencies import CommentRepoDep, PageableDep, PrincipalDep
from blog.api.models import ProblemResponse
from blog.api.timing import timed
from blog.config import constants
from blog.domain.exceptions import BadRequestAlertException
from blog.domain.models import MAX_ID, Comment
from blog.infra.repositories import CommentRepository

router = APIRouter(prefix="/api", tags=["comments"])

ENTITY_NAME = "comment"
BASE_URL = "/api/comments"

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ProblemResponse}}


def _logger(endpoint: str, **context: object) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger().bind(
        service=constants.SERVICE_NAME,
        endpoint=endpoint,
        **context,
    )


async def _create(comment: Comment, repo: CommentRepository, response: Response) -> Comment:
    """Shared create path for POST, and for PUT without an id."""
    if comment.id is not None:
        raise BadRequestAlertException(
            "A new comment cannot already have an ID", ENTITY_NAME, "idexists"
        )

    result = await repo.save(comment)

    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"{BASE_URL}/{result.id}"
    response.headers.update(headers.entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.post(
    "/comments",
    response_model=Comment,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Create a comment",
)
@timed("api.comments.create")
async def create_comment(
    comment: Comment,
    repo: CommentRepoDep,
    response: Response,
) -> Comment:
    """Create a new comment.

    Returns:
        The saved comment with status 201, a Location header and a creation
        alert.

    Raises:
        BadRequestAlertException: The body already carries an id (``idexists``).
    """
    _logger("/api/comments", story_id=comment.story.id).debug(
        "api.comments.create.request", comment=comment.model_dump(mode="json")
    )
    return await _create(comment, repo, response)


@router.put(
    "/comments",
    response_model=Comment,
    status_code=status.HTTP_200_OK,
    responses=_BAD_REQUEST,
    summary="Update a comment",
    description=(
        "Saves the comment under its id. A body without an id is created "
        "instead and answered with 201, exactly like POST /api/comments."
    ),
)
@timed("api.comments.update")
async def update_comment(
    comment: Comment,
    repo: CommentRepoDep,
    response: Response,
) -> Comment:
    """Update an existing comment, or create it when ``id`` is null."""
    _logger("/api/comments", comment_id=comment.id).debug(
        "api.comments.update.request", comment=comment.model_dump(mode="json")
    )
    if comment.id is None:
        return await _create(comment, repo, response)

    result = await repo.save(comment)

    response.headers.update(headers.entity_update_alert(ENTITY_NAME, str(result.id)))
    return result


@router.get(
    "/comments",
    response_model=list[Comment],
    status_code=status.HTTP_200_OK,
    responses=_BAD_REQUEST,
    summary="List comments, one page at a time",
)
@timed("api.comments.list")
async def get_all_comments(
    repo: CommentRepoDep,
    pageable: PageableDep,
    response: Response,
) -> list[Comment]:
    """Return one page of comments with X-Total-Count and Link headers."""
    _logger("/api/comments", page=pageable.page, size=pageable.size).debug(
        "api.comments.list.request"
    )

    page = await repo.find_all(pageable)

    response.headers.update(headers.pagination_headers(page, BASE_URL))
    return page.content


@router.get(
    "/comments/mine",
    response_model=list[Comment],
    status_code=status.HTTP_200_OK,
    summary="List the caller's comments",
    description="Empty when the request carries no authenticated user.",
)
@timed("api.comments.mine")
async def get_my_comments(
    repo: CommentRepoDep,
    principal: PrincipalDep,
) -> list[Comment]:
    _logger("/api/comments/mine", authenticated=principal is not None).debug(
        "api.comments.mine.request"
    )
    return await repo.find_by_user_is_current_user(principal)


@router.get(
    "/comments/{id}",
    response_model=Comment,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_404_NOT_FOUND: {"description": "No comment with this id."}},
    summary="Get a comment",
)
@timed("api.comments.get")
async def get_comment(
    repo: CommentRepoDep,
    id: int = Path(ge=1, le=MAX_ID, description="Comment ID."),
) -> Union[Comment, Response]:
    """Return the comment, or an empty 404 when it does not exist."""
    log = _logger("/api/comments/{id}", comment_id=id)
    log.debug("api.comments.get.request")

    comment = await repo.find_one(id)
    if comment is None:
        log.debug("api.comments.get.not_found")
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return comment


@router.delete(
    "/comments/{id}",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="Delete a comment",
    description="Succeeds whether or not the comment exists.",
)
@timed("api.comments.delete")
async def delete_comment(
    repo: CommentRepoDep,
    id: int = Path(ge=1, le=MAX_ID, description="Comment ID."),
) -> Response:
    _logger("/api/comments/{id}", comment_id=id).debug("api.comments.delete.request")

    await repo.delete(id)

    return Response(
        status_code=status.HTTP_200_OK,
        headers=headers.entity_deletion_alert(ENTITY_NAME, str(id)),
    )


@router.get(
    "/comments/story/{story_id}",
    response_model=list[Comment],
    status_code=status.HTTP_200_OK,
    summary="List all comments on a story",
)
@timed("api.comments.by_story")
async def get_comments_by_story(
    repo: CommentRepoDep,
    story_id: int = Path(ge=1, le=MAX_ID, description="Story ID."),
) -> list[Comment]:
    """Return every comment on the story; an empty list when there are none."""
    _logger("/api/comments/story/{story_id}", story_id=story_id).debug(
        "api.comments.by_story.request"
    )
    return await repo.find_by_story_id(story_id)


@router.delete(
    "/comments/story/{story_id}",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="Delete all comments on a story",
)
@timed("api.comments.delete_by_story")
async def delete_comments_by_story(
    repo: CommentRepoDep,
    story_id: int = Path(ge=1, le=MAX_ID, description="Story ID."),
) -> Response:
    _logger("/api/comments/story/{story_id}", story_id=story_id).debug(
        "api.comments.delete_by_story.request"
    )

    await repo.delete_by_story(story_id)

    return Response(
        status_code=status.HTTP_200_OK,
        headers=headers.entity_deletion_alert(ENTITY_NAME, str(story_id)),
    )
