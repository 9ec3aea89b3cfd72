"""Domain models.

Pure data layer — no infrastructure, no configuration, no I/O.
Every other layer imports from here; this module imports nothing internal.

Pydantic v2 is used for:
  - Field validation at construction time (request bodies are validated
    against these models before any handler code runs)
  - JSON serialisation (API responses use the camelCase aliases)
  - OpenAPI schema generation (FastAPI)

All models are frozen (immutable). A saved comment is a new instance
returned by the repository, never a mutation of the submitted one.
"""

from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Ids are stored in BIGINT columns.
MAX_ID = 2**63 - 1


# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------


class UserRef(BaseModel):
    """Reference to the user who wrote a comment, keyed by login."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str = Field(min_length=1, max_length=50, description="User login.")


class StoryRef(BaseModel):
    """Reference to the story a comment is attached to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(ge=1, le=MAX_ID, description="Story ID.")


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------


class Comment(BaseModel):
    """User-generated text attached to a story.

    `id` is assigned by the store on first save and is None before that.
    Clients never choose an id on create; the API rejects a preset id.

    `created_date` is opaque to the service and passed through verbatim.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: Optional[int] = Field(
        default=None, ge=1, le=MAX_ID, description="Server-assigned ID."
    )
    user: UserRef
    story: StoryRef
    text: str = Field(min_length=1, max_length=2000, description="Comment body.")
    created_date: Optional[datetime] = Field(
        default=None,
        alias="createdDate",
        description="Client-supplied creation timestamp.",
    )


# ---------------------------------------------------------------------------
# Principal
# ---------------------------------------------------------------------------


class Principal(BaseModel):
    """The authenticated caller, as resolved by an upstream auth layer."""

    model_config = ConfigDict(frozen=True)

    username: str


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

# Public sort property name → comment column name. Both the JSON property
# name and the snake_case column name are accepted.
COMMENT_SORT_PROPERTIES: dict[str, str] = {
    "id": "id",
    "text": "text",
    "createdDate": "created_date",
    "created_date": "created_date",
    "user.login": "user_login",
    "user_login": "user_login",
    "story.id": "story_id",
    "story_id": "story_id",
}


class SortDirection(str, Enum):
    """Sort direction. Inherits from str so it renders as the raw value."""

    ASC = "asc"
    DESC = "desc"


class Order(BaseModel):
    """A single sort key: a comment column and a direction."""

    model_config = ConfigDict(frozen=True)

    column: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, raw: str) -> list[Order]:
        """Parse one ``sort`` query value of the form ``field[,field...][,asc|desc]``.

        A trailing ``asc``/``desc`` token applies to every field before it.
        Empty tokens are skipped.

        Raises:
            ValueError: A field is not a sortable comment property.
        """
        tokens = [t.strip() for t in raw.split(",") if t.strip()]
        direction = SortDirection.ASC
        if tokens and tokens[-1].lower() in (SortDirection.ASC.value, SortDirection.DESC.value):
            direction = SortDirection(tokens.pop().lower())

        orders: list[Order] = []
        for token in tokens:
            column = COMMENT_SORT_PROPERTIES.get(token)
            if column is None:
                raise ValueError(f"Unknown sort property '{token}'")
            orders.append(cls(column=column, direction=direction))
        return orders


class Pageable(BaseModel):
    """Page request: zero-based page index, page size and sort keys."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: tuple[Order, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel):
    """One slice of comments plus the totals needed to page through the rest."""

    model_config = ConfigDict(frozen=True)

    content: list[Comment]
    total_elements: int = Field(ge=0)
    number: int = Field(ge=0, description="Zero-based index of this page.")
    size: int = Field(ge=1, description="Requested page size.")

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0
