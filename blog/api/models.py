"""API error response models.

Request and success bodies use the domain models (blog.domain.models)
directly, since the HTTP contract for a comment is the comment itself.
The models here describe the error bodies rendered by blog.api.errors and
feed the OpenAPI schema via ``responses=`` on each route.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    """One constraint violation on a request field."""

    model_config = ConfigDict(populate_by_name=True)

    object_name: str = Field(alias="objectName", description="Validated object, e.g. 'comment'.")
    field: str = Field(description="Dotted path of the offending field, e.g. 'user.login'.")
    message: str


class ProblemResponse(BaseModel):
    """Error body returned for 4xx and 5xx responses."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(description="Human-readable summary.")
    status: int = Field(description="HTTP status code.")
    message: Optional[str] = Field(
        default=None, description="Translation key, e.g. 'error.idexists'."
    )
    entity_name: Optional[str] = Field(default=None, alias="entityName")
    error_key: Optional[str] = Field(default=None, alias="errorKey")
    params: Optional[str] = None
    field_errors: Optional[list[FieldError]] = Field(default=None, alias="fieldErrors")

    def render(self) -> dict[str, object]:
        """JSON-ready body with camelCase keys and unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
