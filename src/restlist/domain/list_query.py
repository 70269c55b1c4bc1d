"""Pydantic models describing one list request and its store query."""

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_SORT_FIELD = "_id"
DEFAULT_SORT_DIRECTION = "DESC"


class ListRequestQuery(BaseModel):
    """Raw query parameters of a list request.

    Values are kept as the client sent them; numeric coercion happens in
    the query builder so malformed input falls back to defaults instead of
    failing validation.
    """

    sort: str | None = Field(default=None, description="Sort field")
    direction: str | None = Field(default=None, description="ASC or DESC")
    filter: str | None = Field(
        default=None, description="Substring matched across searchable fields"
    )
    limit: str | None = Field(default=None, description="Page size")
    page: str | None = Field(default=None, description="1-based page number")


class SortSpec(BaseModel):
    """Sort directive passed through to the store unvalidated."""

    field: str = Field(default=DEFAULT_SORT_FIELD)
    direction: str = Field(default=DEFAULT_SORT_DIRECTION)


class ListQuery(BaseModel):
    """Everything needed to fetch and slice one page."""

    predicate: dict[str, Any] = Field(description="Store filter conditions")
    projection: dict[str, Any] = Field(description="Field projection")
    query_options: dict[str, Any] = Field(description="Store query directives")
    sort: SortSpec
    limit: int = Field(description="Effective page size (<= 0 disables paging)")
    offset: int = Field(ge=0, description="Index of the first record in the page")
    page: int = Field(ge=1, description="Requested page number")
