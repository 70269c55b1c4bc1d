"""Generic pagination response model."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class PageEnvelope(BaseModel, Generic[T]):
    """Paginated response wrapper for generated list endpoints.

    Serialized with camelCase keys (``currentPage``, ``totalPages``,
    ``totalResults``). ``total_results`` counts the matched set before
    the page window is applied.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    results: list[T] = Field(description="Page of results")
    current_page: int = Field(ge=1, description="Requested page number")
    limit: int = Field(description="Page size applied (<= 0 means unpaginated)")
    total_pages: int = Field(ge=0, description="Number of pages available")
    total_results: int = Field(ge=0, description="Total number of matched records")
