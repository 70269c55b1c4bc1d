"""Slice a fetched result set into a page envelope."""

from collections.abc import Sequence
from typing import Any, TypeVar

from src.restlist.domain.pagination import PageEnvelope
from src.restlist.services.list_query_builder import parse_page_or_default

T = TypeVar("T")


def count_pages(total_results: int, limit: int) -> int:
    """Number of pages needed for ``total_results`` at ``limit`` per page.

    A limit of zero or less means a single unpaginated page.
    """
    if limit <= 0:
        return 1
    pages, remainder = divmod(total_results, limit)
    return pages + (1 if remainder > 0 else 0)


def assemble(
    raw_results: Sequence[T],
    limit: int,
    offset: int,
    requested_page: Any,
) -> PageEnvelope[T]:
    """Build the response envelope for one page.

    The input sequence is not modified; the page window is a new list.

    Args:
        raw_results: Every record matched by the query
        limit: Page size, <= 0 to return everything
        offset: Index of the first record in the page
        requested_page: Page number from the request (parsed leniently)

    Returns:
        PageEnvelope with the page window and totals
    """
    total_results = len(raw_results)

    if limit > 0:
        results = list(raw_results[offset : offset + limit])
    else:
        results = list(raw_results)

    return PageEnvelope(
        results=results,
        current_page=parse_page_or_default(requested_page),
        limit=limit,
        total_pages=count_pages(total_results, limit),
        total_results=total_results,
    )
