"""Translate list request parameters into a single store query.

Everything here is a pure function of the route options and the request:
no state is kept between calls, and the route's stored defaults are
deep-copied before being placed in a query so that downstream mutation
never leaks back into them.
"""

import copy
import logging
import re
from typing import Any

from src.restlist.domain.list_query import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    ListQuery,
    ListRequestQuery,
    SortSpec,
)
from src.restlist.domain.route_options import RouteOptions

logger = logging.getLogger(__name__)

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: Any) -> int | None:
    """Parse a plain decimal integer from a query value, None otherwise."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _DECIMAL_INT.fullmatch(text):
        return None
    return int(text)


def parse_positive_int_or_default(value: Any, default: int) -> int:
    """Return ``value`` as an int if it is a positive integer, else ``default``.

    Zero, negatives, empty strings and non-numeric input all fall back.
    """
    parsed = _parse_int(value)
    if parsed is None or parsed <= 0:
        return default
    return parsed


def parse_page_or_default(value: Any) -> int:
    """Return the 1-based page number, defaulting to 1 on bad input."""
    return parse_positive_int_or_default(value, 1)


def resolve_searchable_fields(model: Any, method_name: str | None) -> list[str]:
    """Ask a model for its searchable fields.

    Args:
        model: Collection model backing the route
        method_name: Name of the zero-argument capability to call

    Returns:
        Field names, or an empty list when the name is unset or the model
        has no callable attribute by that name
    """
    if not method_name:
        return []
    method = getattr(model, method_name, None)
    if not callable(method):
        return []
    return [str(field) for field in method()]


def build_search_predicate(
    search_params: dict[str, Any],
    filter_text: str | None,
    searchable_fields: list[str],
    *,
    escape_filter: bool = True,
) -> dict[str, Any]:
    """Build the store filter for one request.

    Without a filter the route's default conditions are used as-is. With
    one, the result is an ``$or`` of one branch per searchable field, each
    branch being the default conditions plus a case-sensitive substring
    ``$regex`` on that field.

    Args:
        search_params: Route default conditions
        filter_text: Raw ``?filter=`` value
        searchable_fields: Fields the model allows filtering on
        escape_filter: Treat the filter as a literal string rather than a
            regular expression

    Returns:
        Predicate dict, independent of ``search_params``
    """
    if not filter_text:
        return copy.deepcopy(search_params)

    if not searchable_fields:
        logger.warning(
            "Ignoring filter %r: model declares no searchable fields", filter_text
        )
        return copy.deepcopy(search_params)

    pattern = re.escape(filter_text) if escape_filter else filter_text
    branches = []
    for field in searchable_fields:
        branch = copy.deepcopy(search_params)
        branch[field] = {"$regex": pattern}
        branches.append(branch)
    return {"$or": branches}


def build_list_query(
    options: RouteOptions,
    request_query: ListRequestQuery,
    searchable_fields: list[str],
    *,
    escape_filter: bool = True,
) -> ListQuery:
    """Build the full store query for one list request.

    Args:
        options: Merged route options
        request_query: Raw request parameters
        searchable_fields: Fields the model allows filtering on
        escape_filter: Treat the filter as a literal string

    Returns:
        ListQuery with predicate, projection, options and page window
    """
    sort = SortSpec(
        field=request_query.sort or DEFAULT_SORT_FIELD,
        direction=request_query.direction or DEFAULT_SORT_DIRECTION,
    )

    limit = parse_positive_int_or_default(request_query.limit, options.default_limit)
    page = parse_page_or_default(request_query.page)
    offset = (page - 1) * limit if page > 1 and limit > 0 else 0

    predicate = build_search_predicate(
        options.search_params,
        request_query.filter,
        searchable_fields,
        escape_filter=escape_filter,
    )

    query_options = copy.deepcopy(options.default_query_options)
    query_options["order"] = [sort.model_dump()]

    return ListQuery(
        predicate=predicate,
        projection=copy.deepcopy(options.default_fields),
        query_options=query_options,
        sort=sort,
        limit=limit,
        offset=offset,
        page=page,
    )
