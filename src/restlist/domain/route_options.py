"""Per-route options for generated list endpoints."""

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RouteOptions(BaseModel):
    """Query-shaping defaults captured by one registered list route.

    Keys may be given in snake_case or camelCase (``defaultLimit``,
    ``searchParams``...). A ``default_limit`` of zero or less disables
    pagination for the route.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    default_limit: int = Field(
        default=10,
        description="Page size used when the request gives no usable limit",
    )
    search_params: dict[str, Any] = Field(
        default_factory=dict,
        description="Conditions every listed record must satisfy",
    )
    default_fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Field projection passed to the store (field -> 0/1)",
    )
    default_query_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra store query directives (e.g. skip)",
    )


def merge_route_options(
    options: RouteOptions | Mapping[str, Any] | None,
) -> RouteOptions:
    """Merge caller options over the defaults.

    The merge is shallow: each top-level key the caller provides replaces
    the default entirely, mappings included.

    Args:
        options: Caller options, a RouteOptions instance, or None

    Returns:
        Frozen RouteOptions for the route, never sharing mutable state
        with the caller's input
    """
    if options is None:
        return RouteOptions()
    if isinstance(options, RouteOptions):
        return options.model_copy(deep=True)
    return RouteOptions.model_validate(copy.deepcopy(dict(options)))
