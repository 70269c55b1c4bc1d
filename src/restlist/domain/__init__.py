# Domain models package (Pydantic models)

from src.restlist.domain.list_config import ListConfig
from src.restlist.domain.list_query import ListQuery, ListRequestQuery, SortSpec
from src.restlist.domain.pagination import PageEnvelope
from src.restlist.domain.route_options import RouteOptions, merge_route_options

__all__ = [
    "ListConfig",
    "ListQuery",
    "ListRequestQuery",
    "PageEnvelope",
    "RouteOptions",
    "SortSpec",
    "merge_route_options",
]
