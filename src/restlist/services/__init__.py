# Services package (list query and pagination logic)

from src.restlist.services.list_config_store import (
    configure,
    get_list_config,
    reset_list_config,
)
from src.restlist.services.list_query_builder import (
    build_list_query,
    build_search_predicate,
    parse_page_or_default,
    parse_positive_int_or_default,
    resolve_searchable_fields,
)
from src.restlist.services.list_service import ListService, StoreQueryError
from src.restlist.services.page_assembler import assemble, count_pages

__all__ = [
    # Global list config
    "configure",
    "get_list_config",
    "reset_list_config",
    # Query builder
    "build_list_query",
    "build_search_predicate",
    "parse_page_or_default",
    "parse_positive_int_or_default",
    "resolve_searchable_fields",
    # List service
    "ListService",
    "StoreQueryError",
    # Page assembler
    "assemble",
    "count_pages",
]
