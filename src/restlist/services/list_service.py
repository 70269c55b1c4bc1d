"""Service layer serving pages of one collection for a list route."""

import logging

from src.restlist.config import get_settings
from src.restlist.domain.list_query import ListRequestQuery
from src.restlist.domain.pagination import PageEnvelope
from src.restlist.domain.route_options import RouteOptions
from src.restlist.repositories.interfaces import CollectionModelInterface
from src.restlist.services.list_config_store import get_list_config
from src.restlist.services.list_query_builder import (
    build_list_query,
    resolve_searchable_fields,
)
from src.restlist.services.page_assembler import assemble

logger = logging.getLogger(__name__)


class StoreQueryError(Exception):
    """Raised when the collection store fails to execute a list query."""


def model_display_name(model: object) -> str:
    """Name identifying a model in diagnostics."""
    return getattr(model, "model_name", None) or type(model).__name__


class ListService:
    """Business logic behind one generated list route.

    Builds the store query from the request, fetches every matching
    record, and slices the page. Instances hold only the route's model
    and frozen options, so one service safely serves concurrent requests.
    """

    def __init__(
        self, model: CollectionModelInterface, options: RouteOptions
    ) -> None:
        """Initialize service with the route's collection and options.

        Args:
            model: Collection to query
            options: Merged route options
        """
        self._model = model
        self._options = options

    async def list_page(self, request_query: ListRequestQuery) -> PageEnvelope:
        """Fetch one page of records.

        The searchable method name is read from the process-wide config on
        every call, so ``configure`` affects routes registered earlier.

        Args:
            request_query: Raw request parameters

        Returns:
            PageEnvelope for the requested page

        Raises:
            StoreQueryError: If the searchable field lookup or the store's
                find call fails
        """
        config = get_list_config()
        name = model_display_name(self._model)
        try:
            searchable = resolve_searchable_fields(self._model, config.method_name)
            query = build_list_query(
                self._options,
                request_query,
                searchable,
                escape_filter=get_settings().escape_filter,
            )
            records = await self._model.find(
                query.predicate, query.projection, query.query_options
            )
        except Exception as e:
            logger.exception("List query on %s failed", name)
            raise StoreQueryError(f"Failed to query {name}: {e}") from e

        logger.debug(
            "Listed %d %s records (page=%d, limit=%d)",
            len(records),
            name,
            query.page,
            query.limit,
        )
        return assemble(records, query.limit, query.offset, query.page)
