"""Generate paginated, filterable list endpoints for collections.

Usage::

    router = APIRouter()
    register_list_route(
        router,
        items,
        "/items",
        [require_session],
        {"defaultLimit": 5, "searchParams": {"enabled": True}},
    )

Each generated endpoint accepts ``sort``, ``direction``, ``filter``,
``limit`` and ``page`` query parameters and answers with a
:class:`~src.restlist.domain.pagination.PageEnvelope`.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Annotated, Any

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, params, status

from src.restlist.domain.list_query import ListRequestQuery
from src.restlist.domain.pagination import PageEnvelope
from src.restlist.domain.route_options import RouteOptions, merge_route_options
from src.restlist.repositories.interfaces import CollectionModelInterface
from src.restlist.services.list_config_store import get_list_config
from src.restlist.services.list_service import (
    ListService,
    StoreQueryError,
    model_display_name,
)

logger = logging.getLogger(__name__)

Middleware = Callable[..., Any] | params.Depends


class ConfigurationError(ValueError):
    """Raised when a list route is registered without required arguments."""


def _normalize_route_path(route_path: str) -> str:
    """Prefix the path with '/' if it lacks one."""
    return route_path if route_path.startswith("/") else f"/{route_path}"


def _as_dependency(middleware: Middleware) -> params.Depends:
    if isinstance(middleware, params.Depends):
        return middleware
    return Depends(middleware)


def _warn_if_not_searchable(model: CollectionModelInterface) -> None:
    """Log a diagnostic when the model cannot declare searchable fields."""
    config = get_list_config()
    if not config.warning:
        return
    if not config.method_name:
        logger.warning(
            "No searchable method configured; ?filter= will be ignored for model %s",
            model_display_name(model),
        )
        return
    if not callable(getattr(model, config.method_name, None)):
        logger.warning(
            "%s is not defined for model %s; ?filter= will be ignored",
            config.method_name,
            model_display_name(model),
        )


def register_list_route(
    router: APIRouter | FastAPI,
    model: CollectionModelInterface,
    route_path: str,
    middlewares: Sequence[Middleware] | None = None,
    options: RouteOptions | Mapping[str, Any] | None = None,
) -> Any:
    """Register a GET list endpoint for a collection.

    Middlewares are FastAPI dependencies resolved in order before the
    endpoint runs; one raising ``HTTPException`` stops the request before
    the collection is queried.

    Args:
        router: Router (or app) to attach the endpoint to
        model: Collection backing the endpoint
        route_path: Endpoint path, '/' is prepended if missing
        middlewares: Dependencies run before the endpoint
        options: Route options (defaultLimit, searchParams, defaultFields,
            defaultQueryOptions) merged shallowly over the defaults

    Returns:
        Whatever the router's GET registration returns (the endpoint)

    Raises:
        ConfigurationError: If router, model, or route_path is missing
    """
    if router is None or model is None or not route_path:
        raise ConfigurationError(
            "Missing parameter: router, model and route_path are required"
        )

    route_options = merge_route_options(options)
    dependencies = [_as_dependency(m) for m in middlewares or []]

    _warn_if_not_searchable(model)

    path = _normalize_route_path(route_path)
    service = ListService(model, route_options)

    async def list_records(
        sort: Annotated[str | None, Query(description="Sort field")] = None,
        direction: Annotated[
            str | None, Query(description="Sort direction (ASC or DESC)")
        ] = None,
        filter: Annotated[
            str | None, Query(description="Substring matched across searchable fields")
        ] = None,
        limit: Annotated[str | None, Query(description="Page size")] = None,
        page: Annotated[str | None, Query(description="1-based page number")] = None,
    ) -> PageEnvelope:
        request_query = ListRequestQuery(
            sort=sort, direction=direction, filter=filter, limit=limit, page=page
        )
        try:
            return await service.list_page(request_query)
        except StoreQueryError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

    list_records.__doc__ = f"List {model_display_name(model)} records with pagination."

    logger.info(
        "Registered list route GET %s for %s", path, model_display_name(model)
    )
    return router.get(
        path,
        response_model=PageEnvelope[dict[str, Any]],
        dependencies=dependencies,
    )(list_records)
