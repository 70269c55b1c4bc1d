"""API router serving the sample items collection.

Registers the four list route variants: plain listing, enabled-only
listing, label-only projection, and an admin-guarded listing.
"""

import logging
from pathlib import Path

from fastapi import APIRouter

from src.restlist.api.dependencies import require_admin
from src.restlist.api.rest_list import register_list_route
from src.restlist.repositories.interfaces import CollectionModelInterface
from src.restlist.repositories.memory_collection import (
    InMemoryCollection,
    JsonFileCollection,
)

logger = logging.getLogger(__name__)

ITEMS_SEARCHABLE_FIELDS = ["label", "description"]


def load_items_collection(path: Path) -> CollectionModelInterface:
    """Load the items collection, empty if the fixture file is missing."""
    if not path.exists():
        logger.warning("Items file %s not found, serving an empty collection", path)
        return InMemoryCollection("Items", [], ITEMS_SEARCHABLE_FIELDS)
    return JsonFileCollection(path, "Items", ITEMS_SEARCHABLE_FIELDS)


def build_items_router(items: CollectionModelInterface) -> APIRouter:
    """Build the items router around a collection.

    Args:
        items: Collection holding item records

    Returns:
        APIRouter with the items list routes registered
    """
    router = APIRouter(tags=["items"])

    register_list_route(router, items, "items")

    register_list_route(
        router, items, "items_enabled", None, {"searchParams": {"enabled": True}}
    )

    register_list_route(
        router, items, "items_labels", None, {"defaultFields": {"label": 1}}
    )

    register_list_route(router, items, "items_admin", [require_admin])

    return router
