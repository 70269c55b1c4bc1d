"""API routers package."""

from fastapi import APIRouter

from src.restlist.api.routers.items import build_items_router
from src.restlist.repositories.interfaces import CollectionModelInterface


def build_api_router(items: CollectionModelInterface) -> APIRouter:
    """Assemble every API router around its collections."""
    api_router = APIRouter()

    # Sample items collection
    api_router.include_router(build_items_router(items))

    return api_router
