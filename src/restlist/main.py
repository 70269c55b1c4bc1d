"""FastAPI application entry point for restlist."""

import logging

from src.restlist.config import get_settings

# Configure logging before importing modules
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

from fastapi import FastAPI  # noqa: E402

from src.restlist.api.exception_handlers import register_exception_handlers  # noqa: E402
from src.restlist.api.routers import build_api_router  # noqa: E402
from src.restlist.api.routers.items import load_items_collection  # noqa: E402

app = FastAPI(
    title="restlist",
    description="Paginated, filterable list endpoints generated for collections",
    version="0.1.0",
)

register_exception_handlers(app)

# Include API routers
items = load_items_collection(get_settings().items_path)
app.include_router(build_api_router(items), prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
