"""Centralized application settings via pydantic-settings.

Loads configuration from environment variables with the RESTLIST_ prefix.
Defaults suit local development; override via environment variables for
Docker/production deployment.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The list-route knobs seed the process-wide list configuration at import
    time (see :mod:`src.restlist.services.list_config_store`). Changing them
    afterwards has no effect until the config is reset.

    Examples:
        Disable the missing-searchable warning::

            RESTLIST_WARN_ON_MISSING_SEARCHABLE=false uv run fastapi dev

        Serve a different fixture collection::

            RESTLIST_ITEMS_PATH=/mnt/data/items.json uv run fastapi dev
    """

    # List route defaults
    warn_on_missing_searchable: bool = True
    searchable_method_name: str = "searchable"

    # Escape regex metacharacters in ?filter= before building $regex conditions
    escape_filter: bool = True

    # Sample collection served by the bundled app
    items_path: Path = Path("data/items.json")

    log_level: str = "INFO"

    model_config = {"env_prefix": "RESTLIST_"}


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton.

    Uses lru_cache so the Settings object is created once and reused
    across all FastAPI Depends injections.
    """
    return Settings()
