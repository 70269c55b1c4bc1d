"""Process-wide list configuration.

Holds the single :class:`ListConfig` shared by every generated list route.
Routes read it at registration (for the missing-capability warning) and
again on every request (for the searchable method name), so a
``configure`` call also changes the filtering of routes registered before
it. Configure once during startup; concurrent ``configure`` calls while
requests are being served are not supported.
"""

import logging
from collections.abc import Mapping
from typing import Any

from src.restlist.config import get_settings
from src.restlist.domain.list_config import ListConfig

logger = logging.getLogger(__name__)


def _default_config() -> ListConfig:
    """Build the startup config from application settings."""
    settings = get_settings()
    return ListConfig(
        warning=settings.warn_on_missing_searchable,
        method_name=settings.searchable_method_name,
    )


_config: ListConfig = _default_config()


def get_list_config() -> ListConfig:
    """Return the current process-wide list configuration."""
    return _config


def configure(params: ListConfig | Mapping[str, Any]) -> ListConfig:
    """Replace the process-wide list configuration.

    The replacement is wholesale: any knob missing from ``params`` becomes
    ``None`` rather than keeping its previous or default value.

    Args:
        params: A ListConfig, or a mapping with ``warning`` (0/1 or bool)
            and ``methodName``/``method_name`` keys

    Returns:
        The configuration now in effect
    """
    global _config

    config = params if isinstance(params, ListConfig) else ListConfig.model_validate(
        dict(params)
    )
    _config = config
    logger.info(
        "List config replaced (warning=%s, method_name=%s)",
        config.warning,
        config.method_name,
    )
    return config


def reset_list_config() -> ListConfig:
    """Restore the settings-derived default configuration."""
    global _config

    _config = _default_config()
    return _config
