"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging

from fastapi import FastAPI

from hello_world_api.api import create_api_application
from hello_world_api.config import AppSettings, config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def bootstrap_load_settings() -> AppSettings:
    """Load validated settings and configure process logging from them.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    settings = config_load_settings()
    config_configure_logging(settings.log_level)
    logger.info(
        "settings loaded environment=%s api_platform_status=%s api_platform_endpoints_enabled=%s",
        settings.environment_name,
        settings.api_platform_status,
        settings.api_platform_endpoints_enabled,
    )
    return settings


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings. Loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    if settings is None:
        settings = bootstrap_load_settings()
    return create_api_application(settings=settings)
