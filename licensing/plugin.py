"""
Licensing plugin descriptor.
"""
import logging

from core.plugins import Plugin, PluginRegistry
from licensing.config import (
    ENDPOINTS,
    PLUGIN_DESCRIPTION,
    PLUGIN_NAME,
    PLUGIN_VERSION,
    LicensingConfig,
)

logger = logging.getLogger(__name__)

PLUGIN_KEY = "licensing"


def build_plugin(config: LicensingConfig) -> Plugin:
    """Describe the licensing plugin for the registry."""
    return Plugin(
        name=PLUGIN_NAME,
        version=PLUGIN_VERSION,
        urls_module="api.v1.license.urls",
        base_path=config.base_path,
        depends_on=[],
        enabled=True,
        description=PLUGIN_DESCRIPTION,
    )


def register(registry: PluginRegistry) -> Plugin:
    """
    Register the licensing plugin.

    Args:
        registry: Plugin registry of the host application

    Returns:
        Registered plugin descriptor
    """
    config = LicensingConfig.from_settings()
    plugin = registry.register(PLUGIN_KEY, build_plugin(config))
    logger.info("License server URL: %s", config.server_url)
    logger.info("License key configured: %s", config.key is not None)
    logger.info(
        "Available endpoints: %s",
        ", ".join(f"/{config.base_path}{endpoint}" for endpoint in ENDPOINTS.values()),
    )
    return plugin
