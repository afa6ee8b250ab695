"""
App configuration for License Gateway.
"""

import logging
import os
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class LicenseGatewayConfig(AppConfig):
    """App configuration for LicenseGateway."""

    name = "LicenseGateway"
    verbose_name = "License Gateway"

    def ready(self):
        """Called when Django starts."""
        # Management commands and the test runner do not need exporters
        if len(sys.argv) > 1 and sys.argv[1] in [
            "collectstatic",
            "shell",
            "test",
            "check",
        ]:
            return

        if getattr(settings, "ENVIRONMENT", "") == "test":
            return

        # RUN_MAIN is "false" in the autoreloader's watcher process
        if os.environ.get("RUN_MAIN") == "false":
            return

        if getattr(self, "_initialized", False):
            return

        logger.info("Setting up observability...")
        self.setup_observability()
        self.log_plugins()
        self._initialized = True
        logger.info("Observability setup complete")

    def setup_observability(self):
        """Setup observability after apps are ready."""
        try:
            from core.instrumentation import setup_opentelemetry

            setup_opentelemetry()
        except Exception as e:  # pylint: disable=broad-exception-caught
            # The service must still start when the collector is unreachable
            logger.warning(f"Failed to setup OpenTelemetry: {e}")

    def log_plugins(self):
        """Log which plugins will be mounted."""
        from core.plugins import plugin_registry

        for plugin in plugin_registry.all():
            logger.info(
                "Plugin %s v%s is %s",
                plugin.name,
                plugin.version,
                "enabled" if plugin.enabled else "disabled",
            )
