"""
App configuration for the licensing plugin.
"""

from django.apps import AppConfig


class LicensingAppConfig(AppConfig):
    """App configuration for licensing."""

    name = "licensing"
    verbose_name = "hMERN Licensing"

    def ready(self):
        """Register the plugin so its routes can be mounted."""
        from core.plugins import plugin_registry
        from licensing.plugin import register

        register(plugin_registry)
