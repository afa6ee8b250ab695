"""
Plugin registry.

Plugins are self-contained bundles of backend routes registered into the
host application. Every plugin is mounted at startup; only enabled plugins
answer requests, and their state can be toggled at runtime.
"""
import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

from django.conf import settings
from django.urls import include, path

from core.domain.exceptions import PluginDependencyError, PluginNotFoundError

logger = logging.getLogger(__name__)

# Always-satisfied pseudo dependency
CORE_DEPENDENCY = "core"


@dataclass(frozen=True)
class Plugin:
    """Descriptor of a registered plugin."""

    name: str
    version: str
    urls_module: str
    base_path: str
    depends_on: List[str] = field(default_factory=list)
    enabled: bool = False
    description: str = ""

    def to_dict(self) -> dict:
        """Serialize descriptor for API responses."""
        return {
            "name": self.name,
            "version": self.version,
            "base_path": f"/{self.base_path}",
            "depends_on": list(self.depends_on),
            "enabled": self.enabled,
            "description": self.description,
        }


class PluginRegistry:
    """
    Registry of plugins and their enabled state.

    Enabling a plugin requires every dependency (except "core") to be
    enabled. Disabling a plugin cascades to the plugins depending on it.
    """

    def __init__(self, config: Optional[Dict[str, dict]] = None):
        self._plugins: Dict[str, Plugin] = {}
        self._config = config
        self._lock = threading.Lock()

    def _initial_state(self, key: str) -> dict:
        config = self._config
        if config is None:
            config = getattr(settings, "PLUGINS", {})
        return config.get(key, {})

    def register(self, key: str, plugin: Plugin) -> Plugin:
        """
        Register a plugin, applying its configured initial state.

        Args:
            key: Registry key (e.g. "licensing")
            plugin: Plugin descriptor

        Returns:
            Registered descriptor
        """
        state = self._initial_state(key)
        plugin = replace(
            plugin,
            enabled=bool(state.get("enabled", plugin.enabled)),
            depends_on=list(state.get("depends_on", plugin.depends_on)),
        )
        with self._lock:
            self._plugins[key] = plugin
        logger.info("Registered plugin %s (%s)", key, "enabled" if plugin.enabled else "disabled")
        return plugin

    def get(self, key: str) -> Plugin:
        """Return a plugin descriptor or raise PluginNotFoundError."""
        try:
            return self._plugins[key]
        except KeyError:
            raise PluginNotFoundError(f"Plugin {key} is not registered") from None

    def all(self) -> List[Plugin]:
        """Return all registered plugins."""
        return list(self._plugins.values())

    def items(self) -> List[Tuple[str, Plugin]]:
        """Return (key, plugin) pairs in registration order."""
        return list(self._plugins.items())

    def is_registered(self, key: str) -> bool:
        """Check whether a plugin is registered."""
        return key in self._plugins

    def is_enabled(self, key: str) -> bool:
        """Check whether a plugin is registered and enabled."""
        plugin = self._plugins.get(key)
        return plugin is not None and plugin.enabled

    def set_enabled(self, key: str, enabled: bool) -> List[str]:
        """
        Enable or disable a plugin.

        Args:
            key: Registry key
            enabled: Desired state

        Returns:
            Keys of every plugin whose state changed

        Raises:
            PluginNotFoundError: If the plugin is not registered
            PluginDependencyError: If a dependency is not enabled
        """
        with self._lock:
            plugin = self.get(key)
            changed = []

            if enabled:
                for dependency in plugin.depends_on:
                    if dependency == CORE_DEPENDENCY:
                        continue
                    if not self.is_enabled(dependency):
                        raise PluginDependencyError(
                            f"Cannot enable {key}: dependency {dependency} is not enabled"
                        )
            else:
                for other_key, other in self._plugins.items():
                    if key in other.depends_on and other.enabled:
                        self._plugins[other_key] = replace(other, enabled=False)
                        changed.append(other_key)

            if plugin.enabled != enabled:
                self._plugins[key] = replace(plugin, enabled=enabled)
                changed.append(key)

        logger.info("Plugin %s %s (changed: %s)", key, "enabled" if enabled else "disabled", changed)
        return changed

    def get_urlpatterns(self) -> list:
        """
        Build URL patterns for every registered plugin.

        Each plugin is mounted under its key as URL namespace. Requests to a
        disabled plugin are answered with 404 by PluginGateMiddleware.
        """
        patterns = []
        for key, plugin in self._plugins.items():
            patterns.append(path(plugin.base_path, include((plugin.urls_module, key))))
            logger.info(
                "Plugin %s routes registered at /%s (%s)",
                key,
                plugin.base_path,
                "enabled" if plugin.enabled else "disabled",
            )
        return patterns


plugin_registry = PluginRegistry()
