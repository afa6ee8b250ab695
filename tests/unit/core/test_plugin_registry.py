"""
Unit tests for the plugin registry.
"""
import pytest

from core.domain.exceptions import PluginDependencyError, PluginNotFoundError
from core.plugins import Plugin, PluginRegistry


def _plugin(name, depends_on=None, enabled=False):
    return Plugin(
        name=name,
        version="1.0.0",
        urls_module="api.v1.license.urls",
        base_path=f"api/{name}/",
        depends_on=depends_on or [],
        enabled=enabled,
    )


@pytest.fixture
def registry():
    """Fixture for a registry with licensing and a dependent plugin."""
    registry = PluginRegistry(
        config={
            "licensing": {"enabled": True, "depends_on": ["core"]},
            "firewall": {"enabled": True, "depends_on": ["core", "licensing"]},
        }
    )
    registry.register("licensing", _plugin("licensing"))
    registry.register("firewall", _plugin("firewall"))
    registry.register("extras", _plugin("extras", depends_on=["licensing"]))
    return registry


class TestPluginRegistry:
    """Tests for PluginRegistry."""

    def test_register_applies_configured_state(self, registry):
        """Test initial state comes from configuration."""
        assert registry.is_enabled("licensing")
        assert registry.get("firewall").depends_on == ["core", "licensing"]
        assert not registry.is_enabled("extras")

    def test_disabling_licensing_cascades(self, registry):
        """Test dependents are disabled with their dependency."""
        changed = registry.set_enabled("licensing", False)

        assert set(changed) == {"licensing", "firewall"}
        assert not registry.is_enabled("firewall")

    def test_enable_requires_dependencies(self, registry):
        """Test a plugin cannot be enabled while a dependency is disabled."""
        registry.set_enabled("licensing", False)

        with pytest.raises(PluginDependencyError, match="dependency licensing"):
            registry.set_enabled("firewall", True)

    def test_core_dependency_is_always_satisfied(self, registry):
        """Test the core pseudo dependency never blocks enabling."""
        registry.set_enabled("licensing", False)

        assert registry.set_enabled("licensing", True) == ["licensing"]

    def test_unknown_plugin(self, registry):
        """Test unknown plugins raise PluginNotFoundError."""
        with pytest.raises(PluginNotFoundError):
            registry.set_enabled("missing", True)

    def test_every_plugin_is_mounted_under_its_namespace(self, registry):
        """Test URL patterns exist for enabled and disabled plugins alike."""
        patterns = registry.get_urlpatterns()

        assert [str(p.pattern) for p in patterns] == [
            "api/licensing/",
            "api/firewall/",
            "api/extras/",
        ]
        assert [p.app_name for p in patterns] == ["licensing", "firewall", "extras"]

    def test_items_and_registration(self, registry):
        """Test registry lookups by key."""
        assert [key for key, _ in registry.items()] == ["licensing", "firewall", "extras"]
        assert registry.is_registered("extras") is True
        assert registry.is_registered("missing") is False
