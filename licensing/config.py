"""
Licensing plugin configuration.

Static plugin metadata plus the runtime configuration read from
``settings.LICENSING``.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from django.conf import settings

from core.domain.value_objects import Domain, LicenseKey

PLUGIN_NAME = "hMERN Licensing"
PLUGIN_VERSION = "1.0.0"
PLUGIN_DESCRIPTION = (
    "Core licensing system that enables and validates other plugins in the hMERN stack"
)

ENDPOINTS = {
    "health": "health",
    "test": "test",
    "info": "info",
    "status": "status",
    "debug": "debug",
    "refresh": "refresh",
    "clear": "clear",
}

FEATURES = [
    "License validation and caching",
    "Development mode bypass",
    "Offline mode support",
]

DEFAULT_SERVER_URL = "https://hmern.com"
DEFAULT_CACHE_DURATION = 60 * 60  # 1 hour
DEFAULT_REQUEST_TIMEOUT = 10


@dataclass(frozen=True)
class LicensingConfig:
    """Runtime configuration of the licensing plugin."""

    server_url: str = DEFAULT_SERVER_URL
    license_key: Optional[str] = None
    frontend_url: Optional[str] = None
    cache_duration: timedelta = timedelta(seconds=DEFAULT_CACHE_DURATION)
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    cache_backend: str = "memory"
    base_path: str = "api/license/"
    protected_paths: List[str] = field(default_factory=list)
    admin_api_key: Optional[str] = None
    environment: str = "development"

    @classmethod
    def from_settings(cls) -> "LicensingConfig":
        """Build the configuration from Django settings."""
        raw = getattr(settings, "LICENSING", {})
        return cls(
            server_url=raw.get("SERVER_URL") or DEFAULT_SERVER_URL,
            license_key=raw.get("LICENSE_KEY") or None,
            frontend_url=raw.get("FRONTEND_URL") or None,
            cache_duration=timedelta(
                seconds=raw.get("CACHE_DURATION", DEFAULT_CACHE_DURATION)
            ),
            request_timeout=raw.get("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            cache_backend=raw.get("CACHE_BACKEND", "memory"),
            base_path=raw.get("BASE_PATH", "api/license/"),
            protected_paths=list(raw.get("PROTECTED_PATHS", [])),
            admin_api_key=raw.get("ADMIN_API_KEY") or None,
            environment=getattr(settings, "ENVIRONMENT", "development"),
        )

    @property
    def key(self) -> Optional[LicenseKey]:
        """Return the license key, or None when it is not configured."""
        if not self.license_key or not self.license_key.strip():
            return None
        return LicenseKey(self.license_key)

    @property
    def domain(self) -> Optional[Domain]:
        """Return the domain derived from the frontend URL, or None."""
        try:
            return Domain.from_url(self.frontend_url)
        except ValueError:
            return None

    @property
    def is_production(self) -> bool:
        """Check whether the application runs in production mode."""
        return self.environment == "production"

    def is_development_bypass(self) -> bool:
        """Check whether /status may report a valid license without asking."""
        domain = self.domain
        return domain is not None and domain.is_local() and not self.is_production
