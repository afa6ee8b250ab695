"""
Test settings for LicenseGateway.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

ENVIRONMENT = "test"

ALLOWED_HOSTS = ["testserver", "localhost"]

# Use in-memory cache for tests
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

LICENSING = {
    "SERVER_URL": "https://license.example.test",
    "LICENSE_KEY": "HMERN-TEST-KEY-0001",
    "FRONTEND_URL": "https://app.example.com/",
    "CACHE_DURATION": 3600,
    "REQUEST_TIMEOUT": 10,
    "CACHE_BACKEND": "memory",
    "BASE_PATH": "api/license/",
    "PROTECTED_PATHS": ["/api/protected/"],
    "ADMIN_API_KEY": "admin-test-key",
}

PLUGINS = {
    "licensing": {"enabled": True, "depends_on": ["core"]},
}

# Disable logging during tests
LOGGING_CONFIG = None
