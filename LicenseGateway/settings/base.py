"""
Base Django settings for LicenseGateway.

These settings are shared across all environments.
Environment-specific overrides are in dev.py, test.py, and prod.py
"""
import os
from pathlib import Path

from LicenseGateway.settings.logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "SECRET_KEY", "django-insecure-6c^v!q0r%n7h$lq2x@k8d1m3w#t5z9p&y4j0e!b2s6u8a-f1"
)

# development | production | test
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Application definition
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    # Third party
    "rest_framework",
    "drf_spectacular",
    # Local apps
    "core",
    "licensing.apps.LicensingAppConfig",
    "api",
    # Last, so plugins are registered before it logs them
    "LicenseGateway.apps.LicenseGatewayConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "core.middleware.observability.ObservabilityMiddleware",
    "core.middleware.metrics.MetricsMiddleware",
    "core.middleware.plugins.PluginGateMiddleware",
    "licensing.middleware.LicenseValidationMiddleware",
]

ROOT_URLCONF = "LicenseGateway.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "LicenseGateway.wsgi.application"

# The gateway keeps no relational state
DATABASES = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "api.exceptions.custom_exception_handler",
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "License Gateway API",
    "DESCRIPTION": (
        "Application-side licensing plugin. "
        "Validates the configured license key against a remote license server "
        "and gates protected routes on the cached verdict."
    ),
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "TAGS": [
        {"name": "Licensing", "description": "Licensing plugin endpoints"},
        {"name": "Premium", "description": "License-protected features"},
        {"name": "Health", "description": "Health check endpoints"},
    ],
}

# Django cache (used when LICENSING["CACHE_BACKEND"] == "django")
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "license-gateway",
    }
}

# Licensing plugin
LICENSING = {
    "SERVER_URL": os.environ.get("LICENSE_SERVER_URL", "https://hmern.com"),
    "LICENSE_KEY": os.environ.get("HMERN_LICENSE_KEY"),
    "FRONTEND_URL": os.environ.get("FRONTEND_URL"),
    "CACHE_DURATION": int(os.environ.get("LICENSE_CACHE_DURATION", "3600")),  # 1 hour
    "REQUEST_TIMEOUT": float(os.environ.get("LICENSE_REQUEST_TIMEOUT", "10")),
    "CACHE_BACKEND": os.environ.get("LICENSE_CACHE_BACKEND", "memory"),
    "BASE_PATH": "api/license/",
    "PROTECTED_PATHS": [],
    "ADMIN_API_KEY": os.environ.get("LICENSING_ADMIN_API_KEY"),
}

# Plugin registry initial state
PLUGINS = {
    "licensing": {
        "enabled": os.environ.get("LICENSING_PLUGIN_ENABLED", "true").lower() == "true",
        "depends_on": ["core"],
    },
}

# Observability
LOGGING = get_logging_config(ENVIRONMENT)
