"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest

from licensing.application.services.license_validation_service import (
    LicenseValidationService,
)
from licensing.config import LicensingConfig
from licensing.domain.license_cache_entry import LicenseCacheEntry
from licensing.infrastructure.license_cache import InMemoryLicenseCache
from licensing.ports.license_server import LicenseServerPort
from licensing.services import set_license_service

NOW = datetime(2025, 6, 27, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixture for a fixed current time."""
    return NOW


@pytest.fixture
def licensing_config():
    """Fixture for a fully configured LicensingConfig."""
    return LicensingConfig(
        server_url="https://license.example.test",
        license_key="HMERN-TEST-KEY-0001",
        frontend_url="https://app.example.com/",
        cache_duration=timedelta(hours=1),
        request_timeout=10,
        protected_paths=["/api/protected/"],
        admin_api_key="admin-test-key",
        environment="test",
    )


@pytest.fixture
def license_server():
    """Fixture for a mocked license server port."""
    server = mock.Mock(spec=LicenseServerPort)
    server.validate.return_value = {
        "success": True,
        "message": "License is valid",
        "data": {"plan": "pro"},
    }
    return server


@pytest.fixture
def license_cache():
    """Fixture for an empty in-memory license cache."""
    return InMemoryLicenseCache()


@pytest.fixture
def license_service(licensing_config, license_cache, license_server):
    """Fixture for a LicenseValidationService with mocked server."""
    return LicenseValidationService(
        config=licensing_config,
        cache=license_cache,
        server=license_server,
    )


@pytest.fixture
def shared_license_service(license_service):
    """Install the service as the process-wide one used by views and middleware."""
    set_license_service(license_service)
    yield license_service
    set_license_service(None)


@pytest.fixture
def stale_success_entry(now):
    """Fixture for a successful entry fetched long ago."""
    return LicenseCacheEntry.from_response(
        {"success": True, "message": "License is valid", "data": {"plan": "basic"}},
        fetched_at=now - timedelta(days=30),
    )


@pytest.fixture(autouse=True)
def reset_license_service():
    """Never leak the shared service between tests."""
    yield
    set_license_service(None)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
