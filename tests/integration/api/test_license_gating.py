"""
Integration tests for license-gated routes.

Covers the require_license decorator on /api/premium-feature/ and the
LicenseValidationMiddleware on the configured protected prefixes.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from core.domain.exceptions import LicenseServerUnavailableError
from licensing.domain.license_cache_entry import LicenseCacheEntry

PREMIUM_URL = "/api/premium-feature/"


@pytest.mark.integration
class TestPremiumFeature:
    """Tests for the decorator-protected premium endpoint."""

    def test_valid_license_attaches_info_and_is_cached(
        self, api_client, shared_license_service, license_server
    ):
        """Test the license payload reaches the view and the second call hits the cache."""
        first = api_client.get(PREMIUM_URL)
        second = api_client.get(PREMIUM_URL)

        assert first.status_code == 200
        assert first.json()["licenseDetails"]["plan"] == "pro"
        assert second.status_code == 200
        assert second.json() == first.json()
        license_server.validate.assert_called_once()

    def test_rejected_license_is_replayed(self, api_client, shared_license_service, license_server):
        """Test a rejection is cached and replayed with status 403."""
        license_server.validate.return_value = {
            "success": False,
            "message": "Domain not authorised",
        }

        first = api_client.get(PREMIUM_URL)
        second = api_client.get(PREMIUM_URL)

        assert first.status_code == 403
        assert second.status_code == 403
        assert first.json() == {"success": False, "message": "Domain not authorised"}
        assert second.json() == first.json()
        license_server.validate.assert_called_once()

    def test_missing_configuration(
        self, api_client, shared_license_service, licensing_config, license_server
    ):
        """Test missing configuration fails fast without a network call."""
        shared_license_service.config = replace(licensing_config, frontend_url=None)

        response = api_client.get(PREMIUM_URL)

        assert response.status_code == 500
        assert response.json()["error_code"] == "CONFIGURATION_ERROR"
        license_server.validate.assert_not_called()

    def test_stale_success_survives_timeout(
        self, api_client, shared_license_service, license_cache, license_server
    ):
        """Test an expired success is served while the server times out."""
        license_cache.store(
            LicenseCacheEntry.from_response(
                {"success": True, "data": {"plan": "basic"}},
                fetched_at=datetime.now(timezone.utc) - timedelta(days=7),
            )
        )
        license_server.validate.side_effect = LicenseServerUnavailableError(reason="timeout")

        response = api_client.get(PREMIUM_URL)

        data = response.json()
        assert response.status_code == 200
        assert data["licenseDetails"] == {"plan": "basic"}
        assert "error" not in data
        assert "error_code" not in data

    def test_unavailable_server_without_cache(
        self, api_client, shared_license_service, license_server
    ):
        """Test 503 when nothing was ever validated."""
        license_server.validate.side_effect = LicenseServerUnavailableError()

        response = api_client.get(PREMIUM_URL)

        assert response.status_code == 503
        assert response.json() == {
            "success": False,
            "message": "Unable to connect to license server",
            "error_code": "SERVER_UNAVAILABLE",
        }


@pytest.mark.integration
class TestLicenseValidationMiddleware:
    """Tests for middleware gating of protected prefixes."""

    def test_unprotected_path_is_not_checked(self, api_client, shared_license_service, license_server):
        """Test requests outside protected prefixes skip validation."""
        response = api_client.get("/health/")

        assert response.status_code == 200
        license_server.validate.assert_not_called()

    def test_protected_path_rejected(self, api_client, shared_license_service, license_server):
        """Test the middleware answers a rejected license itself."""
        license_server.validate.return_value = {"success": False, "message": "Suspended"}

        response = api_client.get("/api/protected/reports")

        assert response.status_code == 403
        assert response.json()["message"] == "Suspended"

    def test_protected_path_allowed_reaches_urlconf(
        self, api_client, shared_license_service, license_server
    ):
        """Test a valid license lets the request through to URL resolution."""
        response = api_client.get("/api/protected/reports")

        # No view is mounted under the prefix in tests
        assert response.status_code == 404
        license_server.validate.assert_called_once()
