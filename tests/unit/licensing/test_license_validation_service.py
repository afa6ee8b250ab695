"""
Unit tests for LicenseValidationService.
"""

from dataclasses import replace
from datetime import timedelta

import pytest

from core.domain.exceptions import LicenseServerUnavailableError
from core.domain.value_objects import ValidationState
from licensing.domain.license_cache_entry import LicenseCacheEntry


class TestCacheHit:
    """Tests for requests answered from a fresh cache entry."""

    def test_first_request_validates_and_second_uses_cache(
        self, license_service, license_server, now
    ):
        """Test a successful verdict is reused within the cache duration."""
        first = license_service.validate(now)
        second = license_service.validate(now + timedelta(minutes=59))

        assert first.allowed is True
        assert first.license_info["plan"] == "pro"
        assert first.source == "server"
        assert second.allowed is True
        assert second.license_info == {"plan": "pro"}
        assert second.source == "cache"
        license_server.validate.assert_called_once()

    def test_request_payload_uses_key_and_bare_domain(self, license_service, license_server, now):
        """Test the server receives the key and the domain without scheme or slash."""
        license_service.validate(now)

        request = license_server.validate.call_args.args[0]
        assert request.to_payload() == {
            "license_key": "HMERN-TEST-KEY-0001",
            "domain": "app.example.com",
        }

    def test_entry_expires_at_cache_duration(self, license_service, license_server, now):
        """Test an entry exactly as old as the cache duration is refreshed."""
        license_service.validate(now)
        license_service.validate(now + timedelta(hours=1))

        assert license_server.validate.call_count == 2

    def test_cached_failure_is_replayed_verbatim(self, license_service, license_server, now):
        """Test a rejected license is cached and replayed with the same body."""
        license_server.validate.return_value = {
            "success": False,
            "message": "License expired",
            "error_code": "LICENSE_EXPIRED",
        }

        first = license_service.validate(now)
        second = license_service.validate(now + timedelta(minutes=30))

        assert first.allowed is False
        assert first.status_code == 403
        assert first.state == ValidationState.INVALID
        assert second.status_code == 403
        assert second.source == "cache"
        assert second.body == first.body
        assert second.body == {
            "success": False,
            "message": "License expired",
            "error_code": "LICENSE_EXPIRED",
        }
        license_server.validate.assert_called_once()

    def test_new_verdict_replaces_previous_entry(self, license_service, license_server, license_cache, now):
        """Test a later verdict replaces the cache entry without merging."""
        license_service.validate(now)
        license_server.validate.return_value = {"success": False, "message": "Revoked"}

        outcome = license_service.validate(now + timedelta(hours=2))

        assert outcome.allowed is False
        entry = license_cache.get()
        assert entry.success is False
        assert entry.data is None
        assert entry.payload == {"success": False, "message": "Revoked"}


class TestConfiguration:
    """Tests for missing configuration."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"license_key": None},
            {"license_key": "   "},
            {"frontend_url": None},
            {"frontend_url": "https://"},
        ],
    )
    def test_missing_configuration_fails_without_network_call(
        self, license_service, license_server, licensing_config, now, overrides
    ):
        """Test missing key or domain returns a configuration error."""
        license_service.config = replace(licensing_config, **overrides)

        outcome = license_service.validate(now)

        assert outcome.allowed is False
        assert outcome.status_code == 500
        assert outcome.body["error_code"] == "CONFIGURATION_ERROR"
        assert outcome.body["success"] is False
        license_server.validate.assert_not_called()

    def test_fresh_cache_wins_over_missing_configuration(
        self, license_service, license_server, license_cache, licensing_config, now
    ):
        """Test a fresh entry is served before configuration is checked."""
        license_cache.store(
            LicenseCacheEntry.from_response({"success": True, "data": {"plan": "pro"}}, fetched_at=now)
        )
        license_service.config = replace(licensing_config, license_key=None)

        outcome = license_service.validate(now + timedelta(minutes=1))

        assert outcome.allowed is True
        license_server.validate.assert_not_called()


class TestServerUnavailable:
    """Tests for the stale fallback."""

    def test_stale_success_is_served_when_server_times_out(
        self, license_service, license_server, license_cache, stale_success_entry, now
    ):
        """Test a 30-day-old success is used when the server times out."""
        license_cache.store(stale_success_entry)
        license_server.validate.side_effect = LicenseServerUnavailableError(reason="timeout")

        outcome = license_service.validate(now)

        assert outcome.allowed is True
        assert outcome.source == "stale_cache"
        assert outcome.license_info == {"plan": "basic"}
        assert license_cache.get() is stale_success_entry

    def test_stale_success_is_served_on_upstream_error_status(
        self, license_service, license_server, license_cache, stale_success_entry, now
    ):
        """Test non-2xx answers fall back to the stale success as well."""
        license_cache.store(stale_success_entry)
        license_server.validate.side_effect = LicenseServerUnavailableError(
            message="Internal error", status_code=500, reason="http_error"
        )

        outcome = license_service.validate(now)

        assert outcome.allowed is True
        assert outcome.license_info == {"plan": "basic"}

    def test_unavailable_without_cache_returns_503(self, license_service, license_server, now):
        """Test an empty cache and unreachable server yields 503."""
        license_server.validate.side_effect = LicenseServerUnavailableError()

        outcome = license_service.validate(now)

        assert outcome.allowed is False
        assert outcome.status_code == 503
        assert outcome.state == ValidationState.UNREACHABLE
        assert outcome.body == {
            "success": False,
            "message": "Unable to connect to license server",
            "error_code": "SERVER_UNAVAILABLE",
        }

    def test_upstream_status_and_message_are_surfaced(self, license_service, license_server, now):
        """Test an upstream error status is reported when nothing is cached."""
        license_server.validate.side_effect = LicenseServerUnavailableError(
            message="License not found", status_code=404, reason="http_error"
        )

        outcome = license_service.validate(now)

        assert outcome.status_code == 404
        assert outcome.body["message"] == "License not found"
        assert outcome.body["error_code"] == "SERVER_UNAVAILABLE"

    def test_stale_failure_is_not_used_as_fallback(
        self, license_service, license_server, license_cache, now
    ):
        """Test only successful entries are eligible for the stale fallback."""
        license_cache.store(
            LicenseCacheEntry.from_response(
                {"success": False, "message": "Expired"}, fetched_at=now - timedelta(hours=3)
            )
        )
        license_server.validate.side_effect = LicenseServerUnavailableError()

        outcome = license_service.validate(now)

        assert outcome.allowed is False
        assert outcome.status_code == 503

    def test_no_retry_within_a_request(self, license_service, license_server, now):
        """Test a failed call is attempted exactly once."""
        license_server.validate.side_effect = LicenseServerUnavailableError(reason="timeout")

        license_service.validate(now)

        license_server.validate.assert_called_once()


class TestRefreshAndState:
    """Tests for refresh and cache_state."""

    def test_refresh_bypasses_fresh_cache(self, license_service, license_server, now):
        """Test refresh performs a live check even with a fresh entry."""
        license_service.validate(now)
        license_service.refresh(now + timedelta(minutes=1))

        assert license_server.validate.call_count == 2

    def test_cache_state_when_empty(self, license_service, now):
        """Test cache_state reports an unvalidated license."""
        state = license_service.cache_state(now)

        assert state["cached"] is False
        assert state["state"] == "unvalidated"
        assert state["cache_duration_seconds"] == 3600

    def test_cache_state_after_validation(self, license_service, now):
        """Test cache_state reports age and freshness."""
        license_service.validate(now)

        state = license_service.cache_state(now + timedelta(minutes=10))

        assert state["cached"] is True
        assert state["state"] == "valid"
        assert state["fresh"] is True
        assert state["age_seconds"] == 600
