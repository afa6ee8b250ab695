"""
License validation service.

Runs the cache / live check / stale fallback decision for one request.
The cache is injected so the service holds no hidden global state.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from core.domain.exceptions import (
    LicenseServerUnavailableError,
    LicensingConfigurationError,
)
from core.domain.value_objects import ValidationState
from core.metrics import license_cache_lookups_total, license_validations_total
from licensing.config import LicensingConfig
from licensing.domain.license_cache_entry import LicenseCacheEntry
from licensing.domain.validation import LicenseValidationRequest, ValidationOutcome
from licensing.ports.license_cache import LicenseCachePort
from licensing.ports.license_server import LicenseServerPort

logger = logging.getLogger(__name__)


class LicenseValidationService:
    """
    Gate requests on a valid, current license.

    Decision order for each call:
    1. Fresh cache entry: replay it (continue on success, 403 on failure)
    2. Missing key or domain: 500 configuration error, no outbound call
    3. Live check against the license server; the answer replaces the cache
    4. Server unavailable: serve the last successful entry regardless of
       age, otherwise report the server as unavailable

    Concurrent callers that all see an expired entry each perform their
    own live check; there is no lock around the decision.
    """

    def __init__(
        self,
        config: LicensingConfig,
        cache: LicenseCachePort,
        server: LicenseServerPort,
    ):
        self.config = config
        self.cache = cache
        self.server = server

    def validate(self, now: Optional[datetime] = None) -> ValidationOutcome:
        """
        Decide whether the current request may continue.

        Args:
            now: Current time (defaults to now, injectable for tests)

        Returns:
            ValidationOutcome describing how to answer the request
        """
        now = now or datetime.now(timezone.utc)

        entry = self.cache.get()
        if entry is not None and entry.is_fresh(self.config.cache_duration, now):
            license_cache_lookups_total.labels(outcome="hit").inc()
            return self._replay(entry)
        license_cache_lookups_total.labels(
            outcome="miss" if entry is None else "expired"
        ).inc()

        try:
            request = self._build_request()
        except LicensingConfigurationError as e:
            logger.error(
                "LICENSE ERROR: HMERN_LICENSE_KEY and FRONTEND_URL must be set "
                "in the application environment."
            )
            license_validations_total.labels(result="config_error").inc()
            return ValidationOutcome.denied(
                state=ValidationState.UNVALIDATED,
                source="config",
                status_code=500,
                body={"success": False, "message": e.message, "error_code": e.code},
            )

        try:
            body = self.server.validate(request)
        except LicenseServerUnavailableError as e:
            return self._fallback(e)

        fresh = LicenseCacheEntry.from_response(body, fetched_at=now)
        self.cache.store(fresh)

        if fresh.success:
            logger.info("License validation successful.")
            license_validations_total.labels(result="valid").inc()
            return ValidationOutcome.granted(fresh.data, source="server", message=fresh.message)

        logger.warning("License validation failed: %s", fresh.message or "License validation failed")
        license_validations_total.labels(result="invalid").inc()
        return ValidationOutcome.denied(
            state=ValidationState.INVALID,
            source="server",
            status_code=403,
            body=fresh.payload,
        )

    def refresh(self, now: Optional[datetime] = None) -> ValidationOutcome:
        """
        Force a live check by dropping the cached verdict first.

        The stale fallback is lost as well, so an unreachable server
        yields an unavailable outcome.
        """
        self.cache.clear()
        return self.validate(now)

    def cache_state(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Describe the cached verdict without contacting the server.

        Args:
            now: Current time (defaults to now)

        Returns:
            Dict with ``cached``, ``state``, ``fresh``, ``age_seconds``
            and ``fetched_at`` keys
        """
        now = now or datetime.now(timezone.utc)
        entry = self.cache.get()
        if entry is None:
            return {
                "cached": False,
                "state": str(ValidationState.UNVALIDATED),
                "fresh": False,
                "age_seconds": None,
                "fetched_at": None,
                "cache_duration_seconds": int(self.config.cache_duration.total_seconds()),
            }
        state = ValidationState.VALID if entry.success else ValidationState.INVALID
        return {
            "cached": True,
            "state": str(state),
            "fresh": entry.is_fresh(self.config.cache_duration, now),
            "age_seconds": round(entry.age(now).total_seconds(), 3),
            "fetched_at": entry.fetched_at.isoformat(),
            "cache_duration_seconds": int(self.config.cache_duration.total_seconds()),
            "message": entry.message,
        }

    def _build_request(self) -> LicenseValidationRequest:
        key = self.config.key
        domain = self.config.domain
        if key is None or domain is None:
            raise LicensingConfigurationError()
        return LicenseValidationRequest(license_key=key, domain=domain)

    def _replay(self, entry: LicenseCacheEntry) -> ValidationOutcome:
        if entry.success:
            return ValidationOutcome.granted(entry.data, source="cache", message=entry.message)
        return ValidationOutcome.denied(
            state=ValidationState.INVALID,
            source="cache",
            status_code=403,
            body=entry.payload,
        )

    def _fallback(self, error: LicenseServerUnavailableError) -> ValidationOutcome:
        """Serve the last successful verdict, whatever its age."""
        entry = self.cache.get()
        if entry is not None and entry.success:
            logger.warning(
                "Connection to license server failed (%s). Using stale cache.", error.reason
            )
            license_validations_total.labels(result="stale").inc()
            return ValidationOutcome.granted(entry.data, source="stale_cache", message=entry.message)

        license_validations_total.labels(result="unavailable").inc()
        return ValidationOutcome.denied(
            state=ValidationState.UNREACHABLE,
            source="server",
            status_code=error.status_code or 503,
            body={"success": False, "message": error.message, "error_code": error.code},
        )
