"""
Process-wide wiring of the licensing service.

The middleware, the decorator and the API views share one service and
therefore one cache. Tests swap it with ``set_license_service``.
"""
import logging
import threading
from typing import Optional

from licensing.application.services.license_validation_service import (
    LicenseValidationService,
)
from licensing.config import LicensingConfig
from licensing.infrastructure.license_cache import DjangoLicenseCache, InMemoryLicenseCache
from licensing.infrastructure.license_server_client import RequestsLicenseServerClient
from licensing.ports.license_cache import LicenseCachePort

logger = logging.getLogger(__name__)

_service: Optional[LicenseValidationService] = None
_lock = threading.Lock()


def build_cache(config: LicensingConfig) -> LicenseCachePort:
    """Create the cache adapter selected by ``CACHE_BACKEND``."""
    if config.cache_backend == "django":
        return DjangoLicenseCache()
    if config.cache_backend != "memory":
        logger.warning("Unknown license cache backend %r, using memory", config.cache_backend)
    return InMemoryLicenseCache()


def build_license_service(config: Optional[LicensingConfig] = None) -> LicenseValidationService:
    """
    Assemble a LicenseValidationService from configuration.

    Args:
        config: Configuration (read from settings when omitted)

    Returns:
        A new service with its own cache
    """
    config = config or LicensingConfig.from_settings()
    return LicenseValidationService(
        config=config,
        cache=build_cache(config),
        server=RequestsLicenseServerClient(config.server_url, timeout=config.request_timeout),
    )


def get_license_service() -> LicenseValidationService:
    """Return the shared service, creating it on first use."""
    global _service
    if _service is None:
        with _lock:
            if _service is None:
                _service = build_license_service()
                logger.info(
                    "Licensing service ready (server=%s, key configured=%s)",
                    _service.config.server_url,
                    _service.config.key is not None,
                )
    return _service


def set_license_service(service: Optional[LicenseValidationService]) -> None:
    """Replace the shared service (None rebuilds it from settings on next use)."""
    global _service
    with _lock:
        _service = service
