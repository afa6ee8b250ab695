"""
License cache adapter implementations.

Provides in-memory and Django cache implementations of LicenseCachePort.
"""

import logging
import threading
from typing import Optional

from django.core.cache import cache

from licensing.domain.license_cache_entry import LicenseCacheEntry
from licensing.ports.license_cache import LicenseCachePort

logger = logging.getLogger(__name__)


class InMemoryLicenseCache(LicenseCachePort):
    """
    Process-local license cache.

    Entries are swapped under a lock so readers never see a partially
    replaced entry. Callers do not hold the lock across validation.
    """

    def __init__(self, entry: Optional[LicenseCacheEntry] = None):
        self._entry = entry
        self._lock = threading.Lock()

    def get(self) -> Optional[LicenseCacheEntry]:
        with self._lock:
            return self._entry

    def store(self, entry: LicenseCacheEntry) -> None:
        with self._lock:
            self._entry = entry
        logger.debug("License cache updated (success=%s)", entry.success)

    def clear(self) -> None:
        with self._lock:
            self._entry = None
        logger.debug("License cache cleared")


class DjangoLicenseCache(LicenseCachePort):
    """
    License cache backed by Django's cache framework.

    Lets several worker processes share one verdict when the default
    cache is Redis or Memcached. Entries are stored without a timeout
    so an expired success stays available for the stale fallback.
    """

    CACHE_KEY = "licensing:verdict"

    def __init__(self, cache_key: str = CACHE_KEY):
        self.cache_key = cache_key

    def get(self) -> Optional[LicenseCacheEntry]:
        try:
            raw = cache.get(self.cache_key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error reading license cache: %s", e, exc_info=True)
            return None
        if raw is None:
            return None
        try:
            return LicenseCacheEntry.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding malformed license cache entry: %s", e)
            return None

    def store(self, entry: LicenseCacheEntry) -> None:
        try:
            cache.set(self.cache_key, entry.to_dict(), timeout=None)
            logger.debug("License cache set: %s (success=%s)", self.cache_key, entry.success)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error setting license cache: %s", e, exc_info=True)

    def clear(self) -> None:
        try:
            cache.delete(self.cache_key)
            logger.debug("License cache delete: %s", self.cache_key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error deleting license cache: %s", e, exc_info=True)
