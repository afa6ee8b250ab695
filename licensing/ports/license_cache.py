"""
License cache port (interface).

Holds at most one LicenseCacheEntry. Implementations can keep it in
process memory or in the Django cache framework.
"""
from abc import ABC, abstractmethod
from typing import Optional

from licensing.domain.license_cache_entry import LicenseCacheEntry


class LicenseCachePort(ABC):
    """Abstract single-entry store for the last license verdict."""

    @abstractmethod
    def get(self) -> Optional[LicenseCacheEntry]:
        """
        Get the current entry.

        Returns:
            The last stored entry or None if nothing was stored yet
        """
        pass

    @abstractmethod
    def store(self, entry: LicenseCacheEntry) -> None:
        """
        Replace the current entry.

        Args:
            entry: New entry (replaces the previous one entirely)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop the current entry."""
        pass
