"""
License cache entry domain object.

The entry is the process-held memory of the last license-server verdict.
It is replaced wholesale on every validation that reaches the server.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LicenseCacheEntry:
    """
    Last verdict returned by the license server.

    ``payload`` is the response body as received (with ``success``
    normalised to a bool) and is replayed verbatim for cached failures.
    """

    success: bool
    data: Any
    fetched_at: datetime
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(
        cls, body: Dict[str, Any], fetched_at: Optional[datetime] = None
    ) -> "LicenseCacheEntry":
        """
        Build an entry from a license server response body.

        Args:
            body: Decoded JSON body ``{success, message, data}``
            fetched_at: Time the response was received (defaults to now)

        Returns:
            LicenseCacheEntry instance
        """
        success = bool(body.get("success"))
        payload = dict(body)
        payload["success"] = success
        return cls(
            success=success,
            data=body.get("data"),
            fetched_at=fetched_at or datetime.now(timezone.utc),
            payload=payload,
        )

    @property
    def message(self) -> Optional[str]:
        """Return the server message, if any."""
        return self.payload.get("message")

    def age(self, now: Optional[datetime] = None) -> timedelta:
        """Return how long ago the entry was fetched."""
        current = now or datetime.now(timezone.utc)
        return current - self.fetched_at

    def is_fresh(self, max_age: timedelta, now: Optional[datetime] = None) -> bool:
        """
        Check if the entry is still within its freshness window.

        Args:
            max_age: Configured cache duration
            now: Current time (defaults to now)

        Returns:
            True if the entry's age is strictly below ``max_age``
        """
        return self.age(now) < max_age

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for storage in a shared cache."""
        return {
            "success": self.success,
            "data": self.data,
            "fetched_at": self.fetched_at.isoformat(),
            "payload": self.payload,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "LicenseCacheEntry":
        """Deserialize an entry produced by ``to_dict``."""
        return cls(
            success=bool(raw["success"]),
            data=raw.get("data"),
            fetched_at=datetime.fromisoformat(raw["fetched_at"]),
            payload=dict(raw.get("payload") or {}),
        )
