"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)

LOCAL_HOSTNAMES = ("localhost", "127.0.0.1")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Domain(ValueObject):
    """
    Host the license is bound to.

    Stored without scheme and without trailing slash, e.g.
    ``app.example.com`` or ``localhost:3000``.
    """

    value: str

    def __post_init__(self):
        """Validate domain."""
        if not self.value or not self.value.strip():
            raise ValueError("Domain cannot be empty")
        if _SCHEME_RE.match(self.value) or self.value.endswith("/"):
            raise ValueError(f"Invalid domain format: {self.value}")

    @classmethod
    def from_url(cls, url: str) -> "Domain":
        """
        Build a domain from a frontend URL.

        Args:
            url: URL such as ``https://app.example.com/``

        Returns:
            Domain with scheme and trailing slashes removed
        """
        if url is None:
            raise ValueError("Domain cannot be empty")
        return cls(_SCHEME_RE.sub("", url.strip()).rstrip("/"))

    @property
    def hostname(self) -> str:
        """Return the host part without port."""
        return self.value.split("/", 1)[0].rsplit(":", 1)[0]

    def is_local(self) -> bool:
        """Check whether the domain points at a local development host."""
        return self.hostname.lower() in LOCAL_HOSTNAMES

    def __str__(self) -> str:
        """Return domain as string."""
        return self.value


@dataclass(frozen=True)
class LicenseKey(ValueObject):
    """License key value object."""

    value: str

    def __post_init__(self):
        """Validate license key."""
        if not self.value or not self.value.strip():
            raise ValueError("License key cannot be empty")

    def masked(self) -> str:
        """Return the key with everything but the first 8 characters hidden."""
        return f"{self.value[:8]}..."

    def __str__(self) -> str:
        """Return license key as string."""
        return self.value


class ValidationState(Enum):
    """State of the application's license as last observed."""

    UNVALIDATED = "unvalidated"
    VALID = "valid"
    INVALID = "invalid"
    UNREACHABLE = "unreachable"

    def __str__(self) -> str:
        """Return state as string."""
        return self.value
