"""
Validation request and outcome objects.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.domain.value_objects import Domain, LicenseKey, ValidationState


@dataclass(frozen=True)
class LicenseValidationRequest:
    """Body sent to ``POST {server}/api/license/validate``."""

    license_key: LicenseKey
    domain: Domain

    def to_payload(self) -> Dict[str, str]:
        """Return the JSON body expected by the license server."""
        return {"license_key": str(self.license_key), "domain": str(self.domain)}


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of running the validation state machine for one request.

    When ``allowed`` is True the request continues with ``license_info``
    attached. Otherwise ``status_code`` and ``body`` describe the JSON
    response to return.
    """

    allowed: bool
    state: ValidationState
    source: str  # cache | server | stale_cache | config
    license_info: Any = None
    status_code: int = 200
    body: Dict[str, Any] = field(default_factory=dict)
    message: Optional[str] = None

    @classmethod
    def granted(
        cls, license_info: Any, source: str, message: Optional[str] = None
    ) -> "ValidationOutcome":
        """Outcome for a request that may continue."""
        return cls(
            allowed=True,
            state=ValidationState.VALID,
            source=source,
            license_info=license_info,
            message=message,
        )

    @classmethod
    def denied(
        cls,
        state: ValidationState,
        source: str,
        status_code: int,
        body: Dict[str, Any],
    ) -> "ValidationOutcome":
        """Outcome for a request that must be answered with an error."""
        return cls(
            allowed=False,
            state=state,
            source=source,
            status_code=status_code,
            body=body,
            message=body.get("message"),
        )
