"""
License server port (interface).

This defines the contract for talking to the remote license server.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from licensing.domain.validation import LicenseValidationRequest


class LicenseServerPort(ABC):
    """
    Abstract client for the remote license server.

    Implementations raise ``LicenseServerUnavailableError`` for every
    failure to obtain a verdict (network error, timeout, non-2xx status,
    undecodable body).
    """

    @abstractmethod
    def validate(self, request: LicenseValidationRequest) -> Dict[str, Any]:
        """
        Ask the server to validate a license for a domain.

        Args:
            request: License key and domain

        Returns:
            Decoded response body ``{success, message, data}``
        """
        pass
