"""
HTTP client for the remote license server.

Every failure to obtain a verdict is raised as
LicenseServerUnavailableError; callers only branch on that.
"""
import logging
import time
from typing import Any, Dict

import requests

from core.domain.exceptions import LicenseServerUnavailableError
from core.instrumentation import Status, StatusCode, get_tracer
from core.metrics import license_server_request_duration_seconds
from licensing.domain.validation import LicenseValidationRequest
from licensing.ports.license_server import LicenseServerPort

logger = logging.getLogger(__name__)

tracer = get_tracer(__name__)

VALIDATE_PATH = "/api/license/validate"


class RequestsLicenseServerClient(LicenseServerPort):
    """License server client built on ``requests``."""

    def __init__(self, server_url: str, timeout: float = 10, session: requests.Session = None):
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": "License-Gateway/1.0",
            }
        )

    def validate(self, request: LicenseValidationRequest) -> Dict[str, Any]:
        return self._post(VALIDATE_PATH, request.to_payload(), request.license_key.masked())

    def _post(self, path: str, payload: Dict[str, Any], key_hint: str) -> Dict[str, Any]:
        """
        POST a JSON payload and decode the JSON answer.

        Args:
            path: Endpoint path on the license server
            payload: JSON body
            key_hint: Masked license key for logs and spans

        Returns:
            Decoded JSON object

        Raises:
            LicenseServerUnavailableError: On any transport or protocol failure
        """
        url = f"{self.server_url}{path}"
        with tracer.start_as_current_span("license_server.post") as span:
            span.set_attribute("http.url", url)
            span.set_attribute("license_key", key_hint)
            start_time = time.time()
            try:
                response = self.session.post(url, json=payload, timeout=self.timeout)
            except requests.exceptions.Timeout as e:
                self._observe(path, "timeout", start_time)
                span.set_status(Status(StatusCode.ERROR, "timeout"))
                logger.error("License server timed out after %ss: %s", self.timeout, e)
                raise LicenseServerUnavailableError(reason="timeout") from e
            except requests.exceptions.RequestException as e:
                self._observe(path, "connection_error", start_time)
                span.set_status(Status(StatusCode.ERROR, "connection_error"))
                logger.error("Could not connect to license server: %s", e)
                raise LicenseServerUnavailableError(reason="connection_error") from e

            span.set_attribute("http.status_code", response.status_code)

            if not response.ok:
                self._observe(path, "http_error", start_time)
                span.set_status(Status(StatusCode.ERROR, f"HTTP {response.status_code}"))
                message = self._error_message(response)
                logger.error(
                    "License server responded with %s: %s", response.status_code, message
                )
                raise LicenseServerUnavailableError(
                    message=message,
                    status_code=response.status_code,
                    reason="http_error",
                )

            try:
                body = response.json()
            except ValueError as e:
                self._observe(path, "invalid_response", start_time)
                span.set_status(Status(StatusCode.ERROR, "invalid_response"))
                logger.error("License server returned a non-JSON body")
                raise LicenseServerUnavailableError(
                    message="Invalid response from license server",
                    reason="invalid_response",
                ) from e

            if not isinstance(body, dict):
                self._observe(path, "invalid_response", start_time)
                span.set_status(Status(StatusCode.ERROR, "invalid_response"))
                raise LicenseServerUnavailableError(
                    message="Invalid response from license server",
                    reason="invalid_response",
                )

            self._observe(path, "ok", start_time)
            span.set_status(Status(StatusCode.OK))
            return body

    @staticmethod
    def _observe(path: str, outcome: str, start_time: float) -> None:
        license_server_request_duration_seconds.labels(
            endpoint=path, outcome=outcome
        ).observe(time.time() - start_time)

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Extract the server's message from an error response."""
        try:
            body = response.json()
        except ValueError:
            return "Unable to connect to license server"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return "Unable to connect to license server"
