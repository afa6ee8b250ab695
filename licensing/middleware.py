"""
License validation middleware.

Gates downstream request handling on a valid, current license and
attaches the license payload to ``request.license_info``.
"""

import logging
from functools import wraps
from typing import Callable, Optional

from django.http import HttpRequest, HttpResponse, JsonResponse

from licensing.application.services.license_validation_service import (
    LicenseValidationService,
)
from licensing.domain.validation import ValidationOutcome
from licensing.services import get_license_service

logger = logging.getLogger(__name__)


def apply_outcome(request: HttpRequest, outcome: ValidationOutcome) -> Optional[HttpResponse]:
    """
    Apply a validation outcome to a request.

    Args:
        request: HTTP request
        outcome: Result of LicenseValidationService.validate

    Returns:
        JsonResponse when the request must stop, None when it may continue
    """
    if outcome.allowed:
        request.license_info = outcome.license_info  # type: ignore
        request.license_source = outcome.source  # type: ignore
        return None
    return JsonResponse(outcome.body, status=outcome.status_code)


class LicenseValidationMiddleware:
    """
    Middleware enforcing a valid license on protected path prefixes.

    Prefixes come from ``settings.LICENSING["PROTECTED_PATHS"]``. Other
    requests pass through untouched.
    """

    def __init__(self, get_response: Callable, service: LicenseValidationService = None):
        """Initialize middleware."""
        self.get_response = get_response
        self._service = service

    @property
    def service(self) -> LicenseValidationService:
        return self._service or get_license_service()

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not self._is_protected(request.path):
            return self.get_response(request)

        response = apply_outcome(request, self.service.validate())
        if response is not None:
            logger.warning(
                "License check rejected %s %s with %s",
                request.method,
                request.path,
                response.status_code,
            )
            return response
        return self.get_response(request)

    def _is_protected(self, path: str) -> bool:
        prefixes = self.service.config.protected_paths
        return any(path.startswith(prefix) for prefix in prefixes)


def require_license(view_func: Callable = None, *, service: LicenseValidationService = None):
    """
    View decorator requiring a valid license.

    Usable bare (``@require_license``) or with an explicit service
    (``@require_license(service=svc)``). Works on function views and on
    ``dispatch`` of class-based views via ``method_decorator``.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def _wrapped(request, *args, **kwargs):
            validator = service or get_license_service()
            response = apply_outcome(request, validator.validate())
            if response is not None:
                return response
            return func(request, *args, **kwargs)

        return _wrapped

    if view_func is not None:
        return decorator(view_func)
    return decorator
