"""
API exception handlers.

This module provides custom exception handling for REST API responses.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import DomainException, PluginNotFoundError
from core.metrics import errors_total

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        errors_total.labels(error_type=exc.code, endpoint=_get_path(context)).inc()
        response = _handle_domain_exception(exc, trace_id)
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response:
            code = (
                exc.default_code.upper().replace("-", "_")
                if hasattr(exc, "default_code")
                else "API_ERROR"
            )
            detail = response.data.get("detail", exc.default_detail) if isinstance(
                response.data, dict
            ) else exc.default_detail
            response.data = {"error": {"code": code, "message": detail}}
            if trace_id:
                response["X-Trace-ID"] = trace_id
            return response

    if isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    return _handle_unexpected_exception(exc, context, trace_id)


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _get_path(context: Dict[str, Any]) -> str:
    request = context.get("request")
    return request.path if request else ""


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, PluginNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND

    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response(
        {"success": False, "message": exc.message, "error_code": exc.code},
        status=status_code,
    )


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    errors_total.labels(error_type="internal_error", endpoint=_get_path(context)).inc()
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    response = Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response
