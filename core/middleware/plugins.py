"""
Plugin gate middleware.

Answers requests routed into a disabled plugin's URL namespace with 404,
so plugins can be toggled at runtime without rebuilding the URLconf.
"""

import logging
from typing import Callable

from django.http import HttpRequest, HttpResponse, JsonResponse

from core.plugins import plugin_registry

logger = logging.getLogger(__name__)


class PluginGateMiddleware:
    """Middleware for runtime plugin enablement."""

    def __init__(self, get_response: Callable, registry=None):
        """Initialize middleware."""
        self.get_response = get_response
        self.registry = registry or plugin_registry

    def __call__(self, request: HttpRequest) -> HttpResponse:
        return self.get_response(request)

    def process_view(self, request: HttpRequest, view_func, view_args, view_kwargs):
        match = request.resolver_match
        if match is None or not match.app_names:
            return None

        key = match.app_names[0]
        if not self.registry.is_registered(key) or self.registry.is_enabled(key):
            return None

        logger.info("Plugin %s is disabled, rejecting %s", key, request.path)
        return JsonResponse(
            {"success": False, "message": f"Plugin {key} is disabled"},
            status=404,
        )
