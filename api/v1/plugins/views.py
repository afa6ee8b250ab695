"""
Plugin management API views.

Listing and status are public; toggling requires the admin API key.
"""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.permissions import ADMIN_KEY_PARAMETER, HasAdminApiKey
from api.v1.license.serializers import ErrorResponseSerializer
from api.v1.plugins.serializers import (
    PluginSerializer,
    PluginToggleResponseSerializer,
    PluginToggleSerializer,
)
from core.plugins import plugin_registry

logger = logging.getLogger(__name__)


class PluginListView(APIView):
    """List registered plugins."""

    @extend_schema(
        operation_id="plugin_list",
        summary="List Plugins",
        tags=["Plugins"],
        responses={200: PluginSerializer(many=True)},
    )
    def get(self, _request: Request) -> Response:
        return Response(
            {"success": True, "plugins": [plugin.to_dict() for plugin in plugin_registry.all()]}
        )


class PluginStatusView(APIView):
    """Enabled state of every plugin, keyed by registry key."""

    @extend_schema(
        operation_id="plugin_status",
        summary="Plugin Status",
        tags=["Plugins"],
    )
    def get(self, _request: Request) -> Response:
        return Response(
            {
                "success": True,
                "data": {
                    key: {"enabled": plugin.enabled} for key, plugin in plugin_registry.items()
                },
            }
        )


class PluginToggleView(APIView):
    """Enable or disable a plugin at runtime."""

    permission_classes = [HasAdminApiKey]

    @extend_schema(
        operation_id="plugin_toggle",
        summary="Toggle Plugin",
        description=(
            "Enabling requires every dependency to be enabled. Disabling also "
            "disables the plugins that depend on this one."
        ),
        tags=["Plugins"],
        parameters=[ADMIN_KEY_PARAMETER],
        request=PluginToggleSerializer,
        responses={
            200: PluginToggleResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def post(self, request: Request, key: str) -> Response:
        serializer = PluginToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        enabled = serializer.validated_data["enabled"]

        changed = plugin_registry.set_enabled(key, enabled)
        logger.info("Plugin %s toggled via API", key, extra={"enabled": enabled, "changed": changed})

        return Response(
            {
                "success": True,
                "message": f"Plugin {key} {'enabled' if enabled else 'disabled'} successfully",
                "changed": changed,
            }
        )
