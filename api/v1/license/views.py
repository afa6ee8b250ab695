"""
Licensing plugin API views.

Thin read-only wrappers around the shared LicenseValidationService:
- Plugin health and smoke test
- Plugin information with the cached validation state
- License status for the frontend indicator (with a local development bypass)
- Admin diagnostics: debug, refresh, clear
"""

from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.permissions import ADMIN_KEY_PARAMETER, HasAdminApiKey
from api.v1.license.serializers import (
    CacheStateSerializer,
    ErrorResponseSerializer,
    HealthResponseSerializer,
    StatusResponseSerializer,
    TestResponseSerializer,
)
from core.instrumentation import get_tracer
from licensing.config import ENDPOINTS, FEATURES, PLUGIN_DESCRIPTION, PLUGIN_NAME, PLUGIN_VERSION
from licensing.services import get_license_service

tracer = get_tracer(__name__)

NO_KEY_MESSAGE = "License key is not configured on this application server."


class LicenseHealthView(APIView):
    """Health check for the licensing plugin itself."""

    @extend_schema(
        operation_id="license_health",
        summary="Licensing Plugin Health",
        tags=["Licensing"],
        responses={200: HealthResponseSerializer, 500: ErrorResponseSerializer},
    )
    def get(self, _request: Request) -> Response:
        """Return plugin health."""
        config = get_license_service().config
        if config.key is None:
            return Response(
                {"success": False, "message": NO_KEY_MESSAGE},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(
            {
                "success": True,
                "message": "Licensing plugin is active.",
                "server_url": config.server_url,
            }
        )


class LicenseTestView(APIView):
    """Smoke-test endpoint."""

    @extend_schema(
        operation_id="license_test",
        summary="Licensing Plugin Test",
        tags=["Licensing"],
        responses={200: TestResponseSerializer},
    )
    def get(self, _request: Request) -> Response:
        return Response(
            {
                "success": True,
                "message": "Licensing plugin test endpoint working",
                "plugin": PLUGIN_NAME,
                "version": PLUGIN_VERSION,
                "timestamp": timezone.now().isoformat(),
            }
        )


class LicenseInfoView(APIView):
    """Plugin information and cached validation state."""

    @extend_schema(
        operation_id="license_info",
        summary="Licensing Plugin Information",
        description="Plugin metadata and the cached license verdict. Never contacts the license server.",
        tags=["Licensing"],
    )
    def get(self, _request: Request) -> Response:
        service = get_license_service()
        config = service.config
        key = config.key
        domain = config.domain
        base = f"/{config.base_path}"
        return Response(
            {
                "success": True,
                "plugin": {
                    "name": PLUGIN_NAME,
                    "version": PLUGIN_VERSION,
                    "description": PLUGIN_DESCRIPTION,
                    "features": FEATURES,
                    "endpoints": {name: f"{base}{endpoint}" for name, endpoint in ENDPOINTS.items()},
                },
                "configuration": {
                    "server_url": config.server_url,
                    "license_key_configured": key is not None,
                    "license_key": key.masked() if key else None,
                    "domain": str(domain) if domain else None,
                    "environment": config.environment,
                },
                "cache": service.cache_state(),
            }
        )


class LicenseStatusView(APIView):
    """License status for the frontend license indicator."""

    @extend_schema(
        operation_id="license_status",
        summary="License Status",
        description=(
            "Reports whether the application's license is valid. Local development "
            "domains outside production are always reported as valid."
        ),
        tags=["Licensing"],
        responses={200: StatusResponseSerializer},
    )
    def get(self, _request: Request) -> Response:
        service = get_license_service()
        config = service.config

        if config.is_development_bypass():
            return Response(
                {
                    "isValid": True,
                    "message": "Development mode - license check bypassed",
                    "mode": "development",
                }
            )

        if config.key is None:
            return Response({"isValid": False, "message": "No license key configured"})

        with tracer.start_as_current_span("license_status") as span:
            outcome = service.validate()
            span.set_attribute("license.source", outcome.source)
            span.set_attribute("license.state", str(outcome.state))

        if outcome.allowed:
            return Response({"isValid": True, "message": "License is active"})
        return Response(
            {
                "isValid": False,
                "message": outcome.message or "Unable to verify license",
            }
        )


class LicenseDebugView(APIView):
    """Admin diagnostics for the license cache."""

    permission_classes = [HasAdminApiKey]

    @extend_schema(
        operation_id="license_debug",
        summary="License Cache Diagnostics",
        tags=["Licensing"],
        parameters=[ADMIN_KEY_PARAMETER],
        responses={200: CacheStateSerializer},
    )
    def get(self, _request: Request) -> Response:
        service = get_license_service()
        config = service.config
        return Response(
            {
                **service.cache_state(),
                "server_url": config.server_url,
                "request_timeout_seconds": config.request_timeout,
                "protected_paths": config.protected_paths,
                "development_bypass": config.is_development_bypass(),
            }
        )


class LicenseRefreshView(APIView):
    """Drop the cached verdict and validate again."""

    permission_classes = [HasAdminApiKey]

    @extend_schema(
        operation_id="license_refresh",
        summary="Refresh License Verdict",
        tags=["Licensing"],
        parameters=[ADMIN_KEY_PARAMETER],
        request=None,
    )
    def post(self, _request: Request) -> Response:
        service = get_license_service()
        outcome = service.refresh()
        if not outcome.allowed:
            return Response(outcome.body, status=outcome.status_code)
        return Response(
            {
                "success": True,
                "message": outcome.message or "License validated",
                "data": outcome.license_info,
                "cache": service.cache_state(),
            }
        )


class LicenseClearView(APIView):
    """Drop the cached verdict."""

    permission_classes = [HasAdminApiKey]

    @extend_schema(
        operation_id="license_clear",
        summary="Clear License Cache",
        tags=["Licensing"],
        parameters=[ADMIN_KEY_PARAMETER],
        request=None,
    )
    def post(self, _request: Request) -> Response:
        service = get_license_service()
        service.cache.clear()
        return Response({"success": True, "message": "License cache cleared"})
