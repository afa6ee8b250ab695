"""
Example license-protected API.
"""

from django.utils.decorators import method_decorator
from drf_spectacular.utils import extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from licensing.middleware import require_license


@method_decorator(require_license, name="dispatch")
class PremiumFeatureView(APIView):
    """Feature available only with a valid license."""

    @extend_schema(
        operation_id="premium_feature",
        summary="Premium Feature",
        description="Returns the license details attached by the license check.",
        tags=["Premium"],
        responses={
            200: {"description": "License is valid"},
            403: {"description": "License rejected by the license server"},
            500: {"description": "Licensing is not configured"},
            503: {"description": "License server unavailable and nothing cached"},
        },
    )
    def get(self, request: Request) -> Response:
        return Response(
            {
                "message": "Success! You are accessing a license-protected feature.",
                "licenseDetails": getattr(request, "license_info", None),
            }
        )
