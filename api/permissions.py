"""
API permissions.
"""

import hmac

from drf_spectacular.utils import OpenApiParameter
from rest_framework.permissions import BasePermission

from licensing.services import get_license_service

ADMIN_KEY_PARAMETER = OpenApiParameter(
    name="X-API-Key",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="Admin API key",
)


class HasAdminApiKey(BasePermission):
    """Allow access when X-API-Key matches the configured admin key."""

    message = "Missing or invalid admin API key."

    def has_permission(self, request, view):
        expected = get_license_service().config.admin_api_key
        provided = request.headers.get("X-API-Key", "")
        if not expected or not provided:
            return False
        # Header values arrive decoded as latin-1
        return hmac.compare_digest(expected.encode(), provided.encode("latin-1", "replace"))
