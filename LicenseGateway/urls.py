"""
URL configuration for LicenseGateway project.
"""
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from api.v1.premium.views import PremiumFeatureView
from core.plugins import plugin_registry
from core.views import HealthView

urlpatterns = [
    # Health check endpoint
    path("health/", HealthView.as_view(), name="health"),
    path("api/plugins/", include("api.v1.plugins.urls")),
    # Example license-protected endpoint
    path("api/premium-feature/", PremiumFeatureView.as_view(), name="premium-feature"),
    # OpenAPI Schema
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    # Swagger UI
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    # ReDoc
    path(
        "api/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]

# Plugin routes (only enabled plugins are mounted)
urlpatterns += plugin_registry.get_urlpatterns()
