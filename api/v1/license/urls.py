"""
URL configuration for licensing plugin endpoints.
"""

from django.urls import path

from api.v1.license import views
from licensing.config import ENDPOINTS

urlpatterns = [
    path(ENDPOINTS["health"], views.LicenseHealthView.as_view(), name="license-health"),
    path(ENDPOINTS["test"], views.LicenseTestView.as_view(), name="license-test"),
    path(ENDPOINTS["info"], views.LicenseInfoView.as_view(), name="license-info"),
    path(ENDPOINTS["status"], views.LicenseStatusView.as_view(), name="license-status"),
    path(ENDPOINTS["debug"], views.LicenseDebugView.as_view(), name="license-debug"),
    path(ENDPOINTS["refresh"], views.LicenseRefreshView.as_view(), name="license-refresh"),
    path(ENDPOINTS["clear"], views.LicenseClearView.as_view(), name="license-clear"),
]
