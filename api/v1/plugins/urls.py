"""
URL configuration for plugin management endpoints.
"""

from django.urls import path

from api.v1.plugins import views

urlpatterns = [
    path("", views.PluginListView.as_view(), name="plugin-list"),
    path("status", views.PluginStatusView.as_view(), name="plugin-status"),
    path("<str:key>/toggle", views.PluginToggleView.as_view(), name="plugin-toggle"),
]
