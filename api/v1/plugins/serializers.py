"""
Serializers for plugin management endpoints.
"""

from rest_framework import serializers


class PluginSerializer(serializers.Serializer):
    """Serializer for a plugin descriptor."""

    name = serializers.CharField()
    version = serializers.CharField()
    base_path = serializers.CharField()
    depends_on = serializers.ListField(child=serializers.CharField())
    enabled = serializers.BooleanField()
    description = serializers.CharField(allow_blank=True)


class PluginToggleSerializer(serializers.Serializer):
    """Serializer for a plugin toggle request."""

    enabled = serializers.BooleanField()


class PluginToggleResponseSerializer(serializers.Serializer):
    """Serializer for a plugin toggle response."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    changed = serializers.ListField(child=serializers.CharField())
