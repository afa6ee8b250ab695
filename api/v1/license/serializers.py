"""
Serializers for licensing plugin endpoints.
"""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Serializer for licensing error envelopes."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    error_code = serializers.CharField(required=False)


class HealthResponseSerializer(serializers.Serializer):
    """Serializer for plugin health response."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    server_url = serializers.URLField(required=False)


class TestResponseSerializer(serializers.Serializer):
    """Serializer for plugin test response."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    plugin = serializers.CharField()
    version = serializers.CharField()
    timestamp = serializers.DateTimeField()


class CacheStateSerializer(serializers.Serializer):
    """Serializer for the cached validation state."""

    cached = serializers.BooleanField()
    state = serializers.ChoiceField(choices=["unvalidated", "valid", "invalid", "unreachable"])
    fresh = serializers.BooleanField()
    age_seconds = serializers.FloatField(allow_null=True)
    fetched_at = serializers.DateTimeField(allow_null=True)
    cache_duration_seconds = serializers.IntegerField()
    message = serializers.CharField(required=False, allow_null=True)


class StatusResponseSerializer(serializers.Serializer):
    """Serializer for the frontend license indicator."""

    isValid = serializers.BooleanField()  # noqa: N815
    message = serializers.CharField()
    mode = serializers.CharField(required=False)
