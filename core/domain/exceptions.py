"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class LicensingException(DomainException):
    """Base exception for licensing-related errors."""

    pass


class LicensingConfigurationError(LicensingException):
    """Raised when the license key or domain is not configured."""

    def __init__(
        self,
        message: str = "Licensing is not configured correctly on this application server.",
    ):
        super().__init__(message, code="CONFIGURATION_ERROR")


class LicenseServerUnavailableError(LicensingException):
    """
    Raised when the license server cannot produce a verdict.

    Covers connection errors, timeouts, non-2xx responses and
    undecodable bodies. ``status_code`` is the upstream status when the
    server answered at all.
    """

    def __init__(
        self,
        message: str = "Unable to connect to license server",
        status_code: Optional[int] = None,
        reason: str = "connection_error",
    ):
        super().__init__(message, code="SERVER_UNAVAILABLE")
        self.status_code = status_code
        self.reason = reason


class PluginException(DomainException):
    """Base exception for plugin registry errors."""

    pass


class PluginNotFoundError(PluginException):
    """Raised when a plugin is not registered."""

    def __init__(self, message: str = "Plugin not found"):
        super().__init__(message, code="PLUGIN_NOT_FOUND")


class PluginDependencyError(PluginException):
    """Raised when a plugin cannot be enabled because a dependency is disabled."""

    def __init__(self, message: str = "Plugin dependency is not enabled"):
        super().__init__(message, code="PLUGIN_DEPENDENCY_NOT_ENABLED")
