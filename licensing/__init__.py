"""
Licensing module - application-side license validation plugin.

This module handles:
- Validating the configured license key against the remote license server
- Caching the last verdict in process memory
- Falling back to the last successful verdict while the server is unreachable
- Gating protected routes through middleware or a view decorator
"""
