"""
Prometheus metrics for the license gateway.

Custom metrics for license validation and request monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License validation metrics
license_validations_total = Counter(
    "license_validations_total",
    "License validation decisions",
    ["result"],  # valid | invalid | stale | unavailable | config_error
)

license_cache_lookups_total = Counter(
    "license_cache_lookups_total",
    "License cache lookups",
    ["outcome"],  # hit | miss | expired
)

license_server_request_duration_seconds = Histogram(
    "license_server_request_duration_seconds",
    "License server request duration in seconds",
    ["endpoint", "outcome"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
