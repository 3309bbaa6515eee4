"""
Prometheus metrics for Order Service.

Tracks HTTP traffic, order lifecycle, pricing config changes and
document store operations.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "order_service_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "order_service_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0),
)

# Order metrics
orders_created_total = Counter(
    "order_service_orders_created_total",
    "Total orders created",
    ["size", "packaging"],
)

orders_deleted_total = Counter(
    "order_service_orders_deleted_total",
    "Total orders deleted",
)

order_validation_failures_total = Counter(
    "order_service_validation_failures_total",
    "Total rejected payloads",
    ["kind"],
)

# Config / settings metrics
config_updates_total = Counter(
    "order_service_config_updates_total",
    "Total pricing configuration updates",
)

settings_updates_total = Counter(
    "order_service_settings_updates_total",
    "Total settings updates",
)

# Store metrics
store_operations_total = Counter(
    "order_service_store_operations_total",
    "Total document store operations",
    ["operation", "status"],
)

store_operation_duration_seconds = Histogram(
    "order_service_store_operation_duration_seconds",
    "Document store operation duration in seconds",
    ["operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

store_resets_total = Counter(
    "order_service_store_resets_total",
    "Times the document was reset to defaults",
    ["reason"],
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_order_created(size: str, packaging: str):
    """Track a successfully created order."""
    orders_created_total.labels(size=size, packaging=packaging).inc()


def track_order_deleted():
    """Track a successfully deleted order."""
    orders_deleted_total.inc()


def track_validation_failure(kind: str):
    """Track a rejected order, config or settings payload."""
    order_validation_failures_total.labels(kind=kind).inc()


def track_config_update():
    config_updates_total.inc()


def track_settings_update():
    settings_updates_total.inc()


def track_store_operation(operation: str, success: bool, duration: float):
    """Track document store operation metrics."""
    status = "success" if success else "failure"
    store_operations_total.labels(operation=operation, status=status).inc()
    store_operation_duration_seconds.labels(operation=operation).observe(duration)


def track_store_reset(reason: str):
    store_resets_total.labels(reason=reason).inc()


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
