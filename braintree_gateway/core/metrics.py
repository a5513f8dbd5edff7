"""Prometheus metrics for the Braintree gateway client.

Gateway Metrics:
- braintree_gateway_request_latency_seconds: Latency of calls to the gateway
- braintree_gateway_requests_total: Gateway calls by method and outcome

Operation Metrics:
- braintree_transaction_operations_total: Transaction operations by result
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from braintree_gateway.core.config import settings


gateway_request_latency = Histogram(
    "braintree_gateway_request_latency_seconds",
    "Braintree gateway request latency in seconds",
    ["method"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

gateway_requests_total = Counter(
    "braintree_gateway_requests_total",
    "Total number of Braintree gateway requests",
    ["method", "outcome"],  # ok, api_error, not_found, timeout, connection_error
)

transaction_operations_total = Counter(
    "braintree_transaction_operations_total",
    "Total number of transaction operations by result",
    ["operation", "status"],  # sale, refund, ... / ok, error
)


@contextmanager
def track_gateway_latency(method: str) -> Generator[None, None, None]:
    """Context manager to track gateway request latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            duration = time.perf_counter() - start
            gateway_request_latency.labels(method=method).observe(duration)


def record_gateway_request(method: str, outcome: str) -> None:
    """Record the outcome of a gateway request."""
    if settings.metrics_enabled:
        gateway_requests_total.labels(method=method, outcome=outcome).inc()


def record_transaction_operation(operation: str, status: str) -> None:
    """Record the result of a transaction operation."""
    if settings.metrics_enabled:
        transaction_operations_total.labels(operation=operation, status=status).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for a metrics response."""
    return CONTENT_TYPE_LATEST
