"""Prometheus metrics for the Promo Code Factory service.

Business Metrics:
- promocode_limit_assignments_total: Limit assignments by outcome
- promocode_limit_cancellations_total: Limit cancellations by outcome

Technical Metrics:
- promocode_limit_assignment_latency_seconds: Limit assignment latency
- promocode_http_requests_total: HTTP requests by endpoint/status
- promocode_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

limit_assignments_total = Counter(
    "promocode_limit_assignments_total",
    "Total number of promo code limit assignments",
    ["outcome"],  # success, not_found, invalid_state, invalid_input
)

limit_cancellations_total = Counter(
    "promocode_limit_cancellations_total",
    "Total number of promo code limit cancellations",
    ["outcome"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

limit_assignment_latency = Histogram(
    "promocode_limit_assignment_latency_seconds",
    "Limit assignment latency in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "promocode_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "promocode_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def _outcome(result) -> str:
    if result.success:
        return "success"
    return result.error_kind.value


def record_limit_assignment(result) -> None:
    """Record the outcome of a limit assignment."""
    limit_assignments_total.labels(outcome=_outcome(result)).inc()


def record_limit_cancellation(result) -> None:
    """Record the outcome of a limit cancellation."""
    limit_cancellations_total.labels(outcome=_outcome(result)).inc()


@contextmanager
def track_limit_assignment_latency() -> Generator[None, None, None]:
    """Context manager to track limit assignment latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        limit_assignment_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
