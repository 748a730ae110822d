"""Prometheus metrics for monitoring authorization rates, rejections, and bank performance"""

from prometheus_client import Counter, Histogram

# Payment outcome metrics
payment_counter = Counter(
    "payment_gateway_payments_total",
    "Payments processed to a terminal outcome",
    ["status"],  # Authorized | Declined
)

rejection_counter = Counter(
    "payment_gateway_rejections_total",
    "Payment requests rejected before an outcome was recorded",
    ["reason"],
)

# Bank API metrics
bank_latency_histogram = Histogram(
    "bank_authorization_latency_seconds",
    "Acquiring bank authorization response time",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

bank_failures_counter = Counter(
    "bank_authorization_failures_total",
    "Failed acquiring bank calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_payment(status: str) -> None:
    """Record a completed payment for authorization-rate monitoring"""
    payment_counter.labels(status=status).inc()


def record_rejection(reason: str) -> None:
    """Record a rejected payment; bank outages are also counted separately"""
    rejection_counter.labels(reason=reason).inc()
    if reason == "bank_unavailable":
        bank_failures_counter.inc()
