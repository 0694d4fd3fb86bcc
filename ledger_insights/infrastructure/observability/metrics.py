"""Prometheus metrics for analysis outcomes and request latency"""

from prometheus_client import Counter, Histogram

# Analysis metrics
analysis_counter = Counter(
    "ledger_analysis_total",
    "Total financial analyses completed",
    ["health_status"],  # healthy | warning | critical
)

subscriptions_detected_histogram = Histogram(
    "ledger_subscriptions_detected",
    "Subscriptions detected per analysis",
    buckets=[0, 1, 2, 5, 10, 20, 50],
)

invalid_input_counter = Counter(
    "ledger_invalid_input_total",
    "Requests rejected for malformed transaction or account data",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(health_status: str, subscription_count: int) -> None:
    """Record the health status distribution and subscription counts"""
    analysis_counter.labels(health_status=health_status).inc()
    subscriptions_detected_histogram.observe(subscription_count)
