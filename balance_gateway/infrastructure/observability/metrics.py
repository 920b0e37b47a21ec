"""Prometheus metrics for monitoring balance calculations and request health"""

from prometheus_client import Counter, Histogram

from balance_gateway.domain.models import AccountStatus

# Calculation metrics
calculation_counter = Counter(
    "balance_calculations_total",
    "Completed balance calculations",
    ["status"],  # normal | overdraft
)

transactions_per_request_histogram = Histogram(
    "balance_transactions_per_request",
    "Number of transactions submitted per calculation",
    buckets=[1, 5, 10, 50, 100, 500, 1000, 5000],
)

# Failure metrics
validation_failures_counter = Counter(
    "balance_validation_failures_total",
    "Requests rejected by validation",
)

internal_errors_counter = Counter(
    "balance_internal_errors_total",
    "Calculations that failed with an unexpected error",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(status: AccountStatus, transaction_count: int) -> None:
    """Record outcome and size of a successful calculation"""
    calculation_counter.labels(status=status.value).inc()
    transactions_per_request_histogram.observe(transaction_count)
