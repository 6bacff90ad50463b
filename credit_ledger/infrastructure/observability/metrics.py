"""Prometheus metrics for payment projections, overlay toggles and credit lookups"""

from prometheus_client import Counter, Histogram
from credit_ledger.domain.matrix import ALL_ACCOUNTS

# Projection metrics
matrix_build_counter = Counter(
    "credit_ledger_matrix_builds_total",
    "Payment matrices built",
    ["scope"],  # all | single
)

matrix_build_histogram = Histogram(
    "credit_ledger_matrix_build_seconds",
    "Time spent building the payment matrix",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

# Overlay metrics
overlay_toggle_counter = Counter(
    "credit_ledger_overlay_toggles_total",
    "Paid-month toggles by resulting state",
    ["state"],  # paid | unpaid
)

# Credit metrics
credit_lookup_counter = Counter(
    "credit_ledger_credit_lookups_total",
    "Credit availability computations",
    ["outcome"],  # within_limit | over_limit | not_found
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_matrix_build(account_filter: str, duration_seconds: float) -> None:
    """Record matrix build count and latency"""
    scope = "all" if account_filter == ALL_ACCOUNTS else "single"
    matrix_build_counter.labels(scope=scope).inc()
    matrix_build_histogram.observe(duration_seconds)


def record_toggle(is_paid: bool) -> None:
    overlay_toggle_counter.labels(state="paid" if is_paid else "unpaid").inc()


def record_credit_lookup(available: float | None) -> None:
    """Record a credit lookup; None means the account was not found"""
    if available is None:
        outcome = "not_found"
    elif available < 0:
        outcome = "over_limit"
    else:
        outcome = "within_limit"
    credit_lookup_counter.labels(outcome=outcome).inc()
