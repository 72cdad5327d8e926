"""Prometheus metrics for monitoring approval rates, approved amounts and periods"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome", "reason"],  # approved | rejected, rejection reason or "none"
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_range",
    "Approved loan amounts by bucket",
    ["bucket"],  # <=4000, 4000-6000, 6000-8000, 8000+
)

approved_period_histogram = Histogram(
    "loan_approved_period_months",
    "Approved loan period in months",
    buckets=[12, 18, 24, 36, 48, 60],
)

unexpected_failure_counter = Counter(
    "loan_decision_failures_total",
    "Loan decisions that failed with an unexpected error",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def amount_bucket(loan_amount: int) -> str:
    """Bucket label for an approved amount"""
    if loan_amount <= 4000:
        return "<=4000"
    elif loan_amount <= 6000:
        return "4000-6000"
    elif loan_amount <= 8000:
        return "6000-8000"
    return "8000+"


def record_decision(
    approved: bool,
    reason: Optional[str],
    loan_amount: Optional[int],
    loan_period: Optional[int],
) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    outcome = "approved" if approved else "rejected"
    decision_counter.labels(outcome=outcome, reason=reason or "none").inc()

    if approved and loan_amount is not None and loan_period is not None:
        approved_amount_bucket_counter.labels(bucket=amount_bucket(loan_amount)).inc()
        approved_period_histogram.observe(loan_period)
