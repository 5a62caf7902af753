"""Prometheus metrics for monitoring approval rates and installment sizes"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Evaluation metrics
evaluation_counter = Counter(
    "finaurora_evaluation_total",
    "Total credit evaluations made",
    ["outcome", "tier"],  # approved | rejected; low | medium | high | default
)

invalid_argument_counter = Counter(
    "finaurora_invalid_argument_total",
    "Calls rejected for invalid loan terms or applicant figures",
    ["operation"],  # installment | evaluation
)

installment_amount_histogram = Histogram(
    "finaurora_installment_amount",
    "Computed monthly installments",
    buckets=[100_000, 250_000, 500_000, 1_000_000, 2_500_000, 5_000_000, 10_000_000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(approved: bool, tier: str, installment: Optional[float]) -> None:
    """Record evaluation metrics for monitoring approval rates per tier"""
    outcome = "approved" if approved else "rejected"
    evaluation_counter.labels(outcome=outcome, tier=tier).inc()

    # Low tier and loan-count rejections never compute an installment
    if installment is not None:
        installment_amount_histogram.observe(installment)
