"""Monitoring and metrics instrumentation for Scan Classifier.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from scan_classifier.monitoring.metrics import (
    artifact_load_failures_total,
    classification_latency_seconds,
    classifications_total,
    empty_feature_vectors_total,
    ocr_latency_seconds,
    ocr_requests_total,
)

__all__ = [
    "classifications_total",
    "classification_latency_seconds",
    "empty_feature_vectors_total",
    "ocr_requests_total",
    "ocr_latency_seconds",
    "artifact_load_failures_total",
]
