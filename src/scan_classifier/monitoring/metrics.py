"""Custom Prometheus metrics for Scan Classifier.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- empty_feature_vectors_total (high ratio indicates vocabulary drift or bad OCR)
- ocr_requests_total{status="failure"} (camera/image quality issues)
- artifact_load_failures_total (any increase at startup)
"""

from prometheus_client import Counter, Histogram

# === Classification Metrics ===

classifications_total = Counter(
    "classifications_total",
    "Total classifications by predicted label and status",
    ["label", "status"],
)
"""
Classification counter.

Labels:
- label: Predicted class name, or the unknown sentinel
- status: classified, unknown

Used to detect label distribution drift.
"""

classification_latency_seconds = Histogram(
    "classification_latency_seconds",
    "End-to-end classification latency (normalize, vectorize, infer, select)",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

empty_feature_vectors_total = Counter(
    "empty_feature_vectors_total",
    "Classifications whose feature vector was all zeros (no known token)",
)
"""
All-zero feature vectors.

The model still produces a label for them. A high rate against
classifications_total means the recognized text rarely hits the vocabulary.
"""

# === OCR Metrics ===

ocr_requests_total = Counter(
    "ocr_requests_total",
    "Total OCR calls by outcome",
    ["status"],
)

ocr_latency_seconds = Histogram(
    "ocr_latency_seconds",
    "OCR latency in seconds",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)

# === Startup Metrics ===

artifact_load_failures_total = Counter(
    "artifact_load_failures_total",
    "Artifact load failures by artifact",
    ["artifact"],
)
"""
Artifact load failures.

Labels:
- artifact: model, labels, vocabulary

model and labels failures are fatal; vocabulary failures degrade to an
empty vocabulary.
"""
