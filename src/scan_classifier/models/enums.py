"""
Enumerations for Scan Classifier data models.
"""

from enum import Enum


class ClassificationStatus(str, Enum):
    """
    Outcome of a single classification call.

    UNKNOWN is returned together with the sentinel label when no label could
    be selected (no labels loaded, or no comparable score). Callers use the
    status rather than comparing label strings.
    """

    CLASSIFIED = "classified"
    UNKNOWN = "unknown"


class OCRStatus(str, Enum):
    """Outcome of a single OCR call. Exactly one per call."""

    SUCCESS = "success"
    FAILURE = "failure"
