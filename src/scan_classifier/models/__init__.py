"""
Data models for Scan Classifier.

Includes:
- Enums (ClassificationStatus, OCRStatus)
- Artifact models (VocabularyArtifact schema, Vocabulary, LabelTable)
- Output models (ClassificationResult, OCRResult, ScanResult)
- PipelineVersion (frozen dataclass for audit/reproducibility)
"""

from scan_classifier.models.enums import ClassificationStatus, OCRStatus
from scan_classifier.models.artifacts import LabelTable, Vocabulary, VocabularyArtifact
from scan_classifier.models.output_models import ClassificationResult, OCRResult, ScanResult
from scan_classifier.models.pipeline_version import PipelineVersion

__all__ = [
    # Enums
    "ClassificationStatus",
    "OCRStatus",
    # Artifacts
    "VocabularyArtifact",
    "Vocabulary",
    "LabelTable",
    # Output models
    "ClassificationResult",
    "OCRResult",
    "ScanResult",
    # Pipeline version
    "PipelineVersion",
]
