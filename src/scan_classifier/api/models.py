"""
API-specific request and response models for FastAPI endpoints.

These models wrap the core domain models (ClassificationResult, OCRResult)
with API-specific metadata and status information.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from scan_classifier.models.enums import OCRStatus
from scan_classifier.models.output_models import ClassificationResult, OCRResult


class ClassifyRequest(BaseModel):
    """Text to classify, typically the output of a previous /ocr call."""

    text: str = Field(
        description="Recognized text (arbitrary Unicode, may be multi-line)",
        examples=["Buy now, limited offer!"],
    )


class ClassifyResponse(BaseModel):
    """Response for the classification endpoint."""

    label: str = Field(description="Predicted label or the unknown sentinel")
    result: ClassificationResult = Field(description="Full classification result")


class OCRResponse(BaseModel):
    """Response for a successful OCR call."""

    status: OCRStatus = Field(description="Always success; failures are error responses")
    text: str = Field(description="Recognized text")
    message: str = Field(default="Text recognized successfully")
    latency_ms: int = Field(ge=0, description="OCR duration in milliseconds")


class ScanResponse(BaseModel):
    """Response for the OCR + classification endpoint."""

    ocr: OCRResult = Field(description="OCR outcome (always success here)")
    classification: Optional[ClassificationResult] = Field(
        default=None,
        description="None when the recognized text was blank",
    )
    message: str = Field(description="Human-readable outcome")


class HealthResponse(BaseModel):
    """Response for the health check endpoint."""

    status: str = Field(
        description="Overall health status",
        examples=["healthy", "degraded", "unhealthy"],
    )
    version: str = Field(description="Service version")
    services: dict[str, str] = Field(
        description="Status of each component",
        examples=[{"model": "ok", "vocabulary": "ok", "labels": "ok", "ocr": "ok"}],
    )
    timestamp: datetime = Field(description="Check timestamp (UTC)")


class VersionResponse(BaseModel):
    """Response for the pipeline version endpoint."""

    app_version: str
    model_sha256: str
    feature_vector_size: int
    vocabulary_size: int
    label_count: int
    idf_loaded: bool = Field(
        description="IDF weights present in the vocabulary artifact (never applied)",
    )
