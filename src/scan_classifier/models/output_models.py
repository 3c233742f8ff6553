"""
Output data models for Scan Classifier.

ClassificationResult is what the classification pipeline returns for one
text. OCRResult is the single completion of one OCR call. ScanResult ties
both together for the capture -> recognize -> classify flow.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from scan_classifier.models.enums import ClassificationStatus, OCRStatus


class ClassificationResult(BaseModel):
    """
    Predicted label for one text.

    When status is UNKNOWN the label holds the configured sentinel
    ("Unknown" by default) and score/label_index are None.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Predicted class name or the unknown sentinel")
    status: ClassificationStatus = Field(..., description="classified | unknown")
    score: Optional[float] = Field(default=None, description="Winning raw model score (logit)")
    label_index: Optional[int] = Field(default=None, ge=0, description="Index of the winning label")

    @property
    def is_unknown(self) -> bool:
        return self.status == ClassificationStatus.UNKNOWN


class OCRResult(BaseModel):
    """
    Single completion of an OCR call.

    Exactly one of text (success) or error (failure) is meaningful.
    """

    model_config = ConfigDict(frozen=True)

    status: OCRStatus
    text: str = Field(default="", description="Recognized text (success only)")
    error: Optional[str] = Field(default=None, description="Failure reason (failure only)")
    latency_ms: int = Field(default=0, ge=0, description="OCR duration in milliseconds")

    @property
    def succeeded(self) -> bool:
        return self.status == OCRStatus.SUCCESS

    @classmethod
    def success(cls, text: str, latency_ms: int = 0) -> "OCRResult":
        return cls(status=OCRStatus.SUCCESS, text=text, latency_ms=latency_ms)

    @classmethod
    def failure(cls, error: str, latency_ms: int = 0) -> "OCRResult":
        return cls(status=OCRStatus.FAILURE, error=error, latency_ms=latency_ms)


class ScanResult(BaseModel):
    """Outcome of recognizing an image and classifying its text."""

    model_config = ConfigDict(frozen=True)

    ocr: OCRResult
    classification: Optional[ClassificationResult] = Field(
        default=None,
        description="None when OCR failed or produced no usable text",
    )
