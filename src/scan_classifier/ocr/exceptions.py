"""
Exceptions for the OCR layer.

OCRError never leaves the OCR package: BaseOCREngine.recognize() turns it
into a failed OCRResult, which is the single completion callers await.
"""


class OCRError(Exception):
    """Raised by OCR backends when an image cannot be recognized."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
