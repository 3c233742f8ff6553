"""
Optical character recognition.

Components:
- BaseOCREngine: Abstract base class, single-completion async recognize()
- TesseractOCREngine: pytesseract implementation
- OCRError: Backend failure, surfaced to callers as a failed OCRResult
"""

from scan_classifier.ocr.base_engine import BaseOCREngine
from scan_classifier.ocr.exceptions import OCRError
from scan_classifier.ocr.tesseract_engine import TesseractOCREngine

__all__ = [
    "BaseOCREngine",
    "TesseractOCREngine",
    "OCRError",
]
