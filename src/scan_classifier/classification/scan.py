"""
Scan flow: recognize an image, then classify the recognized text.

Classification only runs after OCR has completed successfully with
non-blank text. A failed OCR outcome is returned as is.
"""

import structlog

from scan_classifier.classification.pipeline import TextClassificationPipeline
from scan_classifier.models.output_models import ScanResult
from scan_classifier.ocr.base_engine import BaseOCREngine

logger = structlog.get_logger(__name__)


async def recognize_and_classify(
    image: bytes,
    ocr_engine: BaseOCREngine,
    pipeline: TextClassificationPipeline,
) -> ScanResult:
    """
    Run OCR on an image and classify the result.

    Args:
        image: Raw image file bytes
        ocr_engine: OCR backend
        pipeline: Loaded classification pipeline

    Returns:
        ScanResult; classification is None when OCR failed or the
        recognized text is blank

    Raises:
        InferenceError: The model failed on the recognized text
    """
    ocr_result = await ocr_engine.recognize(image)

    if not ocr_result.succeeded:
        return ScanResult(ocr=ocr_result)

    if not ocr_result.text.strip():
        logger.info("No text available for classification")
        return ScanResult(ocr=ocr_result)

    classification = pipeline.classify_detailed(ocr_result.text)
    return ScanResult(ocr=ocr_result, classification=classification)
