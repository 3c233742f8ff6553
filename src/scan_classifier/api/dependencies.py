"""
FastAPI dependency injection for Scan Classifier.

The classification pipeline is created at application startup and kept on
app.state so its lifetime matches the application's. The OCR engine is a
cheap, stateless singleton built on first use.
"""

from functools import lru_cache

from fastapi import Request

from scan_classifier.api.exceptions import PipelineUnavailableError
from scan_classifier.classification.pipeline import TextClassificationPipeline
from scan_classifier.config import Settings, settings
from scan_classifier.ocr.base_engine import BaseOCREngine
from scan_classifier.ocr.tesseract_engine import TesseractOCREngine


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


def get_pipeline(request: Request) -> TextClassificationPipeline:
    """
    Get the classification pipeline loaded at startup.

    Args:
        request: Current request (gives access to app.state)

    Returns:
        Loaded TextClassificationPipeline

    Raises:
        PipelineUnavailableError: Startup failed or the app is shutting down
    """
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None or pipeline.closed:
        raise PipelineUnavailableError(
            "Classification model is not loaded",
            details={"startup_error": getattr(request.app.state, "startup_error", None)},
        )
    return pipeline


@lru_cache()
def get_ocr_engine() -> BaseOCREngine:
    """
    Get singleton OCR engine configured from settings.

    Returns:
        TesseractOCREngine instance
    """
    settings = get_settings()
    return TesseractOCREngine(
        language=settings.OCR_LANGUAGE,
        tesseract_cmd=settings.OCR_TESSERACT_CMD,
        timeout=settings.OCR_TIMEOUT,
        config=settings.OCR_CONFIG,
    )
