"""
Abstract base engine for optical character recognition.

OCR is the only asynchronous step in the scan flow. Each call to
recognize() completes exactly once, with either a success carrying the
recognized text or a failure carrying the reason. There is no retry.
"""

import asyncio
import time
from abc import ABC, abstractmethod

import structlog

from scan_classifier.models.output_models import OCRResult
from scan_classifier.monitoring.metrics import ocr_latency_seconds, ocr_requests_total
from scan_classifier.ocr.exceptions import OCRError


logger = structlog.get_logger(__name__)


class BaseOCREngine(ABC):
    """
    Abstract base class for OCR backends.

    Subclasses implement the blocking _extract_text(); recognize() runs it
    in a worker thread so the event loop stays responsive. Cancelling the
    awaiting task abandons the result; the worker thread is not interrupted.
    """

    async def recognize(self, image: bytes) -> OCRResult:
        """
        Recognize text in an encoded image (JPEG, PNG, ...).

        Args:
            image: Raw image file bytes

        Returns:
            OCRResult with status success (text) or failure (error)
        """
        start_time = time.perf_counter()
        try:
            text = await asyncio.to_thread(self._extract_text, image)
        except OCRError as e:
            latency_ms = int((time.perf_counter() - start_time) * 1000)
            ocr_requests_total.labels(status="failure").inc()
            logger.warning(
                "Text recognition failed",
                engine_class=self.__class__.__name__,
                error=e.message,
                details=e.details,
                latency_ms=latency_ms,
            )
            return OCRResult.failure(e.message, latency_ms=latency_ms)

        elapsed = time.perf_counter() - start_time
        ocr_requests_total.labels(status="success").inc()
        ocr_latency_seconds.observe(elapsed)
        logger.info(
            "Text recognized",
            engine_class=self.__class__.__name__,
            text_length=len(text),
            latency_ms=int(elapsed * 1000),
        )
        return OCRResult.success(text, latency_ms=int(elapsed * 1000))

    @abstractmethod
    def _extract_text(self, image: bytes) -> str:
        """
        Blocking recognition.

        Raises:
            OCRError: Image unreadable or backend failure
        """
        pass

    def health_check(self) -> bool:
        """
        Check whether the backend is usable.

        Should NOT raise exceptions - return False on error.
        """
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
