"""
HTTP-facing exceptions.

Each carries its status code and machine-readable error code so a single
handler can render them (see error_handlers.api_error_handler).
"""

from typing import Any


class APIError(Exception):
    """Base exception for errors reported to HTTP clients."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PipelineUnavailableError(APIError):
    """
    Classification requested while no model is loaded.

    Happens when startup failed (model or labels unusable) or after shutdown.
    """

    status_code = 503
    error_code = "model_unavailable"


class NoTextAvailableError(APIError):
    """Blank text submitted for classification."""

    status_code = 422
    error_code = "no_text"


class OCRFailedError(APIError):
    """OCR completed with a failure outcome."""

    status_code = 422
    error_code = "ocr_failed"


class UploadTooLargeError(APIError):
    """Uploaded image exceeds MAX_UPLOAD_BYTES."""

    status_code = 413
    error_code = "upload_too_large"
