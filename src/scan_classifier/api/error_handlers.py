"""
FastAPI exception handlers for structured error responses.

Maps domain exceptions to appropriate HTTP status codes and formats.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from scan_classifier.api.exceptions import APIError
from scan_classifier.inference.exceptions import InferenceError

logger = structlog.get_logger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    Handle client-facing errors (no text, OCR failure, model unavailable, ...).

    Args:
        request: FastAPI request
        exc: APIError instance

    Returns:
        JSON error response with the error's own status code
    """
    logger.warning(
        "Request rejected",
        error=exc.error_code,
        status_code=exc.status_code,
        details=exc.details,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.details,
            "timestamp": _timestamp(),
        },
    )


async def inference_error_handler(request: Request, exc: InferenceError) -> JSONResponse:
    """
    Handle per-call inference failures.

    Maps to 500 Internal Server Error: the model is loaded but the call failed.

    Args:
        request: FastAPI request
        exc: InferenceError instance

    Returns:
        JSON error response
    """
    logger.error(
        "Inference failed",
        error=exc.message,
        details=exc.details,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "inference_failed",
            "message": exc.message,
            "timestamp": _timestamp(),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.

    Args:
        request: FastAPI request
        exc: Exception instance

    Returns:
        JSON error response
    """
    logger.exception(
        "Unexpected error",
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": _timestamp(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    APIError: api_error_handler,
    InferenceError: inference_error_handler,
    Exception: generic_error_handler,
}
