"""
API routes for text recognition and classification.

The two steps can be driven separately (POST /ocr, then POST /classify with
the recognized text) or in one call (POST /scan).
"""

from datetime import datetime, timezone

import structlog
from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import JSONResponse

from scan_classifier.api.dependencies import get_ocr_engine, get_pipeline, get_settings
from scan_classifier.api.exceptions import (
    NoTextAvailableError,
    OCRFailedError,
    UploadTooLargeError,
)
from scan_classifier.api.models import (
    ClassifyRequest,
    ClassifyResponse,
    HealthResponse,
    OCRResponse,
    ScanResponse,
    VersionResponse,
)
from scan_classifier.classification.pipeline import TextClassificationPipeline
from scan_classifier.classification.scan import recognize_and_classify
from scan_classifier.config import Settings
from scan_classifier.models.output_models import OCRResult
from scan_classifier.ocr.base_engine import BaseOCREngine

logger = structlog.get_logger(__name__)

NO_TEXT_MESSAGE = "No text available for classification"
OCR_SUCCESS_MESSAGE = "Text recognized successfully"

router = APIRouter()


async def _read_upload(file: UploadFile, settings: Settings) -> bytes:
    data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise UploadTooLargeError(
            "Uploaded image is too large",
            details={"max_bytes": settings.MAX_UPLOAD_BYTES},
        )
    return data


def _raise_for_ocr_failure(result: OCRResult) -> None:
    if not result.succeeded:
        raise OCRFailedError(
            f"Failed to recognize text: {result.error}",
            details={"latency_ms": result.latency_ms},
        )


@router.post(
    "/classify",
    response_model=ClassifyResponse,
    summary="Classify recognized text",
    responses={
        200: {"description": "Text classified (label may be the unknown sentinel)"},
        422: {"description": "Blank text"},
        503: {"description": "Model not loaded"},
    },
)
def classify_text(
    request: ClassifyRequest,
    pipeline: TextClassificationPipeline = Depends(get_pipeline),
) -> ClassifyResponse:
    """
    Classify a text.

    Declared sync so FastAPI runs it in the threadpool; the engine
    serializes concurrent calls.
    """
    if not request.text.strip():
        raise NoTextAvailableError(NO_TEXT_MESSAGE)

    result = pipeline.classify_detailed(request.text)
    logger.info(
        "Classification completed",
        label=result.label,
        status=result.status.value,
        text_length=len(request.text),
    )
    return ClassifyResponse(label=result.label, result=result)


@router.post(
    "/ocr",
    response_model=OCRResponse,
    summary="Recognize text in an image",
    responses={
        200: {"description": "Text recognized (may be empty)"},
        413: {"description": "Image too large"},
        422: {"description": "Recognition failed"},
    },
)
async def recognize_image(
    file: UploadFile = File(..., description="Photo of the document"),
    ocr_engine: BaseOCREngine = Depends(get_ocr_engine),
    settings: Settings = Depends(get_settings),
) -> OCRResponse:
    image = await _read_upload(file, settings)
    result = await ocr_engine.recognize(image)
    _raise_for_ocr_failure(result)

    return OCRResponse(
        status=result.status,
        text=result.text,
        message=OCR_SUCCESS_MESSAGE,
        latency_ms=result.latency_ms,
    )


@router.post(
    "/scan",
    response_model=ScanResponse,
    summary="Recognize text in an image and classify it",
    responses={
        200: {"description": "Text recognized; classified unless blank"},
        413: {"description": "Image too large"},
        422: {"description": "Recognition failed"},
        503: {"description": "Model not loaded"},
    },
)
async def scan_image(
    file: UploadFile = File(..., description="Photo of the document"),
    ocr_engine: BaseOCREngine = Depends(get_ocr_engine),
    pipeline: TextClassificationPipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> ScanResponse:
    image = await _read_upload(file, settings)
    scan = await recognize_and_classify(image, ocr_engine, pipeline)
    _raise_for_ocr_failure(scan.ocr)

    if scan.classification is None:
        message = NO_TEXT_MESSAGE
    else:
        message = f"Classification Result: {scan.classification.label}"

    return ScanResponse(ocr=scan.ocr, classification=scan.classification, message=message)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={
        200: {"description": "Model loaded (healthy or degraded)"},
        503: {"description": "Model not loaded"},
    },
)
def health_check(
    request: Request,
    ocr_engine: BaseOCREngine = Depends(get_ocr_engine),
    settings: Settings = Depends(get_settings),
):
    """
    Report the status of the model, artifacts and OCR backend.

    Unhealthy when no model is loaded. Degraded when the vocabulary is empty
    (all feature vectors zero), the label table is empty, or OCR is
    unavailable.
    """
    services: dict[str, str] = {}
    pipeline = getattr(request.app.state, "pipeline", None)

    if pipeline is None or pipeline.closed:
        services["model"] = "not_loaded"
        services["vocabulary"] = "not_loaded"
        services["labels"] = "not_loaded"
    else:
        services["model"] = "ok"
        services["vocabulary"] = "ok" if len(pipeline.vocabulary) else "empty"
        services["labels"] = "ok" if len(pipeline.labels) else "empty"

    services["ocr"] = "ok" if ocr_engine.health_check() else "unavailable"

    if services["model"] != "ok":
        health_status = "unhealthy"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif all(value == "ok" for value in services.values()):
        health_status = "healthy"
        status_code = status.HTTP_200_OK
    else:
        health_status = "degraded"
        status_code = status.HTTP_200_OK

    logger.info("Health check", status=health_status, services=services)

    response = HealthResponse(
        status=health_status,
        version=settings.APP_VERSION,
        services=services,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json"),
    )


@router.get(
    "/version",
    response_model=VersionResponse,
    summary="Get pipeline version information",
)
def get_version(
    pipeline: TextClassificationPipeline = Depends(get_pipeline),
) -> VersionResponse:
    """Return the loaded model digest and artifact sizes."""
    return VersionResponse(**pipeline.version.to_dict())
