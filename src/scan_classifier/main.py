"""
FastAPI application entry point for Scan Classifier.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from scan_classifier.api.error_handlers import EXCEPTION_HANDLERS
from scan_classifier.api.middleware import RequestTracingMiddleware
from scan_classifier.api.routes import router
from scan_classifier.artifacts.exceptions import LabelArtifactError
from scan_classifier.classification.pipeline import TextClassificationPipeline
from scan_classifier.config import settings
from scan_classifier.inference.exceptions import ModelLoadError
from scan_classifier.logging_config import configure_logging

# Configure structured logging before any other imports
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Scan Classifier",
    description="Recognize text in document photos and classify it with a local model",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)
app.state.pipeline = None
app.state.startup_error = None

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["classification"])


@app.on_event("startup")
def startup():
    """Load the model, vocabulary and labels once for the process lifetime."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        model_path=settings.MODEL_PATH,
        vocab_path=settings.VOCAB_PATH,
        labels_path=settings.LABELS_PATH,
    )

    try:
        app.state.pipeline = TextClassificationPipeline.from_settings(settings)
    except (ModelLoadError, LabelArtifactError) as e:
        app.state.pipeline = None
        app.state.startup_error = e.message
        logger.error(
            "Classification pipeline failed to load",
            error_type=type(e).__name__,
            error=e.message,
            details=e.details,
        )
        if settings.STARTUP_FAIL_FAST:
            raise
        return

    app.state.startup_error = None
    logger.info("Application startup complete", pipeline=str(app.state.pipeline.version))


@app.on_event("shutdown")
def shutdown():
    """Release the loaded model."""
    logger.info("Application shutdown")
    pipeline = app.state.pipeline
    app.state.pipeline = None
    if pipeline is not None:
        pipeline.close()
    logger.info("Application shutdown complete")


# Prometheus metrics instrumentation
if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "scan_classifier.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
