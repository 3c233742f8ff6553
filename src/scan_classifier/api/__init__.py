"""
FastAPI API routes and endpoints.

- routes.py: POST /classify, POST /ocr, POST /scan, GET /health, GET /version
- dependencies.py: Dependency injection for the pipeline and OCR engine
- models.py: API-specific request/response models
- exceptions.py: HTTP-facing errors
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from scan_classifier.api import dependencies, error_handlers, models
from scan_classifier.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
