"""
Integration tests for Scan Classifier.

Test components together or against real runtimes:
- API endpoints (FastAPI TestClient)
- Application startup and shutdown
- TFLite runtime (model converted at test time, skipped without TensorFlow)
- Tesseract binary (skipped when not installed)
"""
