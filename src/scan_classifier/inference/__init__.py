"""
Local model inference.

Components:
- BaseInferenceEngine: Abstract base class (lifecycle, serialization, shape checks)
- TFLiteEngine: TensorFlow Lite implementation
- exceptions: ModelLoadError (startup-fatal) and InferenceError (per call)
"""

from scan_classifier.inference.base_engine import BaseInferenceEngine
from scan_classifier.inference.tflite_engine import TFLiteEngine
from scan_classifier.inference.exceptions import (
    InferenceEngineError,
    InferenceError,
    ModelLoadError,
)

__all__ = [
    "BaseInferenceEngine",
    "TFLiteEngine",
    "InferenceEngineError",
    "InferenceError",
    "ModelLoadError",
]
