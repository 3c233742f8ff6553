"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests:
settings pointing at artifacts written to tmp_path, a deterministic linear
inference engine, and a scripted OCR engine.
"""

import json
from pathlib import Path
from typing import Any, Optional

import numpy as np
import pytest

from scan_classifier.classification.pipeline import TextClassificationPipeline
from scan_classifier.config import Settings
from scan_classifier.inference.base_engine import BaseInferenceEngine
from scan_classifier.models.artifacts import LabelTable, Vocabulary
from scan_classifier.ocr.base_engine import BaseOCREngine
from scan_classifier.ocr.exceptions import OCRError


FEATURE_SIZE = 1000

SAMPLE_VOCAB = {
    "buy": 0,
    "now": 1,
    "limited": 2,
    "offer": 3,
    "meeting": 4,
    "tomorrow": 5,
    "invoice": 6,
    "attached": 7,
}

SAMPLE_LABELS = ["spam", "ham", "invoice"]


class LinearEngine(BaseInferenceEngine):
    """Deterministic engine: scores = features @ weights."""

    def __init__(self, weights: np.ndarray):
        self.weights = np.asarray(weights, dtype=np.float32)
        self.calls = 0
        self.released = 0
        self.last_input: Optional[np.ndarray] = None
        super().__init__(input_size=self.weights.shape[0], output_size=self.weights.shape[1])

    @property
    def model_version(self) -> str:
        return "linear-test"

    def _invoke(self, features: np.ndarray) -> np.ndarray:
        self.calls += 1
        self.last_input = features.copy()
        return features @ self.weights

    def _release(self) -> None:
        self.released += 1


class ScriptedOCREngine(BaseOCREngine):
    """OCR engine returning a fixed text, or failing with a fixed error."""

    def __init__(self, text: str = "", error: Optional[str] = None, healthy: bool = True):
        self.text = text
        self.error = error
        self.healthy = healthy
        self.calls = 0

    def _extract_text(self, image: bytes) -> str:
        self.calls += 1
        if self.error is not None:
            raise OCRError(self.error)
        return self.text

    def health_check(self) -> bool:
        return self.healthy


def sample_weights(size: int = FEATURE_SIZE) -> np.ndarray:
    """Weights routing promotional words to spam, meeting words to ham, invoice words to invoice."""
    weights = np.zeros((size, len(SAMPLE_LABELS)), dtype=np.float32)
    for token in ("buy", "now", "limited", "offer"):
        weights[SAMPLE_VOCAB[token], 0] = 1.0
    for token in ("meeting", "tomorrow"):
        weights[SAMPLE_VOCAB[token], 1] = 1.0
    for token in ("invoice", "attached"):
        weights[SAMPLE_VOCAB[token], 2] = 1.0
    return weights


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Directory holding sample vocabulary and label artifacts."""
    (tmp_path / "tfidf_vocab.json").write_text(
        json.dumps({"vocab": SAMPLE_VOCAB, "idf": [1.5] * len(SAMPLE_VOCAB)}),
        encoding="utf-8",
    )
    (tmp_path / "labels.json").write_text(json.dumps(SAMPLE_LABELS), encoding="utf-8")
    return tmp_path


@pytest.fixture
def test_settings(artifacts_dir: Path) -> Settings:
    """Test settings with artifact paths inside tmp_path.

    The model path does not exist; tests that need a real model write one.
    """
    return Settings(
        APP_NAME="Scan Classifier (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        MODEL_PATH=str(artifacts_dir / "model_main.tflite"),
        VOCAB_PATH=str(artifacts_dir / "tfidf_vocab.json"),
        LABELS_PATH=str(artifacts_dir / "labels.json"),
        FEATURE_VECTOR_SIZE=FEATURE_SIZE,
        UNKNOWN_LABEL="Unknown",
        STARTUP_FAIL_FAST=False,
        MAX_UPLOAD_BYTES=1024,
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def write_json(tmp_path: Path):
    """Factory fixture writing a JSON (or raw string) artifact into tmp_path.

    Usage:
        def test_something(write_json):
            path = write_json("labels.json", ["a", "b"])
            path = write_json("broken.json", "{not json", raw=True)
    """
    def _write(name: str, content: Any, raw: bool = False) -> Path:
        path = tmp_path / name
        path.write_text(content if raw else json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_vocabulary() -> Vocabulary:
    return Vocabulary(token_to_index=SAMPLE_VOCAB, idf=(1.5,) * len(SAMPLE_VOCAB))


@pytest.fixture
def sample_labels() -> LabelTable:
    return LabelTable(labels=tuple(SAMPLE_LABELS))


@pytest.fixture
def sample_weight_matrix() -> np.ndarray:
    """[1000, 3] weights behind LinearEngine, also used to build real .tflite models."""
    return sample_weights()


@pytest.fixture
def make_linear_engine():
    """Factory fixture for LinearEngine.

    Usage:
        def test_something(make_linear_engine):
            engine = make_linear_engine()                 # sample weights
            engine = make_linear_engine(np.eye(4, 2))     # custom weights
    """
    def _create(weights: Optional[np.ndarray] = None) -> LinearEngine:
        return LinearEngine(sample_weights() if weights is None else weights)

    return _create


@pytest.fixture
def linear_engine(make_linear_engine) -> LinearEngine:
    return make_linear_engine()


@pytest.fixture
def sample_pipeline(linear_engine, sample_vocabulary, sample_labels) -> TextClassificationPipeline:
    """Pipeline over the sample vocabulary, labels and linear engine."""
    return TextClassificationPipeline(
        engine=linear_engine,
        vocabulary=sample_vocabulary,
        labels=sample_labels,
        feature_vector_size=FEATURE_SIZE,
    )


@pytest.fixture
def make_ocr_engine():
    """Factory fixture for ScriptedOCREngine.

    Usage:
        def test_something(make_ocr_engine):
            ok = make_ocr_engine(text="Buy now")
            broken = make_ocr_engine(error="Unsupported or corrupt image")
    """
    def _create(text: str = "", error: Optional[str] = None, healthy: bool = True) -> ScriptedOCREngine:
        return ScriptedOCREngine(text=text, error=error, healthy=healthy)

    return _create
