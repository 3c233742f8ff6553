"""
Abstract base engine for local model inference.

Defines the interface every inference backend (TFLite, test doubles, ...)
must adhere to. The classification pipeline only ever talks to this
interface: a fixed-length float32 vector in, a fixed-length float32 score
vector out.
"""

import threading
from abc import ABC, abstractmethod

import numpy as np
import structlog

from scan_classifier.inference.exceptions import InferenceError


logger = structlog.get_logger(__name__)


class BaseInferenceEngine(ABC):
    """
    Abstract base class for inference engines.

    Responsibilities:
    - Own the loaded model for the lifetime of the engine
    - Validate input/output vector lengths
    - Serialize calls (one call completes before the next begins)
    - Release the underlying model exactly once

    Does NOT handle:
    - Text preprocessing (that's the vectorizer's job)
    - Label selection (that's the selector's job)

    Engines are context managers:

        with TFLiteEngine(path) as engine:
            scores = engine.run(features)
    """

    def __init__(self, input_size: int, output_size: int):
        """
        Initialize base engine.

        Args:
            input_size: Number of float32 input features the model expects
            output_size: Number of float32 scores the model produces
        """
        self.input_size = input_size
        self.output_size = output_size
        self._lock = threading.Lock()
        self._closed = False

        logger.info(
            "Initialized inference engine",
            engine_class=self.__class__.__name__,
            input_size=input_size,
            output_size=output_size,
        )

    @property
    def model_version(self) -> str:
        """Identifier of the loaded model. Subclasses should override."""
        return "unknown"

    @property
    def closed(self) -> bool:
        return self._closed

    def run(self, features: np.ndarray) -> np.ndarray:
        """
        Run the model synchronously on one feature vector.

        Args:
            features: 1-D vector of exactly input_size elements

        Returns:
            1-D float32 vector of exactly output_size scores

        Raises:
            InferenceError: Wrong input length, engine closed, or backend failure
        """
        vector = np.ascontiguousarray(features, dtype=np.float32).reshape(-1)
        if vector.size != self.input_size:
            raise InferenceError(
                f"Expected {self.input_size} input features, got {vector.size}",
                details={"expected": self.input_size, "actual": int(vector.size)},
            )

        with self._lock:
            if self._closed:
                raise InferenceError("Inference engine is closed")
            scores = self._invoke(vector)

        scores = np.asarray(scores, dtype=np.float32).reshape(-1)
        if scores.size != self.output_size:
            raise InferenceError(
                f"Expected {self.output_size} output scores, got {scores.size}",
                details={"expected": self.output_size, "actual": int(scores.size)},
            )
        return scores

    @abstractmethod
    def _invoke(self, features: np.ndarray) -> np.ndarray:
        """
        Backend-specific inference. Called with the engine lock held.

        Args:
            features: Contiguous float32 vector of input_size elements

        Returns:
            Score vector (any shape holding output_size elements)
        """
        pass

    def _release(self) -> None:
        """Release backend resources. Called at most once, lock held."""
        pass

    def close(self) -> None:
        """
        Release the loaded model.

        Safe to call more than once; only the first call releases anything.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._release()
        logger.info("Inference engine closed", engine_class=self.__class__.__name__)

    def __enter__(self) -> "BaseInferenceEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"input_size={self.input_size}, "
            f"output_size={self.output_size})"
        )
