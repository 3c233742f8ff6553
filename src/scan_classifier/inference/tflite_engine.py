"""
TensorFlow Lite inference engine.

Wraps tf.lite.Interpreter for a single-input, single-output float32
classifier. The interpreter memory-maps the model file read-only when it
is built from a path, so the model is loaded once and shared by every call.
"""

import hashlib
from pathlib import Path
from typing import Optional

import numpy as np
import structlog

from scan_classifier.inference.base_engine import BaseInferenceEngine
from scan_classifier.inference.exceptions import InferenceError, ModelLoadError


logger = structlog.get_logger(__name__)


def _file_sha256(path: Path) -> str:
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


class TFLiteEngine(BaseInferenceEngine):
    """
    TFLite-backed inference engine.

    Expects a model with exactly one float32 input tensor holding
    expected_input_size elements (batch dimension of 1 included) and one
    float32 output tensor.
    """

    def __init__(
        self,
        model_path: str | Path,
        expected_input_size: Optional[int] = None,
        num_threads: Optional[int] = None,
    ):
        """
        Load the model and allocate tensors.

        Args:
            model_path: Path to the .tflite file
            expected_input_size: Feature vector size the model must accept
            num_threads: Interpreter thread count (None lets TFLite decide)

        Raises:
            ModelLoadError: Missing or unreadable file, invalid model,
                unsupported tensor layout, or input size mismatch
        """
        self.model_path = Path(model_path)
        if not self.model_path.is_file():
            raise ModelLoadError(
                "Model file not found",
                details={"model_path": str(self.model_path)},
            )

        try:
            self._sha256 = _file_sha256(self.model_path)
        except OSError as e:
            raise ModelLoadError(
                "Model file could not be read",
                details={"model_path": str(self.model_path), "error": str(e)},
            ) from e
        self._interpreter = self._load_interpreter(self.model_path, num_threads)

        input_details = self._interpreter.get_input_details()
        output_details = self._interpreter.get_output_details()
        if len(input_details) != 1 or len(output_details) != 1:
            raise ModelLoadError(
                "Model must have exactly one input and one output tensor",
                details={
                    "inputs": len(input_details),
                    "outputs": len(output_details),
                },
            )

        for kind, detail in (("input", input_details[0]), ("output", output_details[0])):
            if detail["dtype"] != np.float32:
                raise ModelLoadError(
                    f"Model {kind} tensor must be float32",
                    details={"dtype": str(detail["dtype"])},
                )

        self._input_index = input_details[0]["index"]
        self._input_shape = tuple(int(dim) for dim in input_details[0]["shape"])
        self._output_index = output_details[0]["index"]

        input_size = int(np.prod(self._input_shape))
        output_size = int(np.prod(output_details[0]["shape"]))

        if expected_input_size is not None and input_size != expected_input_size:
            raise ModelLoadError(
                "Model input size does not match the feature vector size",
                details={"expected": expected_input_size, "actual": input_size},
            )

        super().__init__(input_size=input_size, output_size=output_size)

        logger.info(
            "TFLite model loaded",
            model_path=str(self.model_path),
            model_sha256=self._sha256,
            input_shape=list(self._input_shape),
            output_size=output_size,
        )

    @staticmethod
    def _load_interpreter(model_path: Path, num_threads: Optional[int]):
        try:
            import tensorflow as tf
        except ImportError as e:
            raise ModelLoadError(
                "TensorFlow is not installed",
                details={"error": str(e)},
            ) from e

        try:
            interpreter = tf.lite.Interpreter(
                model_path=str(model_path),
                num_threads=num_threads,
            )
            interpreter.allocate_tensors()
        except (ValueError, RuntimeError) as e:
            raise ModelLoadError(
                "Failed to load TFLite model",
                details={"model_path": str(model_path), "error": str(e)},
            ) from e
        return interpreter

    @property
    def model_version(self) -> str:
        return self._sha256

    def _invoke(self, features: np.ndarray) -> np.ndarray:
        try:
            self._interpreter.set_tensor(self._input_index, features.reshape(self._input_shape))
            self._interpreter.invoke()
            return self._interpreter.get_tensor(self._output_index)
        except (ValueError, RuntimeError) as e:
            raise InferenceError(
                "TFLite invocation failed",
                details={"error": str(e)},
            ) from e

    def _release(self) -> None:
        self._interpreter = None
