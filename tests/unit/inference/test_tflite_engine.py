"""Unit tests for TFLiteEngine (interpreter mocked, no TensorFlow needed)."""

import hashlib

import numpy as np
import pytest

from scan_classifier.inference.exceptions import InferenceError, ModelLoadError
from scan_classifier.inference.tflite_engine import TFLiteEngine


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / "model_main.tflite"
    path.write_bytes(b"TFL3 fake flatbuffer")
    return path


@pytest.fixture
def patched_interpreter(monkeypatch, mock_interpreter):
    """Make TFLiteEngine load mock_interpreter instead of a real model."""
    monkeypatch.setattr(
        TFLiteEngine,
        "_load_interpreter",
        staticmethod(lambda model_path, num_threads: mock_interpreter),
    )
    return mock_interpreter


class TestTFLiteEngineLoad:

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ModelLoadError, match="not found") as exc_info:
            TFLiteEngine(tmp_path / "missing.tflite")

        assert exc_info.value.details["model_path"].endswith("missing.tflite")

    def test_unreadable_file_raises_model_load_error(self, model_file, monkeypatch):
        def denied(path):
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("scan_classifier.inference.tflite_engine._file_sha256", denied)

        with pytest.raises(ModelLoadError, match="could not be read") as exc_info:
            TFLiteEngine(model_file)

        assert "Permission denied" in exc_info.value.details["error"]

    def test_sizes_come_from_tensor_shapes(self, model_file, patched_interpreter):
        engine = TFLiteEngine(model_file)

        assert engine.input_size == 4
        assert engine.output_size == 2

    def test_model_version_is_file_digest(self, model_file, patched_interpreter):
        engine = TFLiteEngine(model_file)
        assert engine.model_version == hashlib.sha256(b"TFL3 fake flatbuffer").hexdigest()

    def test_expected_input_size_mismatch_raises(self, model_file, patched_interpreter):
        with pytest.raises(ModelLoadError) as exc_info:
            TFLiteEngine(model_file, expected_input_size=1000)

        assert exc_info.value.details == {"expected": 1000, "actual": 4}

    def test_multiple_inputs_rejected(self, model_file, patched_interpreter):
        details = patched_interpreter.get_input_details.return_value
        patched_interpreter.get_input_details.return_value = details * 2

        with pytest.raises(ModelLoadError, match="exactly one input"):
            TFLiteEngine(model_file)

    def test_non_float_input_rejected(self, model_file, patched_interpreter):
        patched_interpreter.get_input_details.return_value = [
            {"index": 0, "shape": np.array([1, 4]), "dtype": np.int8}
        ]

        with pytest.raises(ModelLoadError, match="float32"):
            TFLiteEngine(model_file)

    def test_corrupt_model_raises(self, model_file):
        pytest.importorskip("tensorflow")

        with pytest.raises(ModelLoadError, match="Failed to load"):
            TFLiteEngine(model_file)


class TestTFLiteEngineRun:

    def test_run_feeds_batched_input(self, model_file, patched_interpreter):
        engine = TFLiteEngine(model_file)

        scores = engine.run(np.array([1, 0, 2, 0], dtype=np.float32))

        np.testing.assert_allclose(scores, [0.25, 0.75])
        index, tensor = patched_interpreter.set_tensor.call_args.args
        assert index == 0
        assert tensor.shape == (1, 4)
        assert tensor.dtype == np.float32
        patched_interpreter.invoke.assert_called_once()
        patched_interpreter.get_tensor.assert_called_once_with(1)

    def test_invoke_failure_raises_inference_error(self, model_file, patched_interpreter):
        patched_interpreter.invoke.side_effect = RuntimeError("delegate failed")
        engine = TFLiteEngine(model_file)

        with pytest.raises(InferenceError) as exc_info:
            engine.run(np.zeros(4, dtype=np.float32))

        assert exc_info.value.details["error"] == "delegate failed"

    def test_close_drops_interpreter_once(self, model_file, patched_interpreter):
        engine = TFLiteEngine(model_file)

        engine.close()
        engine.close()

        assert engine.closed
        assert engine._interpreter is None
        with pytest.raises(InferenceError):
            engine.run(np.zeros(4, dtype=np.float32))
