"""Integration test fixtures (runtime checks and prerequisites).

Provides fixtures for checking if the TFLite runtime and the tesseract binary
are available. Integration tests are skipped if they are not installed.
"""

import pytest


@pytest.fixture(scope="session")
def check_tensorflow():
    """Check if TensorFlow (tf.lite) can be imported.

    Skips tests if TensorFlow is not installed.
    """
    return pytest.importorskip("tensorflow")


@pytest.fixture(scope="session")
def check_tesseract():
    """Check if the tesseract binary is on PATH.

    Skips tests if tesseract is not installed.
    """
    import pytesseract

    try:
        return pytesseract.get_tesseract_version()
    except pytesseract.TesseractNotFoundError as e:
        pytest.skip(f"Tesseract not available: {e}")


@pytest.fixture
def linear_tflite_model(check_tensorflow, tmp_path):
    """Factory fixture converting a weight matrix into a .tflite file.

    The model computes scores = features @ weights for a [1, N] float32 input.

    Usage:
        def test_something(linear_tflite_model):
            path = linear_tflite_model(weights)
    """
    tf = check_tensorflow

    def _build(weights, name: str = "model_main.tflite"):
        size = weights.shape[0]

        class LinearModel(tf.Module):
            def __init__(self):
                super().__init__()
                self.kernel = tf.constant(weights, dtype=tf.float32)

            @tf.function(input_signature=[tf.TensorSpec(shape=[1, size], dtype=tf.float32)])
            def __call__(self, features):
                return tf.matmul(features, self.kernel)

        model = LinearModel()
        converter = tf.lite.TFLiteConverter.from_concrete_functions(
            [model.__call__.get_concrete_function()], model
        )
        path = tmp_path / name
        path.write_bytes(converter.convert())
        return path

    return _build
