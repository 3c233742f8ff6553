"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without a TFLite runtime or Tesseract binary.
"""

import io
from unittest.mock import Mock

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def mock_interpreter():
    """Mock tf.lite.Interpreter with one [1, 4] float32 input and one [1, 2] output."""
    mock = Mock()
    mock.get_input_details = Mock(
        return_value=[{"index": 0, "shape": np.array([1, 4]), "dtype": np.float32}]
    )
    mock.get_output_details = Mock(
        return_value=[{"index": 1, "shape": np.array([1, 2]), "dtype": np.float32}]
    )
    mock.allocate_tensors = Mock(return_value=None)
    mock.set_tensor = Mock(return_value=None)
    mock.invoke = Mock(return_value=None)
    mock.get_tensor = Mock(return_value=np.array([[0.25, 0.75]], dtype=np.float32))
    return mock


@pytest.fixture
def png_bytes():
    """A small white PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (32, 16), color="white").save(buffer, format="PNG")
    return buffer.getvalue()
