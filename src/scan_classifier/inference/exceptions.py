"""
Custom exceptions for the inference engine layer.

Loading failures and per-call failures are separate types so that the
application can refuse to start on the former and report the latter as a
failed request.
"""


class InferenceEngineError(Exception):
    """
    Base exception for all inference engine errors.

    All engine-specific exceptions inherit from this to allow catching
    any engine-related error with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ModelLoadError(InferenceEngineError):
    """
    Raised when the model artifact cannot be loaded.

    Examples:
    - Model file missing
    - File is not a valid TFLite flatbuffer
    - Input tensor size differs from the configured feature vector size
    - TFLite runtime not installed

    Startup-fatal: the classification feature cannot function.
    """
    pass


class InferenceError(InferenceEngineError):
    """
    Raised when a single inference call fails.

    Examples:
    - Input vector of the wrong length
    - Interpreter invoke failure
    - Engine already closed
    """
    pass
