"""
Exceptions raised while loading bundled artifacts.

Only the label artifact has a fatal failure mode: without a well-formed label
table, indexing model outputs is unsafe. The vocabulary artifact never raises
(it degrades to an empty vocabulary).
"""

from typing import Any


class ArtifactError(Exception):
    """
    Base exception for all artifact loading errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class LabelArtifactError(ArtifactError):
    """
    Label artifact missing, malformed, or inconsistent with the model.

    Startup-fatal: the service must not classify with an undefined label table.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        parse_error: str | None = None,
        expected_count: int | None = None,
        actual_count: int | None = None,
    ):
        """
        Initialize label artifact error.

        Args:
            message: Error description
            path: Path of the label artifact
            parse_error: Underlying JSON/schema error message
            expected_count: Model output dimensionality (for count mismatches)
            actual_count: Number of labels found
        """
        details: dict[str, Any] = {}
        if path:
            details["path"] = path
        if parse_error:
            details["parse_error"] = parse_error
        if expected_count is not None:
            details["expected_count"] = expected_count
        if actual_count is not None:
            details["actual_count"] = actual_count

        super().__init__(message, details)
