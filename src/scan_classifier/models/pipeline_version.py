"""
Pipeline versioning for audit and reproducibility.

PipelineVersion is a frozen dataclass that captures everything needed to
reproduce a classification: same model file + same vocabulary + same labels
+ same text = same label.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineVersion:
    """
    Immutable snapshot of the loaded classification pipeline.

    Attributes:
        app_version: Version of this service
        model_sha256: SHA-256 digest of the model file
        feature_vector_size: Number of input features fed to the model
        vocabulary_size: Number of tokens in the loaded vocabulary
        label_count: Number of labels (model output dimensionality)
        idf_loaded: Whether IDF weights were present in the vocabulary
            artifact. They are never applied to the feature vector.
    """

    app_version: str
    model_sha256: str
    feature_vector_size: int
    vocabulary_size: int
    label_count: int
    idf_loaded: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "app_version": self.app_version,
            "model_sha256": self.model_sha256,
            "feature_vector_size": self.feature_vector_size,
            "vocabulary_size": self.vocabulary_size,
            "label_count": self.label_count,
            "idf_loaded": self.idf_loaded,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PipelineVersion":
        """Create from dictionary."""
        return cls(
            app_version=data["app_version"],
            model_sha256=data["model_sha256"],
            feature_vector_size=data["feature_vector_size"],
            vocabulary_size=data["vocabulary_size"],
            label_count=data["label_count"],
            idf_loaded=data.get("idf_loaded", False),
        )

    def __str__(self) -> str:
        """Human-readable version string."""
        return (
            f"PipelineVersion("
            f"app={self.app_version}, "
            f"model={self.model_sha256[:12]}, "
            f"vocab={self.vocabulary_size}, "
            f"labels={self.label_count})"
        )
