"""
Text classification pipeline.

recognized text -> normalize -> vectorize -> inference engine -> select label

The pipeline owns the inference engine it is given: closing the pipeline
closes the engine. Vocabulary and labels are read-only after construction,
so classify() is pure apart from the engine call and identical text always
yields the identical label for a fixed set of loaded artifacts.
"""

import time
from typing import Optional

import structlog

from scan_classifier.artifacts.exceptions import LabelArtifactError
from scan_classifier.artifacts.loader import load_labels, load_vocabulary
from scan_classifier.classification.selector import UNKNOWN_LABEL, select_label
from scan_classifier.classification.text_normalizer import normalize
from scan_classifier.classification.vectorizer import vectorize
from scan_classifier.config import Settings
from scan_classifier.inference.base_engine import BaseInferenceEngine
from scan_classifier.inference.exceptions import ModelLoadError
from scan_classifier.inference.tflite_engine import TFLiteEngine
from scan_classifier.models.artifacts import LabelTable, Vocabulary
from scan_classifier.models.enums import ClassificationStatus
from scan_classifier.models.output_models import ClassificationResult
from scan_classifier.models.pipeline_version import PipelineVersion
from scan_classifier.monitoring.metrics import (
    artifact_load_failures_total,
    classification_latency_seconds,
    classifications_total,
    empty_feature_vectors_total,
)

logger = structlog.get_logger(__name__)


class TextClassificationPipeline:
    """
    Classifies recognized text with a frozen bag-of-words model.

    Construction validates that the artifacts agree with the model:
    - the engine input size equals the feature vector size
    - a non-empty label table has one label per model output

    An empty label table is accepted; every call then returns the unknown
    sentinel without running the model.
    """

    def __init__(
        self,
        engine: BaseInferenceEngine,
        vocabulary: Vocabulary,
        labels: LabelTable,
        feature_vector_size: Optional[int] = None,
        unknown_label: str = UNKNOWN_LABEL,
        app_version: str = "0.1.0",
    ):
        """
        Args:
            engine: Loaded inference engine (ownership is transferred)
            vocabulary: Token -> index lookup
            labels: Label table in model output order
            feature_vector_size: Defaults to engine.input_size
            unknown_label: Sentinel label for unselectable results
            app_version: Reported in PipelineVersion

        Raises:
            ModelLoadError: Feature vector size differs from the model input
            LabelArtifactError: Label count differs from the model output
        """
        size = engine.input_size if feature_vector_size is None else feature_vector_size
        if size != engine.input_size:
            raise ModelLoadError(
                "Model input size does not match the feature vector size",
                details={"expected": size, "actual": engine.input_size},
            )
        if len(labels) and len(labels) != engine.output_size:
            raise LabelArtifactError(
                "Label count does not match the model output size",
                expected_count=engine.output_size,
                actual_count=len(labels),
            )

        self.engine = engine
        self.vocabulary = vocabulary
        self.labels = labels
        self.feature_vector_size = size
        self.unknown_label = unknown_label
        self.version = PipelineVersion(
            app_version=app_version,
            model_sha256=engine.model_version,
            feature_vector_size=size,
            vocabulary_size=len(vocabulary),
            label_count=len(labels),
            idf_loaded=vocabulary.has_idf,
        )

        logger.info("Classification pipeline ready", version=str(self.version))

    @classmethod
    def from_settings(cls, settings: Settings) -> "TextClassificationPipeline":
        """
        Load all bundled artifacts and build the pipeline.

        Raises:
            ModelLoadError: Model missing or unusable (startup-fatal)
            LabelArtifactError: Labels missing, malformed, or inconsistent
                with the model (startup-fatal)
        """
        vocabulary = load_vocabulary(settings.VOCAB_PATH)
        labels = load_labels(settings.LABELS_PATH)

        try:
            engine = TFLiteEngine(
                settings.MODEL_PATH,
                expected_input_size=settings.FEATURE_VECTOR_SIZE,
                num_threads=settings.INFERENCE_NUM_THREADS,
            )
        except ModelLoadError:
            artifact_load_failures_total.labels(artifact="model").inc()
            raise

        try:
            return cls(
                engine=engine,
                vocabulary=vocabulary,
                labels=labels,
                feature_vector_size=settings.FEATURE_VECTOR_SIZE,
                unknown_label=settings.UNKNOWN_LABEL,
                app_version=settings.APP_VERSION,
            )
        except LabelArtifactError:
            artifact_load_failures_total.labels(artifact="labels").inc()
            engine.close()
            raise
        except ModelLoadError:
            artifact_load_failures_total.labels(artifact="model").inc()
            engine.close()
            raise

    def classify(self, text: str) -> str:
        """Classify text and return only the predicted label string."""
        return self.classify_detailed(text).label

    def classify_detailed(self, text: str) -> ClassificationResult:
        """
        Classify text.

        Empty text or text with no known token is not an error: the model
        scores the all-zero vector like any other.

        Args:
            text: Recognized text

        Returns:
            ClassificationResult (status UNKNOWN when no label can be selected)

        Raises:
            InferenceError: The engine failed or is closed
        """
        start_time = time.perf_counter()

        tokens = normalize(text)
        features = vectorize(tokens, self.vocabulary, self.feature_vector_size)
        known_tokens = int(features.sum())
        if known_tokens == 0:
            empty_feature_vectors_total.inc()

        if len(self.labels) == 0:
            result = ClassificationResult(
                label=self.unknown_label,
                status=ClassificationStatus.UNKNOWN,
            )
        else:
            scores = self.engine.run(features)
            result = select_label(scores, self.labels, self.unknown_label)

        elapsed = time.perf_counter() - start_time
        classification_latency_seconds.observe(elapsed)
        classifications_total.labels(label=result.label, status=result.status.value).inc()

        logger.debug(
            "Text classified",
            token_count=len(tokens),
            known_tokens=known_tokens,
            label=result.label,
            status=result.status.value,
            duration_ms=round(elapsed * 1000, 2),
        )
        return result

    def close(self) -> None:
        """Release the inference engine. Idempotent."""
        self.engine.close()

    @property
    def closed(self) -> bool:
        return self.engine.closed

    def __enter__(self) -> "TextClassificationPipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
