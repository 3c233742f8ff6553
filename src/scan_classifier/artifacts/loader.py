"""
Startup loaders for the vocabulary and label artifacts.

Both artifacts are JSON files bundled next to the model and are read exactly
once when the service starts. Failure policies differ:

- Vocabulary: degraded-but-non-fatal. Missing file, invalid JSON, or a
  malformed "vocab" field fall back to an empty vocabulary.
- Labels: startup-fatal. Any problem raises LabelArtifactError.
"""

from pathlib import Path

import structlog
from pydantic import TypeAdapter, ValidationError

from scan_classifier.artifacts.exceptions import LabelArtifactError
from scan_classifier.models.artifacts import LabelTable, Vocabulary, VocabularyArtifact
from scan_classifier.monitoring.metrics import artifact_load_failures_total

logger = structlog.get_logger(__name__)

_LABELS_ADAPTER = TypeAdapter(list[str])


def load_vocabulary(path: str | Path) -> Vocabulary:
    """
    Load the vocabulary artifact.

    Args:
        path: Path to a JSON object {"vocab": {token: index}, "idf": [...]}

    Returns:
        Vocabulary, empty when the artifact is missing or unreadable
    """
    path = Path(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        artifact_load_failures_total.labels(artifact="vocabulary").inc()
        logger.warning(
            "Vocabulary artifact unreadable, using empty vocabulary",
            path=str(path),
            error=str(e),
        )
        return Vocabulary.empty()

    try:
        artifact = VocabularyArtifact.model_validate_json(raw)
    except ValidationError as e:
        # Invalid JSON or a top-level value that is not an object
        artifact_load_failures_total.labels(artifact="vocabulary").inc()
        logger.warning(
            "Vocabulary artifact malformed, using empty vocabulary",
            path=str(path),
            errors=[err["msg"] for err in e.errors()][:5],
        )
        return Vocabulary.empty()

    vocabulary = Vocabulary.from_artifact(artifact)
    if len(vocabulary) == 0:
        logger.warning("Vocabulary is empty, all feature vectors will be zero", path=str(path))

    logger.info(
        "Vocabulary loaded",
        path=str(path),
        vocabulary_size=len(vocabulary),
        idf_weights=len(vocabulary.idf),
    )
    return vocabulary


def load_labels(path: str | Path) -> LabelTable:
    """
    Load the label artifact.

    Args:
        path: Path to a JSON list of label strings

    Returns:
        LabelTable in artifact order

    Raises:
        LabelArtifactError: File missing or not a JSON list of strings
    """
    path = Path(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        artifact_load_failures_total.labels(artifact="labels").inc()
        raise LabelArtifactError(
            "Label artifact could not be read",
            path=str(path),
            parse_error=str(e),
        ) from e

    try:
        labels = _LABELS_ADAPTER.validate_json(raw)
    except ValidationError as e:
        artifact_load_failures_total.labels(artifact="labels").inc()
        first = e.errors()[0] if e.errors() else {}
        raise LabelArtifactError(
            "Label artifact is not a JSON list of strings",
            path=str(path),
            parse_error=f"{first.get('msg', 'invalid')} at {list(first.get('loc', ()))}",
        ) from e

    table = LabelTable(labels=tuple(labels))
    if len(table) == 0:
        logger.warning("Label table is empty, every classification will be unknown", path=str(path))

    logger.info("Labels loaded", path=str(path), label_count=len(table))
    return table
