"""
Arg-max label selection over model scores.
"""

import math
from typing import Sequence

from scan_classifier.models.enums import ClassificationStatus
from scan_classifier.models.output_models import ClassificationResult

UNKNOWN_LABEL = "Unknown"


def argmax_first(scores: Sequence[float]) -> int:
    """
    Index of the maximum score, first index winning ties.

    NaN scores never compare greater and are skipped.

    Returns:
        Winning index, or -1 when scores is empty or all NaN
    """
    best_index = -1
    best_score = -math.inf
    for index, score in enumerate(scores):
        score = float(score)
        if math.isnan(score):
            continue
        if best_index < 0 or score > best_score:
            best_index = index
            best_score = score
    return best_index


def select_label(
    scores: Sequence[float],
    labels: Sequence[str],
    unknown_label: str = UNKNOWN_LABEL,
) -> ClassificationResult:
    """
    Pick the label at the arg-max of the score vector.

    Only the first min(len(scores), len(labels)) positions take part, so a
    length mismatch never indexes past the label table.

    Args:
        scores: Raw model outputs (logits)
        labels: Label table, position i naming score i
        unknown_label: Sentinel returned when nothing can be selected

    Returns:
        ClassificationResult; status UNKNOWN with the sentinel label when
        there is no label, no score, or no comparable score
    """
    count = min(len(scores), len(labels))
    index = argmax_first([scores[i] for i in range(count)])

    if index < 0:
        return ClassificationResult(label=unknown_label, status=ClassificationStatus.UNKNOWN)

    return ClassificationResult(
        label=labels[index],
        status=ClassificationStatus.CLASSIFIED,
        score=float(scores[index]),
        label_index=index,
    )
