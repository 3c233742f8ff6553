"""
Bag-of-words feature vectorizer.

Counts known tokens into a fixed-length float32 vector laid out exactly as
the model input buffer (4 bytes per element, native byte order).
"""

from typing import Iterable

import numpy as np

from scan_classifier.models.artifacts import Vocabulary

DEFAULT_FEATURE_VECTOR_SIZE = 1000


def vectorize(
    tokens: Iterable[str],
    vocabulary: Vocabulary,
    size: int = DEFAULT_FEATURE_VECTOR_SIZE,
) -> np.ndarray:
    """
    Build a raw count vector from normalized tokens.

    Unknown tokens and vocabulary indices outside [0, size) are skipped.
    Token order does not matter. IDF weights carried by the vocabulary are
    not applied.

    Args:
        tokens: Normalized tokens (see text_normalizer.normalize)
        vocabulary: Token -> index lookup
        size: Feature vector length (model input dimensionality)

    Returns:
        float32 vector of length size with non-negative counts
    """
    features = np.zeros(size, dtype=np.float32)

    for token in tokens:
        index = vocabulary.index_of(token)
        if index is not None and 0 <= index < size:
            features[index] += 1.0

    return features
