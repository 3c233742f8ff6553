"""
Text classification pipeline.

Stages:
- text_normalizer.normalize: raw text -> lowercase alphanumeric tokens
- vectorizer.vectorize: tokens -> fixed-length bag-of-words counts
- selector.select_label: model scores -> arg-max label
- pipeline.TextClassificationPipeline: the stages around the inference engine
- scan.recognize_and_classify: OCR followed by classification
"""

from scan_classifier.classification.pipeline import TextClassificationPipeline
from scan_classifier.classification.scan import recognize_and_classify
from scan_classifier.classification.selector import UNKNOWN_LABEL, argmax_first, select_label
from scan_classifier.classification.text_normalizer import normalize
from scan_classifier.classification.vectorizer import DEFAULT_FEATURE_VECTOR_SIZE, vectorize

__all__ = [
    "normalize",
    "vectorize",
    "argmax_first",
    "select_label",
    "TextClassificationPipeline",
    "recognize_and_classify",
    "UNKNOWN_LABEL",
    "DEFAULT_FEATURE_VECTOR_SIZE",
]
