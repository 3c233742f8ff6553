"""
Bundled artifact loading (vocabulary and labels).
"""

from scan_classifier.artifacts.exceptions import ArtifactError, LabelArtifactError
from scan_classifier.artifacts.loader import load_labels, load_vocabulary

__all__ = [
    "load_vocabulary",
    "load_labels",
    "ArtifactError",
    "LabelArtifactError",
]
