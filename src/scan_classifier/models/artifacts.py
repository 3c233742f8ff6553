"""
Bundled artifact models: vocabulary and label table.

The pydantic schema (VocabularyArtifact) describes the JSON file as shipped
next to the model, with explicit optional fields and documented fallbacks.
The frozen dataclasses (Vocabulary, LabelTable) are the read-only runtime
views handed to the classification pipeline. Both are created once at startup
and never mutated afterwards.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


logger = structlog.get_logger(__name__)


class VocabularyArtifact(BaseModel):
    """
    Schema of the vocabulary artifact: {"vocab": {token: index}, "idf": [w, ...]}.

    Fallbacks:
    - "vocab" absent or malformed -> {} (classification degrades to all-zero
      feature vectors, it does not fail)
    - "idf" absent or malformed -> []

    Fractional indices are truncated toward zero (1.9 -> 1) instead of
    invalidating the vocabulary.

    Unknown top-level keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    vocab: dict[str, int] = Field(
        default_factory=dict,
        description="Normalized token -> feature vector index",
    )
    idf: list[float] = Field(
        default_factory=list,
        description="Per-term document frequency weights (loaded, not applied)",
    )

    @field_validator("vocab", mode="before")
    @classmethod
    def _truncate_indices(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                token: math.trunc(index) if isinstance(index, float) and math.isfinite(index) else index
                for token, index in value.items()
            }
        return value

    @field_validator("vocab", mode="wrap")
    @classmethod
    def _fallback_vocab(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> dict[str, int]:
        try:
            return handler(value)
        except ValidationError as exc:
            logger.warning(
                "Malformed 'vocab' field, using empty vocabulary",
                error_count=exc.error_count(),
                value_type=type(value).__name__,
            )
            return {}

    @field_validator("idf", mode="wrap")
    @classmethod
    def _fallback_idf(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> list[float]:
        try:
            return handler(value)
        except ValidationError as exc:
            logger.warning(
                "Malformed 'idf' field, ignoring weights",
                error_count=exc.error_count(),
                value_type=type(value).__name__,
            )
            return []


@dataclass(frozen=True)
class Vocabulary:
    """
    Immutable token -> index lookup used by the feature vectorizer.

    Attributes:
        token_to_index: Read-only mapping of normalized tokens to vector slots
        idf: Document frequency weights shipped with the vocabulary. Kept for
            inspection only; the pipeline feeds raw counts to the model.
    """

    token_to_index: Mapping[str, int] = field(default_factory=dict)
    idf: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "token_to_index", MappingProxyType(dict(self.token_to_index)))
        object.__setattr__(self, "idf", tuple(self.idf))

    @classmethod
    def empty(cls) -> "Vocabulary":
        """Vocabulary used when the artifact is missing or unreadable."""
        return cls()

    @classmethod
    def from_artifact(cls, artifact: VocabularyArtifact) -> "Vocabulary":
        return cls(token_to_index=artifact.vocab, idf=tuple(artifact.idf))

    def index_of(self, token: str) -> Optional[int]:
        return self.token_to_index.get(token)

    @property
    def has_idf(self) -> bool:
        return len(self.idf) > 0

    def __contains__(self, token: object) -> bool:
        return token in self.token_to_index

    def __len__(self) -> int:
        return len(self.token_to_index)


@dataclass(frozen=True)
class LabelTable:
    """
    Ordered class names; position i names the i-th model output score.
    """

    labels: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))

    def __getitem__(self, index: int) -> str:
        return self.labels[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)
