"""Decision policy built on top of the normalization and similarity engine."""

from .policy import (
    DEFAULT_SIMILARITY_THRESHOLD,
    STRICT_SIMILARITY_THRESHOLD,
    SimilarityPolicy,
)

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "STRICT_SIMILARITY_THRESHOLD",
    "SimilarityPolicy",
]
