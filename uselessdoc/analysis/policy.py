"""Similarity decision policy.

Responsibilities:
- Normalize two raw operands, score them and apply the similarity threshold.
- Classify documentation text into verdict categories.
"""

from __future__ import annotations

from ..models.datatypes import Verdict
from ..text.normalizer import TextNormalizer
from ..text.similarity import Similarity, compare


DEFAULT_SIMILARITY_THRESHOLD = 0.5
STRICT_SIMILARITY_THRESHOLD = 0.8


class SimilarityPolicy:
    """Decide whether documentation text only restates a name or type."""

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ) -> None:
        """Initialize with a normalizer and a ratio threshold in [0, 1]."""

        if not 0.0 <= threshold <= 1.0:
            raise ValueError("`threshold` must be between 0 and 1.")
        self.normalizer = normalizer or TextNormalizer()
        self.threshold = threshold

    def similarity(self, text: str, other: str) -> Similarity:
        """Normalize both operands independently and compare them."""

        return compare(self.normalizer.normalize(text), self.normalizer.normalize(other))

    def too_similar(self, text: str, other: str) -> Similarity | None:
        """Return the similarity when it reaches the threshold, else `None`."""

        similarity = self.similarity(text, other)
        if similarity.ratio >= self.threshold:
            return similarity
        return None

    def is_too_similar(self, text: str, other: str) -> bool:
        """Return whether `text` is redundant given `other`."""

        return self.too_similar(text, other) is not None

    def is_empty(self, text: str) -> bool:
        """Return whether text normalizes to nothing."""

        return self.normalizer.is_empty(text)

    def verdict(self, text: str, *, name: str, type_name: str | None = None) -> Verdict:
        """Classify text against an entity name and, optionally, its type."""

        if self.is_empty(text):
            return Verdict.EMPTY_CONTENT
        if self.is_too_similar(text, name):
            return Verdict.TOO_SIMILAR_TO_NAME
        if type_name is not None and self.is_too_similar(text, type_name):
            return Verdict.TOO_SIMILAR_TO_TYPE
        return Verdict.ACCEPTABLE
