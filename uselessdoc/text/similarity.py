"""Edit-distance similarity scoring for normalized text.

Responsibilities:
- Compute unit-cost Levenshtein distance between two normalized strings.
- Expose a 0..1 similarity ratio and a compact human-readable explanation.
"""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True, slots=True)
class Similarity:
    """Immutable edit-distance comparison of two normalized strings.

    Attributes:
        left: First normalized operand.
        right: Second normalized operand.
        distance: Minimum number of single-character edits between operands.
    """

    left: str
    right: str
    distance: int

    @property
    def longest(self) -> int:
        """Return the length of the longer operand."""

        return max(len(self.left), len(self.right))

    @property
    def matched(self) -> int:
        """Return how many characters of the longer operand survive the edits."""

        return self.longest - self.distance

    @property
    def ratio(self) -> float:
        """Return the similarity ratio, `1.0` for two empty operands."""

        longest = self.longest
        if longest == 0:
            return 1.0
        return self.matched / longest

    def explain(self) -> str:
        """Render both operands with the matched/longest character counts."""

        return f'"{self.left}"-"{self.right}": {self.matched}/{self.longest}'

    def __str__(self) -> str:
        return self.explain()


def compare(left: str, right: str) -> Similarity:
    """Score two already-normalized strings."""

    return Similarity(left=left, right=right, distance=Levenshtein.distance(left, right))
