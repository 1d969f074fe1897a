"""Text normalization stage.

Responsibilities:
- Canonicalize identifiers and docstring prose into a comparable form.
- Keep normalization deterministic, pure and idempotent.

Key types:
- `NormalizationConfig`: immutable stop-word and token settings.
- `TextNormalizer`: ordered rule chain applied until the text is stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .rules import (
    CollapseSymbols,
    FoldCase,
    NormalizationRule,
    RemoveShortTokens,
    RemoveStopWords,
    SplitCamelCase,
    StripWhitespace,
)


DEFAULT_STOP_WORDS: tuple[str, ...] = tuple(
    sorted(
        (
            "skapa",
            "spara",
            "skall",
            "till",
            "värde",
            "read",
            "create",
            "find",
            "fetch",
            "init",
            "should",
            "instance",
            "return",
            "value",
            "list",
            "array",
            "property",
            "properties",
            "python",
        )
    )
)
DEFAULT_SHORT_TOKEN_LENGTH = 3


def _canonical_stop_words(words: Iterable[str]) -> tuple[str, ...]:
    """Lower-case, strip and de-duplicate stop words, keeping first-seen order."""

    canonical: list[str] = []
    for word in words:
        token = word.strip().lower()
        if token and token not in canonical:
            canonical.append(token)
    return tuple(canonical)


@dataclass(frozen=True, slots=True)
class NormalizationConfig:
    """Immutable normalization settings for one check session.

    Attributes:
        stop_words: Ordered stop words, stored lower-cased and de-duplicated.
        short_token_length: Longest non-initialism word length that is dropped.
        allow_inflection: Whether a stop word also removes itself plus one letter.
        symbol_replacement: Replacement for each punctuation/whitespace run,
            either a single space (default) or an empty string.
    """

    stop_words: tuple[str, ...] = DEFAULT_STOP_WORDS
    short_token_length: int = DEFAULT_SHORT_TOKEN_LENGTH
    allow_inflection: bool = True
    symbol_replacement: str = " "

    def __post_init__(self) -> None:
        """Canonicalize stop words and validate numeric settings."""

        object.__setattr__(self, "stop_words", _canonical_stop_words(self.stop_words))
        if self.short_token_length < 1:
            raise ValueError("`short_token_length` must be a positive integer.")
        if self.symbol_replacement.strip():
            raise ValueError("`symbol_replacement` must be a single space or empty.")

    def build_rules(self) -> list[NormalizationRule]:
        """Return the ordered rule chain described by this configuration."""

        return [
            SplitCamelCase(),
            RemoveShortTokens(self.short_token_length),
            FoldCase(),
            RemoveStopWords(self.stop_words, self.allow_inflection),
            CollapseSymbols(self.symbol_replacement),
            StripWhitespace(),
        ]


class TextNormalizer:
    """Normalize raw text into its canonical comparison form.

    The rule order matters: camelCase splitting creates the word boundaries
    used by short-token and stop-word removal, and case folding precedes
    stop-word matching. The chain is repeated until its output no longer
    changes, so `normalize(normalize(text)) == normalize(text)`.
    """

    def __init__(
        self,
        config: NormalizationConfig | None = None,
        rules: list[NormalizationRule] | None = None,
    ) -> None:
        """Initialize with custom rules or the rule chain built from `config`."""

        self.config = config or NormalizationConfig()
        self.rules = rules or self.config.build_rules()

    def normalize_once(self, text: str) -> str:
        """Apply every rule once, in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current

    def normalize(self, text: str) -> str:
        """Normalize text to its stable canonical form."""

        current = self.normalize_once(text)
        while True:
            following = self.normalize_once(current)
            if following == current:
                return current
            current = following

    def is_empty(self, text: str) -> bool:
        """Return whether text carries no information after normalization."""

        return not self.normalize(text)


def normalize(text: str, stop_words: Iterable[str] = DEFAULT_STOP_WORDS) -> str:
    """Normalize text with default settings and the given stop words."""

    return TextNormalizer(NormalizationConfig(stop_words=tuple(stop_words))).normalize(text)
