"""Deterministic normalization rules.

Responsibilities:
- Provide composable rules that turn identifiers and prose into comparable tokens.
- Keep every rule pure so one instance can be shared across concurrent checks.

Word boundaries are letter/digit boundaries: underscores and punctuation both
separate tokens, so `get_name` and `getName` tokenize alike.
"""

from __future__ import annotations

import re
from typing import Iterable, Protocol


_WORD_RE = re.compile(r"[^\W_]+")
_SYMBOL_RUN_RE = re.compile(r"[\W_]+")
_LETTER = r"[^\W\d_]"
_NOT_AFTER_WORD = r"(?<![^\W_])"
_NOT_BEFORE_WORD = r"(?![^\W_])"


class NormalizationRule(Protocol):
    """Protocol for text normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


def un_camel_case(text: str) -> str:
    """Insert spaces at camelCase word boundaries.

    A boundary sits before an upper-case letter that follows a lower-case
    letter, and before an upper-case letter that follows any letter and is
    itself followed by a lower-case letter. Acronyms stay whole:
    `getXMLProdukt` becomes `get XML Produkt`.
    """

    pieces: list[str] = []
    for index, character in enumerate(text):
        if index and _starts_camel_word(text, index):
            pieces.append(" ")
        pieces.append(character)
    return "".join(pieces)


def _starts_camel_word(text: str, index: int) -> bool:
    """Return whether a camelCase word starts at `index`."""

    current = text[index]
    if not current.isupper():
        return False
    previous = text[index - 1]
    if previous.islower():
        return True
    following = text[index + 1] if index + 1 < len(text) else ""
    return previous.isalpha() and following.islower()


class SplitCamelCase:
    """Separate camelCase words with spaces."""

    def apply(self, text: str) -> str:
        """Apply word-boundary insertion."""

        return un_camel_case(text)


class RemoveShortTokens:
    """Drop short words that are not initialisms.

    A word is dropped when it is one letter followed by fewer than
    `max_length` lower-case letters. All-uppercase runs such as `XML` or `ID`
    survive regardless of length.
    """

    def __init__(self, max_length: int = 3) -> None:
        """Initialize with the longest word length that still counts as short."""

        if max_length < 1:
            raise ValueError("`max_length` must be a positive integer.")
        self.max_length = max_length

    def apply(self, text: str) -> str:
        """Remove short non-initialism words."""

        return _WORD_RE.sub(self._replace, text)

    def _replace(self, match: re.Match[str]) -> str:
        token = match.group(0)
        return "" if self._is_short_word(token) else token

    def _is_short_word(self, token: str) -> bool:
        head, tail = token[0], token[1:]
        if not head.isalpha() or len(tail) >= self.max_length:
            return False
        return all(character.isalpha() and character.islower() for character in tail)


class FoldCase:
    """Lower-case the whole text."""

    def apply(self, text: str) -> str:
        """Apply case folding."""

        return text.lower()


class RemoveStopWords:
    """Remove whole-word occurrences of configured stop words.

    With `allow_inflection` a stop word also matches when followed by one more
    letter, so `return` removes `returns` and `propert` removes `property`.
    Stop words are expected in lower case; the rule runs after `FoldCase`.
    """

    def __init__(self, stop_words: Iterable[str], allow_inflection: bool = True) -> None:
        """Compile one alternation pattern for all stop words."""

        words = sorted({word for word in stop_words if word}, key=lambda word: (-len(word), word))
        self.stop_words = tuple(words)
        self.allow_inflection = allow_inflection
        self._pattern: re.Pattern[str] | None = None
        if words:
            alternation = "|".join(re.escape(word) for word in words)
            suffix = f"{_LETTER}?" if allow_inflection else ""
            self._pattern = re.compile(
                f"{_NOT_AFTER_WORD}(?:{alternation}){suffix}{_NOT_BEFORE_WORD}"
            )

    def apply(self, text: str) -> str:
        """Remove stop words from text."""

        if self._pattern is None:
            return text
        return self._pattern.sub("", text)


class CollapseSymbols:
    """Replace each run of non-letter, non-digit characters."""

    def __init__(self, replacement: str = " ") -> None:
        """Initialize with the replacement for every symbol run."""

        self.replacement = replacement

    def apply(self, text: str) -> str:
        """Collapse punctuation, underscores and whitespace runs."""

        return _SYMBOL_RUN_RE.sub(self.replacement, text)


class StripWhitespace:
    """Trim leading and trailing whitespace."""

    def apply(self, text: str) -> str:
        """Apply trimming."""

        return text.strip()
