"""Text normalization and similarity components.

This package provides the deterministic normalization rules, the rule-chain
normalizer and the edit-distance scorer used by every docstring check.
"""

from .normalizer import (
    DEFAULT_STOP_WORDS,
    NormalizationConfig,
    TextNormalizer,
    normalize,
)
from .rules import (
    CollapseSymbols,
    FoldCase,
    RemoveShortTokens,
    RemoveStopWords,
    SplitCamelCase,
    StripWhitespace,
    un_camel_case,
)
from .similarity import Similarity, compare

__all__ = [
    "DEFAULT_STOP_WORDS",
    "NormalizationConfig",
    "TextNormalizer",
    "normalize",
    "Similarity",
    "compare",
    "un_camel_case",
    "SplitCamelCase",
    "RemoveShortTokens",
    "FoldCase",
    "RemoveStopWords",
    "CollapseSymbols",
    "StripWhitespace",
]
