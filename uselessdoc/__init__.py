"""Top-level package for uselessdoc.

This package flags docstrings that only restate the documented entity's name
or type. The engine is `TextNormalizer` plus `compare`; `CheckRunner` applies
it to Python source trees.
"""

from .analysis.policy import SimilarityPolicy
from .config import CheckConfig
from .runner import CheckRunner
from .text.normalizer import NormalizationConfig, TextNormalizer, normalize
from .text.similarity import Similarity, compare

__all__ = [
    "CheckConfig",
    "CheckRunner",
    "NormalizationConfig",
    "Similarity",
    "SimilarityPolicy",
    "TextNormalizer",
    "compare",
    "normalize",
    "__version__",
]

__version__ = "0.1.0"
