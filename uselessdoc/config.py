"""Configuration model and loaders for uselessdoc.

Responsibilities:
- Define check configuration as a typed, immutable dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Resolve deterministic precedence: CLI > YAML > environment > defaults.

Key types:
- `CheckConfig`: normalized settings for one check session.
- `ConfigLoader`: static construction helpers for `CheckConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .analysis.policy import DEFAULT_SIMILARITY_THRESHOLD, SimilarityPolicy
from .parsing import (
    normalize_optional_string,
    parse_positive_int,
    parse_ratio,
    parse_required_boolean,
    parse_word_list,
)
from .text.normalizer import (
    DEFAULT_SHORT_TOKEN_LENGTH,
    DEFAULT_STOP_WORDS,
    NormalizationConfig,
    TextNormalizer,
)


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Settings for one docstring check session.

    Attributes:
        stop_words: Ordered stop words removed during normalization.
        similarity_threshold: Ratio at or above which text counts as redundant.
        short_token_length: Longest non-initialism word length that is dropped.
        allow_inflection: Whether stop words also match with one trailing letter.
        symbol_replacement: Replacement for punctuation runs (`" "` or `""`).
        check_private: Whether `_private` classes and functions are checked.
    """

    stop_words: tuple[str, ...] = DEFAULT_STOP_WORDS
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    short_token_length: int = DEFAULT_SHORT_TOKEN_LENGTH
    allow_inflection: bool = True
    symbol_replacement: str = " "
    check_private: bool = False

    def validate(self) -> None:
        """Validate configuration values before a check runs."""

        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError("`similarity_threshold` must be a number between 0 and 1.")
        if self.short_token_length <= 0:
            raise ValueError("`short_token_length` must be a positive integer.")
        if self.symbol_replacement not in {" ", ""}:
            raise ValueError("`symbol_replacement` must be a single space or empty.")

    def normalization_config(self) -> NormalizationConfig:
        """Return the normalizer settings carried by this configuration."""

        return NormalizationConfig(
            stop_words=self.stop_words,
            short_token_length=self.short_token_length,
            allow_inflection=self.allow_inflection,
            symbol_replacement=self.symbol_replacement,
        )

    def build_policy(self) -> SimilarityPolicy:
        """Construct the similarity policy for this session."""

        self.validate()
        normalizer = TextNormalizer(self.normalization_config())
        return SimilarityPolicy(normalizer=normalizer, threshold=self.similarity_threshold)

    def with_overrides(
        self,
        *,
        stop_words: tuple[str, ...] | None = None,
        similarity_threshold: float | None = None,
        check_private: bool | None = None,
    ) -> CheckConfig:
        """Return a copy with explicitly provided CLI values applied."""

        overrides: dict[str, Any] = {}
        if stop_words is not None:
            overrides["stop_words"] = stop_words
        if similarity_threshold is not None:
            overrides["similarity_threshold"] = similarity_threshold
        if check_private is not None:
            overrides["check_private"] = check_private
        resolved = replace(self, **overrides)
        resolved.validate()
        return resolved


class ConfigLoader:
    """Factory methods for creating `CheckConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "stop_words",
            "similarity_threshold",
            "short_token_length",
            "allow_inflection",
            "symbol_replacement",
            "check_private",
        }
    )
    _ENV_KEYS = {
        "stop_words": "USELESSDOC_STOP_WORDS",
        "similarity_threshold": "USELESSDOC_SIMILARITY_THRESHOLD",
        "short_token_length": "USELESSDOC_SHORT_TOKEN_LENGTH",
        "allow_inflection": "USELESSDOC_ALLOW_INFLECTION",
        "check_private": "USELESSDOC_CHECK_PRIVATE",
    }

    @staticmethod
    def load(
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CheckConfig:
        """Resolve config from environment defaults overlaid with an optional YAML file."""

        base = ConfigLoader.from_env(env)
        if config_path is None:
            return base
        return ConfigLoader.from_yaml(config_path, base=base)

    @staticmethod
    def from_yaml(path: Path, base: CheckConfig | None = None) -> CheckConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(
            payload,
            base=base or CheckConfig(),
            source_label=f"YAML `{path}`",
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CheckConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key, env_key in ConfigLoader._ENV_KEYS.items():
            value = normalize_optional_string(env_map.get(env_key))
            if value is not None:
                payload[key] = value
        return ConfigLoader._build_config_from_mapping(
            payload,
            base=CheckConfig(),
            source_label="environment",
        )

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse a YAML document into a top-level mapping."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in `{path}`: {exc}") from exc
        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"Config file `{path}` must contain a top-level mapping.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any],
        base: CheckConfig,
        source_label: str,
    ) -> CheckConfig:
        """Overlay validated payload values onto a base config."""

        ConfigLoader._validate_keys(payload, source_label)
        overrides: dict[str, Any] = {}
        if "stop_words" in payload:
            overrides["stop_words"] = parse_word_list(payload["stop_words"])
        if "similarity_threshold" in payload:
            overrides["similarity_threshold"] = parse_ratio(
                payload["similarity_threshold"], "similarity_threshold"
            )
        if "short_token_length" in payload:
            overrides["short_token_length"] = parse_positive_int(
                payload["short_token_length"], "short_token_length"
            )
        if "allow_inflection" in payload:
            overrides["allow_inflection"] = ConfigLoader._boolean(
                payload["allow_inflection"], "allow_inflection"
            )
        if "symbol_replacement" in payload:
            overrides["symbol_replacement"] = ConfigLoader._symbol_replacement(
                payload["symbol_replacement"]
            )
        if "check_private" in payload:
            overrides["check_private"] = ConfigLoader._boolean(
                payload["check_private"], "check_private"
            )

        config = replace(base, **overrides)
        config.validate()
        return config

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys that the config model does not know."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            raise ValueError(f"{source_label} contains unknown key(s): {', '.join(unknown)}.")

    @staticmethod
    def _boolean(value: object, field_name: str) -> bool:
        """Parse YAML booleans and textual boolean tokens."""

        if isinstance(value, bool):
            return value
        return parse_required_boolean(str(value), field_name)

    @staticmethod
    def _symbol_replacement(value: object) -> str:
        """Accept `space`/`empty` aliases besides the literal values."""

        if value is None:
            return ""
        text = str(value)
        aliases = {"space": " ", "empty": "", "none": ""}
        lowered = text.strip().lower()
        if lowered in aliases:
            return aliases[lowered]
        if text in {" ", ""}:
            return text
        raise ValueError("`symbol_replacement` must be `space` or `empty`.")
