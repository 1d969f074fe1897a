"""Unit tests for normalization rules and the text normalizer."""

from __future__ import annotations

import pytest

from uselessdoc.text.normalizer import NormalizationConfig, TextNormalizer, normalize
from uselessdoc.text.rules import RemoveShortTokens, RemoveStopWords, un_camel_case


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("setProperty", "set Property"),
        ("URLEncoder", "URL Encoder"),
        ("getXMLProdukt", "get XML Produkt"),
        ("get_name", "get_name"),
        ("already split", "already split"),
        ("", ""),
    ],
)
def test_un_camel_case_inserts_word_boundaries(identifier: str, expected: str) -> None:
    """Boundaries should appear before camelCase words and after acronyms only."""

    assert un_camel_case(identifier) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("setPostnummer", "postnummer"),
        ("returns property postnummer", "postnummer"),
        (" returns XMLProdukt ", "produkt"),
    ],
)
def test_normalize_reproduces_reference_examples(
    text: str, expected: str, example_stop_words: tuple[str, ...]
) -> None:
    """End-to-end normalization should strip prefixes, stop words and initialisms."""

    assert normalize(text, example_stop_words) == expected


def test_normalize_once_keeps_initialism_until_next_pass() -> None:
    """A single pass lower-cases an initialism; the stable form drops it."""

    normalizer = TextNormalizer(NormalizationConfig(stop_words=("returns",)))

    assert normalizer.normalize_once(" returns XMLProdukt ") == "xml produkt"
    assert normalizer.normalize(" returns XMLProdukt ") == "produkt"


@pytest.mark.parametrize(
    "text",
    [
        "setPostnummer",
        " returns XMLProdukt ",
        "getXMLHttpRequest",
        "Returns the ID of the URLEncoder",
        "värdeLista för kunden",
        "propertiesList",
        "a_b_c",
        "",
    ],
)
def test_normalize_is_idempotent(text: str, example_stop_words: tuple[str, ...]) -> None:
    """Normalizing already-normalized text should change nothing."""

    once = normalize(text, example_stop_words)

    assert normalize(once, example_stop_words) == once


@pytest.mark.parametrize("text", ["", "   ", "...,;", "a an the of", "returns property"])
def test_normalize_yields_empty_for_noise(text: str, example_stop_words: tuple[str, ...]) -> None:
    """Input made of symbols, short tokens and stop words should normalize to empty."""

    assert normalize(text, example_stop_words) == ""


def test_snake_case_and_camel_case_identifiers_normalize_alike() -> None:
    """Underscores should separate tokens the same way camelCase boundaries do."""

    assert normalize("get_name", ()) == "name"
    assert normalize("getName", ()) == "name"


def test_stop_word_inflection_is_configurable() -> None:
    """Inflection should let `return` remove `returns` only when enabled."""

    lenient = TextNormalizer(NormalizationConfig(stop_words=("return",)))
    strict = TextNormalizer(NormalizationConfig(stop_words=("return",), allow_inflection=False))

    assert lenient.normalize("returns name") == "name"
    assert strict.normalize("returns name") == "returns name"


def test_stop_words_only_match_whole_words() -> None:
    """Stop words should not be removed from inside longer words."""

    assert normalize("listing of values", ("list",)) == "listing values"


def test_symbol_replacement_can_join_tokens() -> None:
    """An empty symbol replacement should concatenate the remaining tokens."""

    normalizer = TextNormalizer(NormalizationConfig(stop_words=(), symbol_replacement=""))

    assert normalizer.normalize("postal-code") == "postalcode"


def test_normalization_config_canonicalizes_stop_words() -> None:
    """Stop words should be stored stripped, lower-cased and de-duplicated in order."""

    config = NormalizationConfig(stop_words=(" Returns ", "returns", "Value", ""))

    assert config.stop_words == ("returns", "value")


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"short_token_length": 0}, "short_token_length"),
        ({"symbol_replacement": "-"}, "symbol_replacement"),
    ],
)
def test_normalization_config_rejects_invalid_settings(kwargs: dict[str, object], message: str) -> None:
    """Invalid numeric or replacement settings should fail at construction."""

    with pytest.raises(ValueError, match=message):
        NormalizationConfig(**kwargs)


def test_remove_short_tokens_keeps_initialisms() -> None:
    """Short lower-case words should disappear while all-uppercase runs survive."""

    rule = RemoveShortTokens(3)

    assert rule.apply("an ID of XML is ok").split() == ["ID", "XML"]
    assert rule.apply("Fetch the item").split() == ["Fetch", "item"]


def test_remove_stop_words_prefers_longest_alternative() -> None:
    """Overlapping stop words should be matched longest first."""

    rule = RemoveStopWords(("property", "properties"), allow_inflection=False)

    assert rule.apply("properties and property").split() == ["and"]
