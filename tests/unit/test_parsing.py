"""Unit tests for shared configuration parsing helpers."""

import pytest

from uselessdoc.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_positive_int,
    parse_ratio,
    parse_required_boolean,
    parse_word_list,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("TrUe", True), ("  ON ", True), ("1", True), ("FALSE", False), (" oFf ", False), ("nO", False)],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(token: str, expected: bool) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


def test_parse_required_boolean_rejects_unknown_tokens() -> None:
    """Strict parsing should name the field in its error message."""

    with pytest.raises(ValueError, match="`check_private` must be a boolean value"):
        parse_required_boolean("maybe", "check_private")


@pytest.mark.parametrize(("value", "expected"), [("0.75", 0.75), (1, 1.0), (" 0 ", 0.0)])
def test_parse_ratio_accepts_unit_interval(value: object, expected: float) -> None:
    """Ratios should parse from numbers and numeric strings within [0, 1]."""

    assert parse_ratio(value, "similarity_threshold") == expected


@pytest.mark.parametrize("value", ["1.5", "-0.2", "high", "", True])
def test_parse_ratio_rejects_invalid_values(value: object) -> None:
    """Non-numeric, out-of-range and boolean ratios should fail."""

    with pytest.raises(ValueError, match="between 0 and 1"):
        parse_ratio(value, "similarity_threshold")


def test_parse_positive_int_validates_sign() -> None:
    """Positive integers should parse while zero and text should fail."""

    assert parse_positive_int(" 4 ", "short_token_length") == 4
    with pytest.raises(ValueError, match="positive integer"):
        parse_positive_int("0", "short_token_length")
    with pytest.raises(ValueError, match="positive integer"):
        parse_positive_int("three", "short_token_length")


def test_parse_word_list_returns_ordered_unique_words() -> None:
    """Comma strings and lists should produce de-duplicated words in first-seen order."""

    assert parse_word_list(" get, set,, get ,value") == ("get", "set", "value")
    assert parse_word_list(["init", " init ", "create"]) == ("init", "create")
    assert parse_word_list(None) == ()


def test_parse_word_list_rejects_other_types() -> None:
    """Mappings and scalars other than strings are not word lists."""

    with pytest.raises(ValueError, match="Stop words"):
        parse_word_list({"get": True})
