"""Shared parsing helpers for CLI, YAML and environment configuration values."""

from __future__ import annotations

from typing import Iterable


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Args:
        value: Text value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_ratio(value: object, field_name: str) -> float:
    """Parse a float in the closed range [0, 1].

    Raises:
        ValueError: If the value is not numeric or falls outside [0, 1].
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a number between 0 and 1.")
    normalized = normalize_optional_string(value)
    if normalized is None:
        raise ValueError(f"`{field_name}` must be a number between 0 and 1.")
    try:
        parsed = float(normalized)
    except ValueError as exc:
        raise ValueError(f"`{field_name}` must be a number between 0 and 1.") from exc
    if not 0.0 <= parsed <= 1.0:
        raise ValueError(f"`{field_name}` must be a number between 0 and 1.")
    return parsed


def parse_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer from an int or numeric string."""

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive integer.")
    normalized = normalize_optional_string(value)
    if normalized is None:
        raise ValueError(f"`{field_name}` must be a positive integer.")
    try:
        parsed = int(normalized)
    except ValueError as exc:
        raise ValueError(f"`{field_name}` must be a positive integer.") from exc
    if parsed <= 0:
        raise ValueError(f"`{field_name}` must be a positive integer.")
    return parsed


def parse_word_list(value: object) -> tuple[str, ...]:
    """Parse stop words from a comma-separated string or an iterable of strings.

    Blank entries are dropped and duplicates are removed while keeping the
    first occurrence, so the result is an ordered set.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        raw_items: Iterable[object] = value.split(",")
    elif isinstance(value, (list, tuple)):
        raw_items = value
    else:
        raise ValueError("Stop words must be a comma-separated string or a list of strings.")

    words: list[str] = []
    for item in raw_items:
        normalized = normalize_optional_string(item)
        if normalized is not None and normalized not in words:
            words.append(normalized)
    return tuple(words)
