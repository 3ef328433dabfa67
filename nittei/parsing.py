"""Shared parsing helpers for numeric tokens and config value normalization."""

from __future__ import annotations

import re


_INTEGER_TOKEN_RE = re.compile(r"[+-]?[0-9]+")


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


def parse_int_token(token: str) -> int | None:
    """Parse an ASCII decimal integer token, returning `None` when it is not one."""

    if not isinstance(token, str) or _INTEGER_TOKEN_RE.fullmatch(token) is None:
        return None
    return int(token)


def parse_optional_int(value: object, field_name: str) -> int | None:
    """Parse an optional integer config value given as an int or a numeric string.

    Raises:
        ValueError: If a non-blank value is not an integer.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be an integer.")
    if isinstance(value, int):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    parsed = parse_int_token(normalized)
    if parsed is None:
        raise ValueError(f"`{field_name}` must be an integer.")
    return parsed
