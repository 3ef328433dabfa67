"""Ordered table of recognized date/time token shapes.

The table is purely lexical: each entry matches at word boundaries and names
its capture groups by role. Validation lives in `dates` and `times`.

Entries are scanned in table order. Full dates run before month-day dates and
bare years so that later passes only see text earlier passes left alone.
"""

from __future__ import annotations

import re

from .models import PatternDefinition


FULL_DATE = "full_date"
MONTH_DAY = "month_day"
TIME_RANGE_4DIGIT = "time_range_4digit"
TIME_RANGE_COLON = "time_range_colon"
SINGLE_YEAR = "single_year"

# ASCII mode keeps `\b` and `\d` to ASCII so `2024年` still has a boundary after `4`.
_FLAGS = re.ASCII

PATTERN_TABLE: tuple[PatternDefinition, ...] = (
    PatternDefinition(
        shape=FULL_DATE,
        matcher=re.compile(r"\b(\d{4})[-/](\d{1,2})[-/](\d{1,2})\b", _FLAGS),
        roles=("year", "month", "day"),
    ),
    PatternDefinition(
        shape=MONTH_DAY,
        matcher=re.compile(r"\b(0?[1-9]|1[0-2])[/-](0?[1-9]|[12]?\d|3[01])\b", _FLAGS),
        roles=("month", "day"),
    ),
    PatternDefinition(
        shape=TIME_RANGE_4DIGIT,
        matcher=re.compile(r"\b(\d{4})-(\d{4})\b", _FLAGS),
        roles=("start", "end"),
    ),
    PatternDefinition(
        shape=TIME_RANGE_COLON,
        matcher=re.compile(r"(\d{2}:\d{2})-(\d{2}:\d{2})", _FLAGS),
        roles=("start", "end"),
    ),
    PatternDefinition(
        shape=SINGLE_YEAR,
        matcher=re.compile(r"\b(\d{4})\b", _FLAGS),
        roles=("year",),
    ),
)


def pattern_for(shape: str) -> PatternDefinition:
    """Return the table entry for `shape`.

    Lookup helper for tooling and tests; the formatter iterates `PATTERN_TABLE`
    directly.

    Raises:
        KeyError: If `shape` is not a known shape identifier.
    """

    for definition in PATTERN_TABLE:
        if definition.shape == shape:
            return definition
    raise KeyError(shape)
