"""Single-line date/time formatting.

Responsibilities:
- Apply every entry of the pattern table to one line, in table order.
- Resolve each match to a tagged outcome and substitute only `Formatted` ones.
- Keep every matched span away from later shapes, valid or not.
- Own the current-year context used for year-omitted dates.
"""

from __future__ import annotations

import re
from typing import Callable, Mapping

from ..config import DEFAULT_CONFIG, FormatterConfig
from ..dates import DateFormatter
from ..models import (
    DateComponents,
    Formatted,
    LineReport,
    PatternDefinition,
    SubstitutionOutcome,
    Unchanged,
)
from ..patterns import (
    FULL_DATE,
    MONTH_DAY,
    PATTERN_TABLE,
    SINGLE_YEAR,
    TIME_RANGE_4DIGIT,
    TIME_RANGE_COLON,
)
from ..times import TimeFormatter

Resolver = Callable[[Mapping[str, str], re.Match[str]], SubstitutionOutcome]
Span = tuple[int, int]


class LineFormatter:
    """Format dates and time ranges embedded in one line of text.

    Each instance carries its own current year, so independent instances never
    share year-omitted date resolution.
    """

    def __init__(
        self,
        config: FormatterConfig = DEFAULT_CONFIG,
        current_year: int | None = None,
        patterns: tuple[PatternDefinition, ...] = PATTERN_TABLE,
    ) -> None:
        """Initialize with today's year clamped to the year bound, then apply `current_year`."""

        self.config = config
        self.patterns = patterns
        self.dates = DateFormatter(config)
        self.times = TimeFormatter(config)
        self._current_year = config.clamp_year(self.dates.today_info().year)
        if current_year is not None:
            self.update_current_year(current_year)
        self._resolvers: dict[str, Resolver] = {
            FULL_DATE: self._resolve_full_date,
            MONTH_DAY: self._resolve_month_day,
            TIME_RANGE_4DIGIT: self._resolve_time_range,
            TIME_RANGE_COLON: self._resolve_colon_time_range,
            SINGLE_YEAR: self._resolve_single_year,
        }

    @property
    def current_year(self) -> int:
        """Year used to validate and render year-omitted dates."""

        return self._current_year

    def update_current_year(self, year: int) -> None:
        """Replace the current year when `year` is an integer inside the year bound.

        Invalid values are ignored and the previous year stays in effect.
        """

        if isinstance(year, bool) or not isinstance(year, int):
            return
        if self.config.year_in_range(year):
            self._current_year = year

    def format_line(self, line: str) -> str:
        """Return `line` trimmed, with every recognized token reformatted."""

        return self.format_line_with_report(line).text

    def format_line_with_report(self, line: str) -> LineReport:
        """Format one line and count substituted tokens per shape."""

        if not isinstance(line, str) or not line:
            return LineReport(text="")

        text = line.strip()
        consumed: list[Span] = []
        substitutions: dict[str, int] = {}
        for definition in self.patterns:
            text, consumed, count = self._apply_pass(definition, text, consumed)
            if count:
                substitutions[definition.shape] = count
        return LineReport(text=text, substitutions=substitutions)

    def _apply_pass(
        self,
        definition: PatternDefinition,
        text: str,
        consumed: list[Span],
    ) -> tuple[str, list[Span], int]:
        """Resolve every match of one shape outside already consumed spans.

        Every resolved match, `Formatted` or `Unchanged`, becomes a consumed span
        so later shapes never reinterpret it. Returns the new text, the consumed
        spans shifted to the new text, and the number of substitutions.
        """

        resolver = self._resolvers[definition.shape]
        pieces: list[str] = []
        edits: list[tuple[int, int]] = []
        new_spans: list[Span] = []
        cursor = 0
        shift = 0
        count = 0

        for match in definition.matcher.finditer(text):
            start, end = match.span()
            if _overlaps(start, end, consumed):
                continue
            outcome = resolver(definition.captures(match), match)
            if isinstance(outcome, Formatted):
                replacement = outcome.text
                count += 1
            else:
                replacement = match.group(0)
            pieces.append(text[cursor:start])
            pieces.append(replacement)
            new_spans.append((start + shift, start + shift + len(replacement)))
            delta = len(replacement) - (end - start)
            edits.append((start, delta))
            shift += delta
            cursor = end

        pieces.append(text[cursor:])
        return "".join(pieces), sorted(_shift_spans(consumed, edits) + new_spans), count

    def _resolve_full_date(
        self, captures: Mapping[str, str], match: re.Match[str]
    ) -> SubstitutionOutcome:
        return self.dates.resolve_full_date(
            DateComponents(
                year=int(captures["year"]),
                month=int(captures["month"]),
                day=int(captures["day"]),
            )
        )

    def _resolve_month_day(
        self, captures: Mapping[str, str], match: re.Match[str]
    ) -> SubstitutionOutcome:
        return self.dates.resolve_month_day(
            DateComponents(
                year=self._current_year,
                month=int(captures["month"]),
                day=int(captures["day"]),
            )
        )

    def _resolve_time_range(
        self, captures: Mapping[str, str], match: re.Match[str]
    ) -> SubstitutionOutcome:
        return self.times.resolve_range(captures["start"], captures["end"])

    def _resolve_colon_time_range(
        self, captures: Mapping[str, str], match: re.Match[str]
    ) -> SubstitutionOutcome:
        return self.times.resolve_colon_range(captures["start"], captures["end"])

    def _resolve_single_year(
        self, captures: Mapping[str, str], match: re.Match[str]
    ) -> SubstitutionOutcome:
        year = int(captures["year"])
        if not self.config.year_in_range(year):
            return Unchanged()

        # Only the directly adjacent character is checked; `2024 年` is still annotated.
        suffix = self.config.year_suffix
        before = match.string[: match.start()]
        after = match.string[match.end():]
        if before.endswith(suffix) or after.startswith(suffix):
            return Unchanged()
        return Formatted(f"{year}{suffix}")


def _overlaps(start: int, end: int, spans: list[Span]) -> bool:
    return any(start < span_end and span_start < end for span_start, span_end in spans)


def _shift_spans(spans: list[Span], edits: list[tuple[int, int]]) -> list[Span]:
    """Move spans by the length deltas of edits that occurred before them."""

    shifted: list[Span] = []
    for span_start, span_end in spans:
        offset = sum(delta for edit_start, delta in edits if edit_start < span_start)
        shifted.append((span_start + offset, span_end + offset))
    return shifted
