"""Core datatypes shared across Nittei modules.

Responsibilities:
- Represent transient components parsed out of a single token match.
- Model per-match substitution results as tagged outcomes.

Key types:
- `DateComponents`, `TimeComponents`, `TodayInfo`, `PatternDefinition`,
  `Formatted`, `Unchanged`, `LineReport`, and `TextReport`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Mapping, Union


@dataclass(frozen=True, slots=True)
class DateComponents:
    """A (year, month, day) triple parsed from one match.

    Out-of-range values are representable; validation rejects them.
    """

    year: int
    month: int
    day: int


@dataclass(frozen=True, slots=True)
class TimeComponents:
    """An (hour, minute) pair parsed from one time token."""

    hour: int
    minute: int


@dataclass(frozen=True, slots=True)
class TodayInfo:
    """Calendar fields derived from the current wall-clock date.

    Attributes:
        year: Four-digit year.
        month: 1-based month.
        day: 1-based day of month.
        weekday_name: Localized weekday name.
        formatted: Long localized rendering, e.g. `2024年7月1日（月）`.
    """

    year: int
    month: int
    day: int
    weekday_name: str
    formatted: str


@dataclass(frozen=True, slots=True)
class PatternDefinition:
    """One recognized token shape.

    Attributes:
        shape: Stable shape identifier.
        matcher: Compiled pattern scanned over a whole line.
        roles: Semantic role of each capture group, in group order.
    """

    shape: str
    matcher: re.Pattern[str]
    roles: tuple[str, ...]

    def captures(self, match: re.Match[str]) -> dict[str, str]:
        """Return captured substrings keyed by their semantic role."""

        return dict(zip(self.roles, match.groups()))


@dataclass(frozen=True, slots=True)
class Formatted:
    """A match that validated and renders as `text`."""

    text: str


@dataclass(frozen=True, slots=True)
class Unchanged:
    """A match that failed validation and stays verbatim."""


SubstitutionOutcome = Union[Formatted, Unchanged]


@dataclass(frozen=True, slots=True)
class LineReport:
    """Formatted line plus the number of substitutions applied per shape."""

    text: str
    substitutions: Mapping[str, int] = field(default_factory=dict)

    @property
    def total_substitutions(self) -> int:
        """Return the number of substituted tokens across all shapes."""

        return sum(self.substitutions.values())


@dataclass(frozen=True, slots=True)
class TextReport:
    """Formatted multi-line text plus aggregated substitution counts."""

    text: str
    line_count: int
    substitutions: Mapping[str, int] = field(default_factory=dict)

    @property
    def total_substitutions(self) -> int:
        """Return the number of substituted tokens across all lines and shapes."""

        return sum(self.substitutions.values())
