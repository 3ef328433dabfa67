"""Calendar validation and long-form Japanese date rendering.

Responsibilities:
- Validate (year, month, day) triples against real calendar rules and the
  configured year bound.
- Render validated dates with a computed weekday name.
"""

from __future__ import annotations

from datetime import date

from .config import DEFAULT_CONFIG, FormatterConfig
from .models import DateComponents, Formatted, SubstitutionOutcome, TodayInfo, Unchanged


class DateFormatter:
    """Validate and render full and year-omitted dates."""

    def __init__(self, config: FormatterConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        """Return whether the triple is a real date inside the year bound.

        Leap years follow the proleptic Gregorian calendar, so `(2024, 2, 29)`
        is valid while `(2023, 2, 29)` and `(2024, 2, 30)` are not.
        """

        if not all(_is_plain_int(value) for value in (year, month, day)):
            return False
        if not self.config.year_in_range(year):
            return False
        try:
            date(year, month, day)
        except ValueError:
            return False
        return True

    def weekday_name(self, year: int, month: int, day: int) -> str:
        """Return the weekday name of a valid date, indexing from Sunday."""

        # isoweekday(): Monday=1 .. Sunday=7, so modulo 7 gives Sunday=0.
        return self.config.weekdays[date(year, month, day).isoweekday() % 7]

    def format_date(self, year: int, month: int, day: int) -> str:
        """Render a validated date as `{year}年{month}月{day}日（{weekday}）`."""

        suffix = self.config.year_suffix
        return f"{year}{suffix}{month}月{day}日（{self.weekday_name(year, month, day)}）"

    def format_month_day(self, month: int, day: int, year: int) -> str:
        """Render `{month}月{day}日（{weekday}）`, computing the weekday in `year`."""

        return f"{month}月{day}日（{self.weekday_name(year, month, day)}）"

    def resolve_full_date(self, components: DateComponents) -> SubstitutionOutcome:
        """Return the long rendering of a full date, or `Unchanged` when invalid."""

        if not self.is_valid_date(components.year, components.month, components.day):
            return Unchanged()
        return Formatted(self.format_date(components.year, components.month, components.day))

    def resolve_month_day(self, components: DateComponents) -> SubstitutionOutcome:
        """Return the year-omitted rendering, validated against `components.year`."""

        if not self.is_valid_date(components.year, components.month, components.day):
            return Unchanged()
        return Formatted(
            self.format_month_day(components.month, components.day, components.year)
        )

    def today_info(self) -> TodayInfo:
        """Return calendar fields and the long rendering for today's date."""

        today = self._today()
        return TodayInfo(
            year=today.year,
            month=today.month,
            day=today.day,
            weekday_name=self.weekday_name(today.year, today.month, today.day),
            formatted=self.format_date(today.year, today.month, today.day),
        )

    @staticmethod
    def _today() -> date:
        return date.today()


def _is_plain_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
