"""Time validation and canonical time-range rendering."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, FormatterConfig
from .models import Formatted, SubstitutionOutcome, TimeComponents, Unchanged
from .parsing import parse_int_token


class TimeFormatter:
    """Validate `HHMM` and `HH:MM` tokens and render `start〜end` ranges."""

    def __init__(self, config: FormatterConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def parse_time(self, raw4: str) -> TimeComponents | None:
        """Split a 4-character token into hour and minute, or `None` if not numeric."""

        if not isinstance(raw4, str) or len(raw4) != 4:
            return None
        hour = parse_int_token(raw4[:2])
        minute = parse_int_token(raw4[2:])
        if hour is None or minute is None:
            return None
        return TimeComponents(hour=hour, minute=minute)

    def parse_colon_time(self, raw: str) -> TimeComponents | None:
        """Split an `H:M` token into hour and minute, or `None` if malformed."""

        if not isinstance(raw, str):
            return None
        parts = raw.split(":")
        if len(parts) != 2:
            return None
        hour = parse_int_token(parts[0])
        minute = parse_int_token(parts[1])
        if hour is None or minute is None:
            return None
        return TimeComponents(hour=hour, minute=minute)

    def in_bounds(self, components: TimeComponents) -> bool:
        """Return whether hour and minute both lie within the configured bounds."""

        return self.config.hour_in_range(components.hour) and self.config.minute_in_range(
            components.minute
        )

    def is_valid_time(self, raw4: str) -> bool:
        """Return whether a 4-digit `HHMM` token is an in-range time."""

        components = self.parse_time(raw4)
        return components is not None and self.in_bounds(components)

    def is_valid_colon_time(self, raw: str) -> bool:
        """Return whether an `HH:MM` token is an in-range time."""

        components = self.parse_colon_time(raw)
        return components is not None and self.in_bounds(components)

    @staticmethod
    def format_time(raw4: str) -> str:
        """Reformat `HHMM` as `HH:MM` without validating it."""

        return f"{raw4[:2]}:{raw4[2:4]}"

    def format_time_range(self, start: str, end: str) -> str:
        """Join two formatted times with the range separator."""

        return f"{start}{self.config.range_separator}{end}"

    def format_time_range_if_valid(self, raw_start4: str, raw_end4: str) -> str | None:
        """Return the canonical range when both `HHMM` sides validate, else `None`."""

        if self.is_valid_time(raw_start4) and self.is_valid_time(raw_end4):
            return self.format_time_range(
                self.format_time(raw_start4),
                self.format_time(raw_end4),
            )
        return None

    def resolve_range(self, raw_start4: str, raw_end4: str) -> SubstitutionOutcome:
        """Tagged-outcome form of `format_time_range_if_valid`."""

        formatted = self.format_time_range_if_valid(raw_start4, raw_end4)
        return Unchanged() if formatted is None else Formatted(formatted)

    def resolve_colon_range(self, start: str, end: str) -> SubstitutionOutcome:
        """Join two colon times verbatim when both validate, else `Unchanged`."""

        if self.is_valid_colon_time(start) and self.is_valid_colon_time(end):
            return Formatted(self.format_time_range(start, end))
        return Unchanged()
