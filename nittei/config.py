"""Configuration model and loaders for Nittei.

Responsibilities:
- Define the formatting bounds and glyphs as a typed, frozen dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `FormatterConfig`: year/hour/minute bounds, weekday names and glyphs.
- `AppConfig`: CLI-level settings including the optional base year.
- `ConfigLoader`: static construction helpers for `AppConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import parse_optional_int


_DEFAULT_WEEKDAYS = ("日", "月", "火", "水", "木", "金", "土")


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Bounds and glyphs shared by every validator and formatter.

    Attributes:
        year_min: Smallest accepted year (inclusive).
        year_max: Largest accepted year (inclusive).
        hour_min: Smallest accepted hour (inclusive).
        hour_max: Largest accepted hour (inclusive).
        minute_min: Smallest accepted minute (inclusive).
        minute_max: Largest accepted minute (inclusive).
        weekdays: Seven weekday names, Sunday first.
        year_suffix: Glyph appended to annotated years.
        range_separator: Glyph joining start and end of a time range.
    """

    year_min: int = 1900
    year_max: int = 2100
    hour_min: int = 0
    hour_max: int = 23
    minute_min: int = 0
    minute_max: int = 59
    weekdays: tuple[str, ...] = _DEFAULT_WEEKDAYS
    year_suffix: str = "年"
    range_separator: str = "〜"

    def validate(self) -> None:
        """Validate bound ordering and glyph tables."""

        self._require_ordered(self.year_min, self.year_max, "year")
        self._require_ordered(self.hour_min, self.hour_max, "hour")
        self._require_ordered(self.minute_min, self.minute_max, "minute")
        if len(self.weekdays) != 7 or any(not name.strip() for name in self.weekdays):
            raise ValueError("`weekdays` must list exactly 7 non-empty names, Sunday first.")
        if not self.year_suffix.strip():
            raise ValueError("`year_suffix` must be a non-empty glyph.")
        if not self.range_separator.strip():
            raise ValueError("`range_separator` must be a non-empty glyph.")

    def year_in_range(self, year: int) -> bool:
        """Return whether `year` lies within the configured year bound."""

        return self.year_min <= year <= self.year_max

    def clamp_year(self, year: int) -> int:
        """Return `year` moved to the nearest end of the year bound when outside it."""

        return min(max(year, self.year_min), self.year_max)

    def hour_in_range(self, hour: int) -> bool:
        """Return whether `hour` lies within the configured hour bound."""

        return self.hour_min <= hour <= self.hour_max

    def minute_in_range(self, minute: int) -> bool:
        """Return whether `minute` lies within the configured minute bound."""

        return self.minute_min <= minute <= self.minute_max

    @staticmethod
    def _require_ordered(lower: int, upper: int, name: str) -> None:
        if lower > upper:
            raise ValueError(f"`{name}_min` must not exceed `{name}_max`.")


DEFAULT_CONFIG = FormatterConfig()


@dataclass(slots=True)
class AppConfig:
    """CLI-level configuration for one invocation.

    Attributes:
        base_year: Optional year used for year-omitted dates; today's year when `None`.
        formatter: Bounds and glyphs used by the formatting pipeline.
    """

    base_year: int | None = None
    formatter: FormatterConfig = DEFAULT_CONFIG

    def validate(self) -> None:
        """Validate nested formatter configuration."""

        self.formatter.validate()


class ConfigLoader:
    """Factory methods for creating `AppConfig` from external sources."""

    _FORMATTER_INT_KEYS = (
        "year_min",
        "year_max",
        "hour_min",
        "hour_max",
        "minute_min",
        "minute_max",
    )
    _SUPPORTED_YAML_KEYS = frozenset(
        {"base_year", "weekdays", *_FORMATTER_INT_KEYS}
    )

    @staticmethod
    def from_yaml(path: Path) -> AppConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> AppConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        base_year = parse_optional_int(env_map.get("NITTEI_BASE_YEAR"), "NITTEI_BASE_YEAR")
        config = AppConfig(base_year=base_year)
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> AppConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            raise ValueError(
                f"{source_label} contains unsupported key(s): {', '.join(unknown)}."
            )

        base_year = parse_optional_int(payload.get("base_year"), "base_year")
        bounds: dict[str, int] = {}
        for key in ConfigLoader._FORMATTER_INT_KEYS:
            value = parse_optional_int(payload.get(key), key)
            if value is not None:
                bounds[key] = value

        weekdays = ConfigLoader._optional_weekdays(payload.get("weekdays"))
        formatter = FormatterConfig(**bounds, weekdays=weekdays or _DEFAULT_WEEKDAYS)

        config = AppConfig(
            base_year=base_year,
            formatter=formatter,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_weekdays(value: object) -> tuple[str, ...] | None:
        if value is None:
            return None
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ValueError("`weekdays` must be a list of 7 names, Sunday first.")
        if any(not isinstance(name, str) for name in value):
            raise ValueError("`weekdays` entries must be strings.")
        return tuple(name.strip() for name in value)
