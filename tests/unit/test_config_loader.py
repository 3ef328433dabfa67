"""Unit tests for formatter configuration and YAML/environment loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from nittei.config import DEFAULT_CONFIG, ConfigLoader, FormatterConfig


def test_default_config_bounds_are_exact() -> None:
    """Default bounds and weekday names match the documented values."""

    assert (DEFAULT_CONFIG.year_min, DEFAULT_CONFIG.year_max) == (1900, 2100)
    assert (DEFAULT_CONFIG.hour_min, DEFAULT_CONFIG.hour_max) == (0, 23)
    assert (DEFAULT_CONFIG.minute_min, DEFAULT_CONFIG.minute_max) == (0, 59)
    assert DEFAULT_CONFIG.weekdays == ("日", "月", "火", "水", "木", "金", "土")
    DEFAULT_CONFIG.validate()


def test_formatter_config_validate_rejects_inverted_bounds_and_bad_weekdays() -> None:
    """Validation should fail clearly on unusable bounds or glyph tables."""

    with pytest.raises(ValueError, match="`year_min` must not exceed `year_max`"):
        FormatterConfig(year_min=2100, year_max=1900).validate()

    with pytest.raises(ValueError, match="exactly 7 non-empty names"):
        FormatterConfig(weekdays=("日", "月")).validate()

    with pytest.raises(ValueError, match="`range_separator`"):
        FormatterConfig(range_separator=" ").validate()


def test_config_loader_from_yaml_loads_and_normalizes_values(tmp_path: Path) -> None:
    """YAML loader should accept integers given as numeric strings."""

    config_path = tmp_path / "nittei.yml"
    config_path.write_text(
        """
base_year: " 2025 "
year_min: 2000
year_max: "2050"
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.base_year == 2025
    assert config.formatter.year_min == 2000
    assert config.formatter.year_max == 2050
    assert config.formatter.hour_max == 23


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    """An empty YAML file yields defaults."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config.base_year is None
    assert config.formatter == DEFAULT_CONFIG


def test_config_loader_from_yaml_rejects_unknown_keys_and_bad_values(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unknown keys and invalid typed values."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("base_year: 2024\ntimezone: UTC\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): timezone"):
        ConfigLoader.from_yaml(unknown_path)

    invalid_int_path = tmp_path / "invalid-int.yml"
    invalid_int_path.write_text("base_year: soon\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`base_year` must be an integer"):
        ConfigLoader.from_yaml(invalid_int_path)

    weekdays_path = tmp_path / "weekdays.yml"
    weekdays_path.write_text("weekdays: [Sun, Mon]\n", encoding="utf-8")

    with pytest.raises(ValueError, match="exactly 7 non-empty names"):
        ConfigLoader.from_yaml(weekdays_path)


def test_config_loader_from_yaml_requires_mapping_root(tmp_path: Path) -> None:
    """A list at the YAML root is rejected."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- 2024\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_base_year() -> None:
    """Environment loader parses `NITTEI_BASE_YEAR` and treats blanks as unset."""

    assert ConfigLoader.from_env({"NITTEI_BASE_YEAR": " 2026 "}).base_year == 2026
    assert ConfigLoader.from_env({"NITTEI_BASE_YEAR": "  "}).base_year is None
    assert ConfigLoader.from_env({}).base_year is None

    with pytest.raises(ValueError, match="`NITTEI_BASE_YEAR` must be an integer"):
        ConfigLoader.from_env({"NITTEI_BASE_YEAR": "next"})


def test_config_loader_from_yaml_rejects_non_string_weekdays(tmp_path: Path) -> None:
    """A `null` weekday entry must not become the name `None`."""

    config_path = tmp_path / "null-weekday.yml"
    config_path.write_text("weekdays: [日, 月, 火, null, 木, 金, 土]\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`weekdays` entries must be strings"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_rejects_extra_metadata_key(tmp_path: Path) -> None:
    """Only formatter settings and `base_year` are accepted."""

    config_path = tmp_path / "extra.yml"
    config_path.write_text("extra:\n  profile: office\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): extra"):
        ConfigLoader.from_yaml(config_path)


def test_clamp_year_keeps_years_inside_bound() -> None:
    """Years outside the bound move to the nearest end."""

    config = FormatterConfig(year_min=2030, year_max=2040)

    assert config.clamp_year(2024) == 2030
    assert config.clamp_year(2035) == 2035
    assert config.clamp_year(2050) == 2040
