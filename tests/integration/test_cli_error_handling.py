"""CLI error-handling tests for concise stage diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from nittei.cli import app


def test_format_command_reports_missing_input_file(tmp_path: Path) -> None:
    """A missing input file fails at the `input` stage with a hint."""

    runner = CliRunner()
    missing = tmp_path / "missing.txt"

    result = runner.invoke(app, ["format", str(missing)])

    assert result.exit_code == 1
    assert "format failed at stage `input`" in result.output
    assert f"Input file not found: `{missing}`." in result.output
    assert "Hint: Pass an existing text file or pipe text via stdin." in result.output


def test_format_command_reports_non_utf8_input(tmp_path: Path) -> None:
    """Undecodable input fails at the `input` stage."""

    input_path = tmp_path / "sjis.txt"
    input_path.write_bytes("7/1 会議".encode("shift_jis"))
    runner = CliRunner()

    result = runner.invoke(app, ["format", str(input_path)])

    assert result.exit_code == 1
    assert "is not valid UTF-8" in result.output


def test_format_command_reports_missing_config_file() -> None:
    """A missing `--config` path fails at the `config` stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["format", "--config", "missing-nittei.yaml"], input="7/1")

    assert result.exit_code == 1
    assert "format failed at stage `config`" in result.output
    assert "Config file not found: `missing-nittei.yaml`." in result.output


def test_format_command_reports_invalid_config_payload(tmp_path: Path) -> None:
    """Unsupported YAML keys fail fast with a config-stage diagnostic."""

    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("locale: en\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["format", "--config", str(config_path)], input="7/1")

    assert result.exit_code == 1
    assert "format failed at stage `config`" in result.output
    assert "unsupported key(s): locale" in result.output


def test_today_command_reports_invalid_environment(monkeypatch: MonkeyPatch) -> None:
    """A non-numeric `NITTEI_BASE_YEAR` fails at the `config` stage."""

    monkeypatch.setenv("NITTEI_BASE_YEAR", "next-year")
    runner = CliRunner()

    result = runner.invoke(app, ["today"])

    assert result.exit_code == 1
    assert "today failed at stage `config`" in result.output
    assert "Hint: Set `NITTEI_BASE_YEAR`" in result.output


def test_format_command_reports_unwritable_output(tmp_path: Path) -> None:
    """Writing into a missing directory fails at the `output` stage."""

    runner = CliRunner()
    out_path = tmp_path / "missing-dir" / "out.txt"

    result = runner.invoke(app, ["format", "--out", str(out_path)], input="7/1")

    assert result.exit_code == 1
    assert "format failed at stage `output`" in result.output


def test_format_command_verbose_logs_stage_failure(tmp_path: Path) -> None:
    """`--verbose` records the failing stage and error type before exiting."""

    runner = CliRunner()

    result = runner.invoke(app, ["format", str(tmp_path / "missing.txt"), "--verbose"])

    assert result.exit_code == 1
    assert (
        "[phase] level=ERROR stage=input event=failure error_type=FormatterStageError"
        in result.output
    )
    assert "format failed at stage `input`" in result.output
