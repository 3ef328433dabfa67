"""Command-line interface for Nittei.

Responsibilities:
- Expose user-facing commands for formatting schedule text.
- Convert CLI arguments, YAML config and environment into one `AppConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .app import NO_CONTENT_MESSAGE, ScheduleFormatterApp
from .cli_rendering import (
    echo_banner,
    echo_formatted_text,
    echo_notice,
    exit_with_command_error,
)
from .config import AppConfig, ConfigLoader
from .errors import FormatterStageError
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="nittei",
    no_args_is_help=True,
    help="Nittei CLI: normalize loosely written dates and time ranges.",
)

_STDIN_MARKER = "-"


def _load_yaml_config(config_path: Path | None) -> AppConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise FormatterStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise FormatterStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise FormatterStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _load_env_config() -> AppConfig:
    """Load environment config and map invalid values to stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise FormatterStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Set `NITTEI_BASE_YEAR` to a 4-digit year or unset it.",
        ) from exc


def _resolve_app_config(config_file: Path | None, year: int | None) -> AppConfig:
    """Resolve effective config: `--year` > YAML `base_year` > env > today."""

    loaded_config = _load_yaml_config(config_file)
    env_config = _load_env_config()
    base_config = loaded_config if loaded_config is not None else AppConfig()

    if year is not None:
        resolved_year: int | None = year
    elif base_config.base_year is not None:
        resolved_year = base_config.base_year
    else:
        resolved_year = env_config.base_year

    return AppConfig(
        base_year=resolved_year,
        formatter=base_config.formatter,
    )


def _build_app(config: AppConfig, run_logger: RunLogger | None = None) -> ScheduleFormatterApp:
    """Construct the facade and apply the resolved base year."""

    formatter_app = ScheduleFormatterApp(config.formatter, run_logger=run_logger)
    if config.base_year is not None:
        formatter_app.update_current_year(config.base_year)
    return formatter_app


def _read_input(input_path: Path | None) -> str:
    """Read UTF-8 input text from a file, or from stdin for `None`/`-`."""

    if input_path is None or str(input_path) == _STDIN_MARKER:
        return typer.get_text_stream("stdin").read()

    try:
        return input_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FormatterStageError(
            stage="input",
            detail=f"Input file not found: `{input_path}`.",
            hint="Pass an existing text file or pipe text via stdin.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise FormatterStageError(
            stage="input",
            detail=f"Input file `{input_path}` is not valid UTF-8.",
            hint="Re-save the file with UTF-8 encoding.",
        ) from exc
    except OSError as exc:
        raise FormatterStageError(
            stage="input",
            detail=f"Failed to read input file `{input_path}`: {exc}",
        ) from exc


def _write_output(output_path: Path, text: str) -> None:
    """Write formatted text to `output_path` as UTF-8."""

    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FormatterStageError(
            stage="output",
            detail=f"Failed to write output file `{output_path}`: {exc}",
            hint="Verify the target directory exists and is writable.",
        ) from exc


@app.command("format")
def format_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Text file to format. Reads stdin when omitted or `-`.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write formatted text to this file instead of stdout."),
    ] = None,
    year: Annotated[
        int | None,
        typer.Option("--year", help="Year used for dates written without a year."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with formatter settings."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Emit phase logs with substitution counts on stderr."),
    ] = False,
) -> None:
    """Reformat dates and time ranges in schedule text."""

    run_logger = RunLogger() if verbose else None
    try:
        config = _resolve_app_config(config_file, year)
        formatter_app = _build_app(config, run_logger=run_logger)
        formatted = formatter_app.process(_read_input(input_path))
        if out is not None:
            _write_output(out, formatted)
    except Exception as exc:
        if run_logger is not None:
            stage = exc.stage if isinstance(exc, FormatterStageError) else "format"
            run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("format", exc)

    if not formatted.strip():
        echo_notice(NO_CONTENT_MESSAGE)
        return
    if out is None:
        echo_formatted_text(formatted)
    else:
        typer.echo(f"Formatted text: {out}")


@app.command("today")
def today_command(
    year: Annotated[
        int | None,
        typer.Option("--year", help="Year used for dates written without a year."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with formatter settings."),
    ] = None,
) -> None:
    """Show today's date and the year applied to year-omitted dates."""

    try:
        formatter_app = _build_app(_resolve_app_config(config_file, year))
    except Exception as exc:
        exit_with_command_error("today", exc)

    echo_banner(formatter_app.today_banner())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
