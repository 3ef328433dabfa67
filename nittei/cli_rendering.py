"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
formatted text output, and informational notices.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import FormatterStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, FormatterStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_formatted_text(text: str) -> None:
    """Print formatted text, adding a final newline only when it has none."""

    typer.echo(text, nl=not text.endswith("\n"))


def echo_notice(message: str) -> None:
    """Print an informational notice on stderr so stdout stays pipeable."""

    typer.secho(message, fg=typer.colors.YELLOW, err=True)


def echo_banner(lines: list[str]) -> None:
    """Print banner lines in order."""

    for line in lines:
        typer.echo(line)
