"""Multi-line text formatting.

Splits text on newlines, formats every line independently with one shared
`LineFormatter`, and rejoins with the same newline separator.
"""

from __future__ import annotations

from collections import Counter

from ..models import TextReport
from ..telemetry.logger import RunLogger
from .line_formatter import LineFormatter

_LINE_SEPARATOR = "\n"


class TextFormatter:
    """Format every line of a multi-line text."""

    def __init__(
        self,
        line_formatter: LineFormatter | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self.line_formatter = line_formatter or LineFormatter()
        self._run_logger = run_logger

    def format_text(self, text: str) -> str:
        """Return `text` with every line formatted; empty or non-string input yields `""`."""

        return self.format_text_with_report(text).text

    def format_text_with_report(self, text: str) -> TextReport:
        """Format `text` and aggregate substitution counts across lines."""

        if not isinstance(text, str) or not text:
            return TextReport(text="", line_count=0)

        lines = text.split(_LINE_SEPARATOR)
        if self._run_logger is not None:
            self._run_logger.log_stage_start("format", lines=len(lines))

        formatted_lines: list[str] = []
        substitutions: Counter[str] = Counter()
        for line in lines:
            report = self.line_formatter.format_line_with_report(line)
            formatted_lines.append(report.text)
            substitutions.update(report.substitutions)

        result = TextReport(
            text=_LINE_SEPARATOR.join(formatted_lines),
            line_count=len(lines),
            substitutions=dict(substitutions),
        )
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(
                "format",
                lines=result.line_count,
                substitutions=result.total_substitutions,
                year=self.line_formatter.current_year,
            )
        return result

    def update_current_year(self, year: int) -> None:
        """Forward a current-year update to the underlying line formatter."""

        self.line_formatter.update_current_year(year)
