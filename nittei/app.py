"""Host-facing facade around the formatting pipeline.

Responsibilities:
- Seed the current year from today's date at construction.
- Track input/output sizes of the last processed text for status reporting.
- Provide the fixed user-facing notices shown next to formatted output.

Key public types:
- `ScheduleFormatterApp`: the object a CLI or UI calls on every input change.
- `AppStatus`: snapshot returned by `ScheduleFormatterApp.status`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_CONFIG, FormatterConfig
from .telemetry.logger import RunLogger
from .text import LineFormatter, TextFormatter

NO_CONTENT_MESSAGE = "コピーする日程がありません。"


@dataclass(frozen=True, slots=True)
class AppStatus:
    """Snapshot of facade state.

    Attributes:
        current_year: Year used for year-omitted dates.
        input_length: Character count of the last processed input.
        output_length: Character count of the last produced output.
    """

    current_year: int
    input_length: int
    output_length: int


class ScheduleFormatterApp:
    """Format schedule text for a host application."""

    def __init__(
        self,
        config: FormatterConfig = DEFAULT_CONFIG,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Build the pipeline; its current year starts at today's year."""

        self.line_formatter = LineFormatter(config)
        self.text_formatter = TextFormatter(self.line_formatter, run_logger=run_logger)
        self._input_length = 0
        self._output_length = 0

    def process(self, text: str) -> str:
        """Format `text` and remember input/output sizes."""

        formatted = self.text_formatter.format_text(text)
        self._input_length = len(text) if isinstance(text, str) else 0
        self._output_length = len(formatted)
        return formatted

    def update_current_year(self, year: int | None = None) -> None:
        """Update the current year; `None` means today's year."""

        resolved = year if year is not None else self.line_formatter.dates.today_info().year
        self.line_formatter.update_current_year(resolved)

    def status(self) -> AppStatus:
        """Return the current year and the sizes of the last processed text."""

        return AppStatus(
            current_year=self.line_formatter.current_year,
            input_length=self._input_length,
            output_length=self._output_length,
        )

    def today_banner(self) -> list[str]:
        """Return today's date line and the base-year notice for year-omitted dates."""

        today = self.line_formatter.dates.today_info()
        year = self.line_formatter.current_year
        return [
            f"今日の日付: {today.formatted}",
            f"「7/1」など年を省略した入力は、{year}年で整形します。",
        ]
