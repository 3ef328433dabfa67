"""Domain exceptions for CLI diagnostics."""

from __future__ import annotations


class FormatterStageError(RuntimeError):
    """Raised when a specific CLI stage (config, input, output) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped formatter error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
