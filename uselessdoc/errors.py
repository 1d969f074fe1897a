"""Domain exceptions for check stages and CLI diagnostics."""

from __future__ import annotations


class CheckStageError(RuntimeError):
    """Raised when a specific check stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped check error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
