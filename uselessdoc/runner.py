"""Check orchestration across source files.

Responsibilities:
- Resolve paths, inspect every source file and aggregate a `CheckReport`.
- Optionally apply deletion fixes and write fixed files back.
- Emit stage-level run events through `RunLogger`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, TypeVar

from .config import CheckConfig
from .errors import CheckStageError
from .fix import DeleteFix
from .inspection import DocstringInspection
from .io.source_scanner import iter_source_files, read_source, write_source
from .models.datatypes import CheckReport, Problem
from .telemetry.logger import RunLogger


_T = TypeVar("_T")


class CheckRunner:
    """Run docstring checks over files and directories."""

    def __init__(
        self,
        config: CheckConfig | None = None,
        run_logger: RunLogger | None = None,
        inspection: DocstringInspection | None = None,
        fixer: DeleteFix | None = None,
    ) -> None:
        """Initialize runner collaborators."""

        self.config = config or CheckConfig()
        self.run_logger = run_logger
        self.inspection = inspection or DocstringInspection(self.config)
        self.fixer = fixer or DeleteFix(self.inspection.parser)

    def run(
        self,
        paths: Sequence[Path],
        *,
        fix: bool = False,
        skip_invalid: bool = False,
    ) -> CheckReport:
        """Check every Python file reachable from `paths`."""

        report = CheckReport()
        files = self._run_stage("scan", lambda: iter_source_files(paths))
        self._log_start("inspect", files=len(files))
        for path in files:
            try:
                source = read_source(path)
                entities, problems = self.inspection.check_source(source, path)
            except CheckStageError as exc:
                if not skip_invalid:
                    self._log_failure(exc.stage, exc)
                    raise
                report.skipped_files.append(path)
                if self.run_logger is not None:
                    self.run_logger.log_file_skipped(path, reason=exc.stage)
                continue

            report.files_scanned += 1
            report.entities_checked += len(entities)
            report.problems.extend(problems)
            if self.run_logger is not None:
                self.run_logger.log_file_checked(path, entities=len(entities), problems=len(problems))
            if fix and problems:
                report.fixes_applied += self._fix_file(path, source, problems)
        self._log_complete("inspect", problems=report.problem_count)
        return report

    def _fix_file(self, path: Path, source: str, problems: list[Problem]) -> int:
        """Apply deletion fixes to one file and return how many problems were removed."""

        self._log_start("fix", path=path)
        result = self.fixer.apply(source, problems)
        if result.source != source:
            try:
                write_source(path, result.source)
            except CheckStageError as exc:
                self._log_failure("fix", exc)
                raise
        self._log_complete("fix", path=path, removed=result.removed, skipped=result.skipped)
        return result.removed

    def _run_stage(self, stage: str, action: Callable[[], _T]) -> _T:
        """Run one stage action with start/complete/failure events."""

        self._log_start(stage)
        try:
            result = action()
        except Exception as exc:
            self._log_failure(stage, exc)
            raise
        self._log_complete(stage)
        return result

    def _log_start(self, stage: str, **context: object) -> None:
        if self.run_logger is not None:
            self.run_logger.log_stage_start(stage, **context)

    def _log_complete(self, stage: str, **context: object) -> None:
        if self.run_logger is not None:
            self.run_logger.log_stage_complete(stage, **context)

    def _log_failure(self, stage: str, exc: Exception) -> None:
        if self.run_logger is not None:
            self.run_logger.log_stage_failure(stage, type(exc).__name__)
