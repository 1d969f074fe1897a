"""Unit tests for check orchestration and run logging."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest

from uselessdoc.config import CheckConfig
from uselessdoc.errors import CheckStageError
from uselessdoc.runner import CheckRunner
from uselessdoc.telemetry.logger import RunLogger


REDUNDANT_SOURCE = '''
def get_name(self):
    """Returns the name."""
    return self._name
'''

CLEAN_SOURCE = '''
def retry(request):
    """Send a request again after transient network failures."""
'''


def test_runner_aggregates_report_across_files(
    tmp_path: Path,
    write_module: Callable[..., Path],
    return_stop_config: CheckConfig,
) -> None:
    """Reports should count files, checked entities and problems."""

    redundant = write_module(REDUNDANT_SOURCE, "pkg/names.py")
    write_module(CLEAN_SOURCE, "pkg/network.py")

    report = CheckRunner(config=return_stop_config).run([tmp_path])

    assert report.files_scanned == 2
    assert report.entities_checked == 2
    assert report.problem_count == 1
    assert report.problems[0].entity.path == redundant
    assert report.fixes_applied == 0
    assert "Returns the name." in redundant.read_text(encoding="utf-8")


def test_runner_fix_rewrites_files_in_place(
    write_module: Callable[..., Path],
    return_stop_config: CheckConfig,
) -> None:
    """With `fix=True` reported docstrings should be deleted from disk."""

    path = write_module(REDUNDANT_SOURCE)

    report = CheckRunner(config=return_stop_config).run([path], fix=True)

    assert report.fixes_applied == 1
    assert path.read_text(encoding="utf-8") == "def get_name(self):\n    return self._name\n"


def test_runner_raises_on_invalid_source_by_default(
    write_module: Callable[..., Path],
    return_stop_config: CheckConfig,
) -> None:
    """Unparsable files should stop the run unless skipping is enabled."""

    broken = write_module("def broken(:\n", "broken.py")

    with pytest.raises(CheckStageError) as exc_info:
        CheckRunner(config=return_stop_config).run([broken])

    assert exc_info.value.stage == "scan"


def test_runner_skips_invalid_source_when_requested(
    tmp_path: Path,
    write_module: Callable[..., Path],
    return_stop_config: CheckConfig,
) -> None:
    """Skipped files should be listed and logged while other files are checked."""

    broken = write_module("def broken(:\n", "broken.py")
    write_module(REDUNDANT_SOURCE, "names.py")
    sink = io.StringIO()

    report = CheckRunner(config=return_stop_config, run_logger=RunLogger(sink=sink)).run(
        [tmp_path], skip_invalid=True
    )

    assert report.skipped_files == [broken]
    assert report.files_scanned == 1
    assert report.problem_count == 1
    assert "level=WARNING stage=scan event=skipped" in sink.getvalue()


def test_runner_emits_deterministic_stage_logs(
    write_module: Callable[..., Path],
    return_stop_config: CheckConfig,
) -> None:
    """Stage events should be logged with sorted, sanitized context."""

    path = write_module(REDUNDANT_SOURCE)
    sink = io.StringIO()

    CheckRunner(config=return_stop_config, run_logger=RunLogger(sink=sink)).run([path], fix=True)

    lines = sink.getvalue().splitlines()
    assert lines[0] == "[phase] level=INFO stage=scan event=start"
    assert lines[1] == "[phase] level=INFO stage=scan event=complete"
    assert lines[2] == "[phase] level=INFO stage=inspect event=start files=1"
    assert any(
        line.startswith("[phase] level=INFO stage=fix event=complete path=")
        and line.endswith("removed=1 skipped=0")
        for line in lines
    )
    assert lines[-1] == "[phase] level=INFO stage=inspect event=complete problems=1"


def test_runner_logs_stage_failure_for_missing_paths(tmp_path: Path) -> None:
    """Missing inputs should log a scan failure before raising."""

    sink = io.StringIO()

    with pytest.raises(CheckStageError):
        CheckRunner(run_logger=RunLogger(sink=sink)).run([tmp_path / "missing.py"])

    assert "[phase] level=ERROR stage=scan event=failure error_type=CheckStageError" in sink.getvalue()


def test_run_logger_debug_events_respect_level() -> None:
    """Per-file debug events should only appear at DEBUG level."""

    quiet_sink = io.StringIO()
    RunLogger(sink=quiet_sink).log_file_checked("a b.py", entities=2, problems=0)
    verbose_sink = io.StringIO()
    RunLogger(sink=verbose_sink, level="DEBUG").log_file_checked("a b.py", entities=2, problems=0)

    assert quiet_sink.getvalue() == ""
    assert verbose_sink.getvalue().strip() == (
        "[phase] level=DEBUG stage=inspect event=checked entities=2 path=a_b.py problems=0"
    )
