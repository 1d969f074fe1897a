"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
problem listings, run summaries and similarity explanations.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CheckStageError
from .models.datatypes import CheckReport, Problem
from .text.similarity import Similarity


ERROR_EXIT_CODE = 2
PROBLEMS_EXIT_CODE = 1


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 2."""

    if isinstance(exc, CheckStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=ERROR_EXIT_CODE) from exc


def format_problem(problem: Problem) -> str:
    """Render one problem as a `path:line: name: message` row."""

    entity = problem.entity
    return f"{entity.path}:{problem.line}: {entity.qualified_name}: {problem.message}"


def echo_problems(problems: list[Problem]) -> None:
    """Print problems sorted by path and line."""

    ordered = sorted(problems, key=lambda item: (str(item.entity.path), item.line))
    for problem in ordered:
        typer.echo(format_problem(problem))


def echo_check_summary(report: CheckReport, fix: bool) -> None:
    """Print file, entity and problem counts for a check run."""

    typer.echo(
        f"Checked {report.entities_checked} docstring(s) in {report.files_scanned} file(s): "
        f"{report.problem_count} problem(s)."
    )
    if report.skipped_files:
        typer.echo(f"Skipped {len(report.skipped_files)} unparsable file(s).")
    if fix:
        typer.echo(f"Fixed {report.fixes_applied} problem(s).")


def echo_similarity(similarity: Similarity, threshold: float) -> None:
    """Print both normalized operands, the ratio and the threshold decision."""

    decision = "too similar" if similarity.ratio >= threshold else "acceptable"
    typer.echo(f"Left: {similarity.left}")
    typer.echo(f"Right: {similarity.right}")
    typer.echo(f"Similarity: {similarity}")
    typer.echo(f"Ratio: {similarity.ratio:.3f}")
    typer.echo(f"Verdict: {decision} (threshold {threshold:.2f})")
