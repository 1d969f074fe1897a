"""Command-line interface for uselessdoc.

Responsibilities:
- Expose user-facing commands for checking sources and probing the engine.
- Convert CLI arguments into `CheckConfig` with CLI > YAML > env precedence.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    PROBLEMS_EXIT_CODE,
    echo_check_summary,
    echo_problems,
    echo_similarity,
    exit_with_command_error,
)
from .config import CheckConfig, ConfigLoader
from .errors import CheckStageError
from .parsing import parse_word_list
from .runner import CheckRunner
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="uselessdoc",
    no_args_is_help=True,
    help="Flag docstrings that only restate a name or type.",
)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="YAML config file (overrides environment values)."),
]
StopWordsOption = Annotated[
    str | None,
    typer.Option("--stop-words", help="Comma-separated stop words replacing the configured list."),
]
ThresholdOption = Annotated[
    float | None,
    typer.Option(
        "--threshold",
        min=0.0,
        max=1.0,
        help="Similarity ratio at or above which text counts as redundant.",
    ),
]


def _load_config(config_path: Path | None) -> CheckConfig:
    """Load environment and YAML configuration and map failures to stage errors."""

    try:
        return ConfigLoader.load(config_path)
    except FileNotFoundError as exc:
        raise CheckStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        source = f"config file `{config_path}`" if config_path is not None else "environment config"
        raise CheckStageError(
            stage="config",
            detail=f"Invalid {source}: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _resolve_config(
    config_path: Path | None,
    threshold: float | None,
    stop_words: str | None,
    check_private: bool | None = None,
) -> CheckConfig:
    """Resolve effective config from file/env defaults and explicit CLI overrides."""

    loaded = _load_config(config_path)
    try:
        return loaded.with_overrides(
            stop_words=parse_word_list(stop_words) if stop_words is not None else None,
            similarity_threshold=threshold,
            check_private=check_private,
        )
    except ValueError as exc:
        raise CheckStageError(
            stage="config",
            detail=f"Invalid command option: {exc}",
            hint="Check `--threshold` and `--stop-words` values.",
        ) from exc


@app.command("check")
def check_command(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Python files or directories to check."),
    ],
    config_file: ConfigOption = None,
    threshold: ThresholdOption = None,
    stop_words: StopWordsOption = None,
    check_private: Annotated[
        bool | None,
        typer.Option(
            "--check-private/--no-check-private",
            help="Also check `_private` classes and functions.",
        ),
    ] = None,
    skip_invalid: Annotated[
        bool,
        typer.Option("--skip-invalid", help="Skip files that cannot be read or parsed."),
    ] = False,
    fix: Annotated[
        bool,
        typer.Option("--fix", help="Delete reported docstrings and entries in place."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log per-file inspection counts."),
    ] = False,
) -> None:
    """Check docstrings in Python sources and report useless documentation."""

    try:
        config = _resolve_config(config_file, threshold, stop_words, check_private)
        runner = CheckRunner(
            config=config,
            run_logger=RunLogger(level="DEBUG" if verbose else "INFO"),
        )
        report = runner.run(paths, fix=fix, skip_invalid=skip_invalid)
    except Exception as exc:
        exit_with_command_error("check", exc)

    echo_problems(report.problems)
    echo_check_summary(report, fix=fix)
    if report.problems:
        raise typer.Exit(code=PROBLEMS_EXIT_CODE)


@app.command("normalize")
def normalize_command(
    text: Annotated[str, typer.Argument(help="Identifier or prose to normalize.")],
    config_file: ConfigOption = None,
    stop_words: StopWordsOption = None,
) -> None:
    """Print the normalized comparison form of a text."""

    try:
        config = _resolve_config(config_file, None, stop_words)
        normalized = config.build_policy().normalizer.normalize(text)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    typer.echo(normalized)


@app.command("compare")
def compare_command(
    text: Annotated[str, typer.Argument(help="Documentation text.")],
    other: Annotated[str, typer.Argument(help="Name or type to compare against.")],
    config_file: ConfigOption = None,
    threshold: ThresholdOption = None,
    stop_words: StopWordsOption = None,
) -> None:
    """Normalize two texts and explain their similarity."""

    try:
        config = _resolve_config(config_file, threshold, stop_words)
        similarity = config.build_policy().similarity(text, other)
    except Exception as exc:
        exit_with_command_error("compare", exc)

    echo_similarity(similarity, config.similarity_threshold)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
