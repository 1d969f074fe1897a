"""Shared pytest fixtures for the full uselessdoc test suite."""

from __future__ import annotations

from pathlib import Path
import textwrap
from typing import Callable

import pytest

from uselessdoc.config import CheckConfig


@pytest.fixture
def example_stop_words() -> tuple[str, ...]:
    """Provide the small stop-word list used by the normalization examples."""

    return ("set", "returns", "property", "properties")


@pytest.fixture
def return_stop_config() -> CheckConfig:
    """Provide a check config whose only stop word is `return` (inflection on)."""

    return CheckConfig(stop_words=("return",))


@pytest.fixture
def write_module(tmp_path: Path) -> Callable[..., Path]:
    """Provide a helper that writes dedented Python source below `tmp_path`."""

    def _write(source: str, name: str = "module.py") -> Path:
        """Write dedented source to `name` and return its path."""

        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip("\n"), encoding="utf-8")
        return path

    return _write
