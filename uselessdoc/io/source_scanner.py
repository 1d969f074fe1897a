"""Python source scanning for documented classes and functions.

Responsibilities:
- Parse Python source with `ast` and visit every class and function, nested ones included.
- Record docstring location data needed by inspection and deletion fixes.
- Resolve files and directories into a deterministic list of source paths.
"""

from __future__ import annotations

import ast
import io
from pathlib import Path
import re
from typing import Iterable

from ..errors import CheckStageError
from ..models.datatypes import DocumentedEntity


_STRING_PREFIX_RE = re.compile(r"^(?P<prefix>[rRuU]{0,2})(?P<quote>\"\"\"|'''|\"|')")
_SKIPPED_DIRECTORIES = frozenset({"__pycache__", "node_modules", "build", "dist"})

FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


class _EntityVisitor(ast.NodeVisitor):
    """Collect documented entities while tracking qualified names."""

    def __init__(self, source: str, path: Path) -> None:
        self._source = source
        self._lines = split_source_lines(source)
        self._path = path
        self._scope: list[str] = []
        self.entities: list[DocumentedEntity] = []

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self._record(node, kind="class", type_name=node.name)
        self._visit_scoped(node)

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._visit_function(node)

    def _visit_function(self, node: FunctionNode) -> None:
        type_name = ast.unparse(node.returns) if node.returns is not None else node.name
        self._record(node, kind="function", type_name=type_name)
        self._visit_scoped(node)

    def _visit_scoped(self, node: ast.ClassDef | FunctionNode) -> None:
        self._scope.append(node.name)
        self.generic_visit(node)
        self._scope.pop()

    def _record(self, node: ast.ClassDef | FunctionNode, *, kind: str, type_name: str) -> None:
        found = _docstring_expression(node)
        if found is None:
            return
        docstring_node, raw = found
        start = docstring_node.lineno
        end = docstring_node.end_lineno or start
        self.entities.append(
            DocumentedEntity(
                kind=kind,
                name=node.name,
                qualified_name=".".join([*self._scope, node.name]),
                type_name=type_name,
                path=self._path,
                lineno=node.lineno,
                docstring=raw,
                docstring_start=start,
                docstring_end=end,
                docstring_col=docstring_node.col_offset,
                body_statement_count=len(node.body),
                standalone_docstring=self._is_standalone(docstring_node),
                line_mapped=self._is_line_mapped(docstring_node, raw),
            )
        )

    def _is_standalone(self, node: ast.Expr) -> bool:
        """Return whether nothing but the docstring lives on its source lines."""

        end = node.end_lineno or node.lineno
        end_col = node.end_col_offset
        if end_col is None or end > len(self._lines):
            return False
        first = self._lines[node.lineno - 1]
        last = self._lines[end - 1]
        return not first[: node.col_offset].strip() and not last[end_col:].strip()

    def _is_line_mapped(self, node: ast.Expr, raw: str) -> bool:
        """Return whether raw docstring lines correspond one-to-one to source lines."""

        segment = ast.get_source_segment(self._source, node.value)
        if segment is None:
            return False
        match = _STRING_PREFIX_RE.match(segment)
        if match is None:
            return False
        quote = match.group("quote")
        body = segment[match.end() :].replace("\r\n", "\n").replace("\r", "\n")
        if not body.endswith(quote):
            return False
        return body[: len(body) - len(quote)] == raw


def _docstring_expression(node: ast.ClassDef | FunctionNode) -> tuple[ast.Expr, str] | None:
    """Return the docstring statement of a class or function and its value, if any."""

    if not node.body:
        return None
    first = node.body[0]
    if (
        isinstance(first, ast.Expr)
        and isinstance(first.value, ast.Constant)
        and isinstance(first.value.value, str)
    ):
        return first, first.value.value
    return None


class SourceScanner:
    """Find documented entities in Python source files."""

    def scan_source(self, source: str, path: Path) -> list[DocumentedEntity]:
        """Parse source text and return its documented entities in source order."""

        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as exc:
            raise CheckStageError(
                stage="scan",
                detail=f"Cannot parse `{path}`: {exc.msg} (line {exc.lineno}).",
                hint="Fix the syntax error or rerun with `--skip-invalid`.",
            ) from exc
        visitor = _EntityVisitor(source, path)
        visitor.visit(tree)
        return sorted(visitor.entities, key=lambda entity: (entity.lineno, entity.qualified_name))

    def scan_path(self, path: Path) -> list[DocumentedEntity]:
        """Read and scan one source file."""

        return self.scan_source(read_source(path), path)


def split_source_lines(source: str, keepends: bool = False) -> list[str]:
    """Split source on the line breaks `ast` counts, ignoring form feeds and the like."""

    lines = io.StringIO(source, newline="").readlines()
    if keepends:
        return lines
    return [line.rstrip("\r\n") for line in lines]


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 and map failures to scan-stage errors."""

    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise CheckStageError(
            stage="scan",
            detail=f"Source path not found: `{path}`.",
            hint="Pass existing files or directories.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CheckStageError(
            stage="scan",
            detail=f"Failed to read `{path}`: {exc}",
            hint="Verify file permissions and UTF-8 encoding.",
        ) from exc


def iter_source_files(paths: Iterable[Path]) -> list[Path]:
    """Expand files and directories into a sorted, de-duplicated list of `.py` files."""

    collected: dict[Path, None] = {}
    for path in paths:
        if path.is_dir():
            for candidate in sorted(path.rglob("*.py")):
                relative_parts = candidate.relative_to(path).parts[:-1]
                if any(_is_skipped_directory(part) for part in relative_parts):
                    continue
                collected.setdefault(candidate, None)
        elif path.exists():
            collected.setdefault(path, None)
        else:
            raise CheckStageError(
                stage="scan",
                detail=f"Source path not found: `{path}`.",
                hint="Pass existing files or directories.",
            )
    return list(collected)


def _is_skipped_directory(name: str) -> bool:
    return name.startswith(".") or name in _SKIPPED_DIRECTORIES


def write_source(path: Path, source: str) -> None:
    """Write fixed source back, keeping its original line endings."""

    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(source)
    except OSError as exc:
        raise CheckStageError(
            stage="fix",
            detail=f"Failed to write `{path}`: {exc}",
            hint="Verify file permissions and rerun with `--fix`.",
        ) from exc
