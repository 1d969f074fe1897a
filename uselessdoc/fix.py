"""Deletion fix for reported documentation problems.

Responsibilities:
- Delete whole docstrings or individual entries that were reported as useless.
- Cascade to deleting the docstring when no content remains after entry removal.
- Leave source untouched wherever a deletion cannot be mapped onto exact lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .io.docstrings import DocstringParser
from .io.source_scanner import split_source_lines
from .models.datatypes import DocComment, DocumentedEntity, FixResult, ParamTag, Problem


@dataclass(frozen=True, slots=True)
class _LineEdit:
    """Replacement of an inclusive 1-based source line range."""

    start: int
    end: int
    replacement: list[str]


class DeleteFix:
    """Delete useless docstrings and docstring entries from source text."""

    def __init__(self, parser: DocstringParser | None = None) -> None:
        """Initialize with the docstring parser used to re-read entries."""

        self.parser = parser or DocstringParser()

    def apply(self, source: str, problems: Iterable[Problem]) -> FixResult:
        """Apply deletions for all problems that belong to `source`.

        Edits are applied bottom-up so line numbers of pending edits stay valid.
        """

        lines = split_source_lines(source, keepends=True)
        grouped: dict[tuple[int, str], list[Problem]] = {}
        for problem in problems:
            key = (problem.entity.docstring_start, problem.entity.qualified_name)
            grouped.setdefault(key, []).append(problem)

        edits: list[_LineEdit] = []
        removed = 0
        skipped = 0
        for entity_problems in grouped.values():
            edit = self._plan(entity_problems, lines)
            if edit is None:
                skipped += len(entity_problems)
                continue
            edits.append(edit)
            removed += len(entity_problems)

        for edit in sorted(edits, key=lambda item: item.start, reverse=True):
            lines[edit.start - 1 : edit.end] = edit.replacement
        return FixResult(source="".join(lines), removed=removed, skipped=skipped)

    def _plan(self, problems: list[Problem], lines: list[str]) -> _LineEdit | None:
        """Plan the edit that resolves every problem of one entity."""

        entity = problems[0].entity
        if any(problem.scope == "docstring" or problem.tag is None for problem in problems):
            return self._delete_docstring(entity, lines)

        comment = self.parser.parse(entity.docstring)
        offsets = self._entry_offsets(comment, problems)
        remaining = [line for index, line in enumerate(comment.lines) if index not in offsets]
        if not "\n".join(remaining).strip():
            return self._delete_docstring(entity, lines)

        last = len(comment.lines) - 1
        if not entity.line_mapped or any(offset in (0, last) for offset in offsets):
            return None
        start = entity.docstring_start
        kept = [
            lines[start - 1 + index]
            for index in range(len(comment.lines))
            if index not in offsets
        ]
        return _LineEdit(start=start, end=entity.docstring_end, replacement=kept)

    @staticmethod
    def _entry_offsets(comment: DocComment, problems: list[Problem]) -> set[int]:
        """Return docstring line offsets covered by the reported entries.

        A section header is included once every entry below it is removed.
        """

        offsets: set[int] = set()
        removed_params: set[int] = set()
        for problem in problems:
            tag = problem.tag
            if tag is None:
                continue
            offsets.update(range(tag.line_offset, tag.line_offset + tag.line_count))
            if isinstance(tag, ParamTag):
                removed_params.add(tag.line_offset)

        sections: dict[int, list[ParamTag]] = {}
        for param in comment.params:
            if param.section_offset is not None:
                sections.setdefault(param.section_offset, []).append(param)
        for header, section_params in sections.items():
            if all(param.line_offset in removed_params for param in section_params):
                offsets.add(header)
        return offsets

    @staticmethod
    def _delete_docstring(entity: DocumentedEntity, lines: list[str]) -> _LineEdit | None:
        """Plan deletion of the docstring statement, keeping the body valid."""

        if not entity.standalone_docstring or entity.docstring_end > len(lines):
            return None
        replacement: list[str] = []
        if entity.body_statement_count == 1:
            last_line = lines[entity.docstring_end - 1]
            newline = last_line[len(last_line.rstrip("\r\n")) :] or "\n"
            indent = lines[entity.docstring_start - 1][: entity.docstring_col]
            replacement.append(indent + "pass" + newline)
        return _LineEdit(start=entity.docstring_start, end=entity.docstring_end, replacement=replacement)
