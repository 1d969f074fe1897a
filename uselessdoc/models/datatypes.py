"""Core datatypes shared across uselessdoc modules.

Responsibilities:
- Represent immutable records exchanged between scanning, inspection and fix stages.
- Provide explicit typing for deterministic reporting.

Key types:
- `Verdict`, `ParamTag`, `ReturnTag`, `DocComment`, `DocumentedEntity`,
  `Problem`, `FixResult` and `CheckReport`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..text.similarity import Similarity


class Verdict(str, Enum):
    """Categorical outcome of comparing documentation text against a target."""

    EMPTY_CONTENT = "empty_content"
    TOO_SIMILAR_TO_NAME = "too_similar_to_name"
    TOO_SIMILAR_TO_TYPE = "too_similar_to_type"
    ACCEPTABLE = "acceptable"


@dataclass(frozen=True, slots=True)
class ParamTag:
    """One documented parameter entry of a docstring.

    Attributes:
        name: Declared parameter name, or `None` when the entry has no name.
        description: Entry description with continuation lines joined.
        line_offset: 0-based line index of the entry inside the raw docstring.
        line_count: Number of docstring lines the entry spans.
        section_offset: Line index of the owning `Args:` header for
            Google-style entries, `None` for field-list entries.
    """

    name: str | None
    description: str
    line_offset: int
    line_count: int = 1
    section_offset: int | None = None


@dataclass(frozen=True, slots=True)
class ReturnTag:
    """The documented return value entry of a docstring."""

    description: str
    line_offset: int
    line_count: int = 1


@dataclass(frozen=True, slots=True)
class DocComment:
    """Parsed docstring with prose and tagged entries separated.

    Attributes:
        raw: Docstring literal value exactly as written in source.
        lines: Dedented docstring lines, index-aligned with `raw.split("\\n")`.
        text_with_tags: Full cleaned docstring text.
        text_without_tags: Prose only, with every field and section line removed.
        params: Parameter entries in document order.
        returns: Return entry, when present.
    """

    raw: str
    lines: tuple[str, ...]
    text_with_tags: str
    text_without_tags: str
    params: tuple[ParamTag, ...] = field(default_factory=tuple)
    returns: ReturnTag | None = None


@dataclass(frozen=True, slots=True)
class DocumentedEntity:
    """A class or function that carries a docstring.

    Attributes:
        kind: `class` or `function`.
        name: Declared entity name.
        qualified_name: Dotted name including enclosing classes/functions.
        type_name: Return annotation text, falling back to `name`.
        path: Source path the entity was read from.
        lineno: 1-based line of the `def`/`class` statement.
        docstring: Raw docstring literal value.
        docstring_start: 1-based first source line of the docstring statement.
        docstring_end: 1-based last source line of the docstring statement.
        docstring_col: Column offset of the docstring statement.
        body_statement_count: Number of statements in the entity body.
        standalone_docstring: Whether the docstring statement owns its lines
            exclusively, so that deleting those lines removes nothing else.
        line_mapped: Whether raw docstring lines map one-to-one onto source lines.
    """

    kind: str
    name: str
    qualified_name: str
    type_name: str
    path: Path
    lineno: int
    docstring: str
    docstring_start: int
    docstring_end: int
    docstring_col: int
    body_statement_count: int
    standalone_docstring: bool = True
    line_mapped: bool = True


@dataclass(frozen=True, slots=True)
class Problem:
    """One reported documentation defect.

    Attributes:
        entity: Entity whose docstring contains the defect.
        verdict: Verdict category that triggered the report.
        message: Human-readable diagnostic, including the similarity explanation.
        scope: `docstring`, `param` or `return`.
        similarity: Similarity that crossed the threshold, when applicable.
        tag: Parameter or return entry the problem points at.
    """

    entity: DocumentedEntity
    verdict: Verdict
    message: str
    scope: str = "docstring"
    similarity: Similarity | None = None
    tag: ParamTag | ReturnTag | None = None

    @property
    def line(self) -> int:
        """Return the 1-based source line the problem is reported on."""

        if self.tag is not None and self.entity.line_mapped:
            return self.entity.docstring_start + self.tag.line_offset
        return self.entity.docstring_start


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of applying deletion fixes to one source text."""

    source: str
    removed: int
    skipped: int = 0


@dataclass(slots=True)
class CheckReport:
    """Aggregate results for one check run."""

    files_scanned: int = 0
    entities_checked: int = 0
    problems: list[Problem] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    fixes_applied: int = 0

    @property
    def problem_count(self) -> int:
        """Return the number of reported problems."""

        return len(self.problems)
