"""Docstring parsing into prose and tagged entries.

Responsibilities:
- Split a raw docstring into prose, parameter entries and the return entry.
- Support reStructuredText field lists (`:param x:`) and Google-style sections (`Args:`).
- Keep line offsets aligned with the raw literal so entries can be deleted in place.
"""

from __future__ import annotations

import re

from ..models.datatypes import DocComment, ParamTag, ReturnTag


_PARAM_FIELD_RE = re.compile(
    r"^:(?:param|parameter|arg|argument|key|keyword)\b(?P<args>[^:]*):(?P<desc>.*)$"
)
_RETURN_FIELD_RE = re.compile(r"^:returns?\s*:(?P<desc>.*)$")
_ANY_FIELD_RE = re.compile(r"^:[A-Za-z][^:`]*:(?!`)")
_PARAM_SECTION_RE = re.compile(
    r"^(?:Args|Arguments|Parameters|Params|Keyword Args|Keyword Arguments|Other Parameters):\s*$"
)
_RETURN_SECTION_RE = re.compile(r"^(?:Returns|Return|Yields|Yield):\s*$")
_OTHER_SECTION_RE = re.compile(
    r"^(?:Raises|Raise|Attributes|Examples?|Notes?|See Also|References|Warnings?|Todo):\s*$"
)
_GOOGLE_ENTRY_RE = re.compile(
    r"^(?P<name>\*{0,2}[A-Za-z_]\w*)\s*(?:\((?P<type>[^)]*)\))?\s*:(?P<desc>.*)$"
)


def dedent_lines(raw: str) -> tuple[str, ...]:
    """Dedent docstring lines while keeping one output line per raw line.

    The first line is stripped; the remaining lines lose their common
    indentation and trailing whitespace.
    """

    lines = raw.expandtabs().split("\n")
    indents = [len(line) - len(line.lstrip()) for line in lines[1:] if line.strip()]
    margin = min(indents) if indents else 0
    dedented = [lines[0].strip()]
    dedented.extend(line[margin:].rstrip() for line in lines[1:])
    return tuple(dedented)


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _join_text(parts: list[str]) -> str:
    return " ".join(part.strip() for part in parts if part.strip())


class DocstringParser:
    """Parse docstrings into `DocComment` records."""

    def parse(self, raw: str) -> DocComment:
        """Parse one raw docstring literal value."""

        lines = dedent_lines(raw)
        tagged: set[int] = set()
        params: list[ParamTag] = []
        returns: ReturnTag | None = None

        index = 0
        while index < len(lines):
            line = lines[index]
            stripped = line.strip()
            if _PARAM_FIELD_RE.match(stripped) or _RETURN_FIELD_RE.match(stripped):
                tag, end = self._parse_field(lines, index)
                tagged.update(range(index, end))
                if isinstance(tag, ParamTag):
                    params.append(tag)
                elif returns is None:
                    returns = tag
                index = end
                continue
            if _ANY_FIELD_RE.match(stripped):
                end = self._continuation_end(lines, index, _indent(line))
                tagged.update(range(index, end))
                index = end
                continue
            if _PARAM_SECTION_RE.match(stripped):
                section_params, end = self._parse_param_section(lines, index)
                tagged.update(range(index, end))
                params.extend(section_params)
                index = end
                continue
            if _RETURN_SECTION_RE.match(stripped):
                end = self._section_end(lines, index)
                tagged.update(range(index, end))
                if returns is None:
                    returns = ReturnTag(
                        description=_join_text(list(lines[index + 1 : end])),
                        line_offset=index,
                        line_count=end - index,
                    )
                index = end
                continue
            if _OTHER_SECTION_RE.match(stripped):
                end = self._section_end(lines, index)
                tagged.update(range(index, end))
                index = end
                continue
            index += 1

        prose = [line for position, line in enumerate(lines) if position not in tagged]
        return DocComment(
            raw=raw,
            lines=lines,
            text_with_tags="\n".join(lines).strip(),
            text_without_tags="\n".join(prose).strip(),
            params=tuple(params),
            returns=returns,
        )

    def _parse_field(self, lines: tuple[str, ...], start: int) -> tuple[ParamTag | ReturnTag, int]:
        """Parse one field-list entry with its indented continuation lines."""

        line = lines[start]
        end = self._continuation_end(lines, start, _indent(line))
        continuation = list(lines[start + 1 : end])
        stripped = line.strip()

        param_match = _PARAM_FIELD_RE.match(stripped)
        if param_match is not None:
            arguments = param_match.group("args").split()
            name = arguments[-1].lstrip("*") if arguments else None
            description = _join_text([param_match.group("desc"), *continuation])
            return (
                ParamTag(
                    name=name or None,
                    description=description,
                    line_offset=start,
                    line_count=end - start,
                ),
                end,
            )

        return_match = _RETURN_FIELD_RE.match(stripped)
        first_line = return_match.group("desc") if return_match is not None else ""
        description = _join_text([first_line, *continuation])
        return ReturnTag(description=description, line_offset=start, line_count=end - start), end

    def _parse_param_section(
        self, lines: tuple[str, ...], header: int
    ) -> tuple[list[ParamTag], int]:
        """Parse the entries of a Google-style parameter section."""

        end = self._section_end(lines, header)
        params: list[ParamTag] = []
        entry_indent: int | None = None
        index = header + 1
        while index < end:
            line = lines[index]
            if not line.strip():
                index += 1
                continue
            if entry_indent is None:
                entry_indent = _indent(line)
            elif _indent(line) > entry_indent:
                # continuation paragraph after a blank line
                index += 1
                continue
            entry_end = self._continuation_end(lines, index, entry_indent, limit=end)
            match = _GOOGLE_ENTRY_RE.match(line.strip())
            continuation = list(lines[index + 1 : entry_end])
            if match is not None:
                name = match.group("name").lstrip("*")
                description = _join_text([match.group("desc"), *continuation])
            else:
                name = None
                description = _join_text([line, *continuation])
            params.append(
                ParamTag(
                    name=name,
                    description=description,
                    line_offset=index,
                    line_count=entry_end - index,
                    section_offset=header,
                )
            )
            index = entry_end
        return params, end

    @staticmethod
    def _continuation_end(
        lines: tuple[str, ...],
        start: int,
        base_indent: int,
        limit: int | None = None,
    ) -> int:
        """Return the index after the last line indented deeper than `base_indent`."""

        stop = len(lines) if limit is None else limit
        end = start + 1
        while end < stop and lines[end].strip() and _indent(lines[end]) > base_indent:
            end += 1
        return end

    @staticmethod
    def _section_end(lines: tuple[str, ...], header: int) -> int:
        """Return the index after the last non-blank line of a section body."""

        header_indent = _indent(lines[header])
        last = header
        index = header + 1
        while index < len(lines):
            line = lines[index]
            if line.strip():
                if _indent(line) <= header_indent:
                    break
                last = index
            index += 1
        return last + 1


def parse_docstring(raw: str) -> DocComment:
    """Parse a raw docstring literal value."""

    return DocstringParser().parse(raw)
