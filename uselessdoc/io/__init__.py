"""Input/output components for docstring parsing and source scanning."""

from .docstrings import DocstringParser, parse_docstring
from .source_scanner import SourceScanner, iter_source_files, read_source, write_source

__all__ = [
    "DocstringParser",
    "SourceScanner",
    "iter_source_files",
    "parse_docstring",
    "read_source",
    "write_source",
]
