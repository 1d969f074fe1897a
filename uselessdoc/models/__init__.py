"""Shared typed data models for uselessdoc.

This package contains dataclasses used across scanning, inspection and fix
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    CheckReport,
    DocComment,
    DocumentedEntity,
    FixResult,
    ParamTag,
    Problem,
    ReturnTag,
    Verdict,
)

__all__ = [
    "CheckReport",
    "DocComment",
    "DocumentedEntity",
    "FixResult",
    "ParamTag",
    "Problem",
    "ReturnTag",
    "Verdict",
]
