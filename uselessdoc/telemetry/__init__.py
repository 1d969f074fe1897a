"""Telemetry and observability scaffolds.

This package emits deterministic run events for check auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
