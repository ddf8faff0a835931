"""
Errors raised by the transition core.

They all derive from ``ValueError``: each one comes from invalid input, never
from a transient condition, so callers should not retry.
"""

from __future__ import annotations

from typing import Optional


class TransitionError(ValueError):
    """Base class for invalid tables or parameters."""


class SchemaMismatchError(TransitionError):
    """The relatedness tables do not share one job label set."""

    def __init__(self, table: str, message: str) -> None:
        super().__init__(f"{table}: {message}")
        self.table = table


class InvalidWeightError(TransitionError):
    """A weight is negative, not finite, or keyed by an unknown metric."""

    def __init__(self, message: str, metric: Optional[str] = None) -> None:
        super().__init__(message)
        self.metric = metric


class DegenerateWeightError(TransitionError):
    """All weights are zero, so there is nothing to normalize by."""
