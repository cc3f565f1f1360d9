"""Custom exception hierarchy for classeval.

Never use bare except clauses. Always catch specific exceptions.
"""
from __future__ import annotations


class ClassEvalError(Exception):
    """Base exception for all classeval errors."""


class EmptyInputError(ClassEvalError):
    """Observation collection is empty; no metric can be computed."""


class UndefinedMetricError(ClassEvalError):
    """A metric's denominator is zero."""

    def __init__(self, metric: str, message: str | None = None) -> None:
        super().__init__(message or f"Metric '{metric}' is undefined (zero denominator)")
        self.metric = metric


class DegenerateInputError(ClassEvalError):
    """Observations contain only one actual class."""

    def __init__(self, message: str, n_positive: int = 0, n_negative: int = 0) -> None:
        super().__init__(message)
        self.n_positive = n_positive
        self.n_negative = n_negative


class InvalidCurveError(ClassEvalError):
    """ROC point sequence is too short, out of range, or not monotonic."""


class ConfigError(ClassEvalError):
    """Configuration file content is invalid."""
