"""Error taxonomy for chartstats.

Every error is a caller error: raised synchronously to the immediate caller,
never retried or recovered inside the library.
"""

from __future__ import annotations


class ChartStatsError(ValueError):
    """Base class for all chartstats errors."""


class EmptyInputError(ChartStatsError):
    """A sample or dataset collection that must be non-empty is empty."""


class InvalidQuantileError(ChartStatsError):
    """Requested quantile probability is outside [0, 1]."""


class InvalidDomainError(ChartStatsError):
    """Histogram domain is degenerate (max <= min) or threshold count < 1."""
