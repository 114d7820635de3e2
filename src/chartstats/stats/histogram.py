"""Histogram binner: equal-width bins over a declared domain.

Bins are half-open [lower, upper) except the last, which is closed so the
value equal to domain_max is counted. Values outside the domain are excluded.

Grouped histograms share one domain and one bin-edge layout across groups so
that violin shapes can be compared bin for bin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Mapping, Optional, Sequence

import numpy as np

from chartstats.config import DEFAULT_CONFIG, StatsConfig
from chartstats.errors import EmptyInputError, InvalidDomainError
from chartstats.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Bin:
    """One histogram bin."""
    lower_bound: float
    upper_bound: float
    count: int = 0

    @property
    def center(self) -> float:
        return (self.lower_bound + self.upper_bound) / 2

    def to_dict(self) -> dict[str, Any]:
        return {
            "lower_bound": self.lower_bound,
            "upper_bound": self.upper_bound,
            "count": self.count,
        }


@dataclass(frozen=True)
class Histogram:
    """Contiguous bins spanning domain exactly."""
    domain: tuple[float, float]
    bins: list[Bin] = field(default_factory=list)

    @property
    def edges(self) -> list[float]:
        """Bin-edge sequence, len(bins) + 1 values."""
        if not self.bins:
            return []
        return [b.lower_bound for b in self.bins] + [self.bins[-1].upper_bound]

    @property
    def counts(self) -> list[int]:
        return [b.count for b in self.bins]

    @property
    def total(self) -> int:
        return sum(b.count for b in self.bins)

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": list(self.domain),
            "bins": [b.to_dict() for b in self.bins],
        }


# label -> Histogram, all with identical edges
GroupedHistogram = dict[str, Histogram]


def _bin_edges(domain_min: float, domain_max: float, threshold_count: int) -> list[float]:
    width = (domain_max - domain_min) / threshold_count
    edges = [domain_min + i * width for i in range(threshold_count)]
    edges.append(domain_max)
    return edges


def compute_histogram(
    sample: Sequence[float],
    domain: tuple[float, float],
    threshold_count: int,
) -> Histogram:
    """Count sample values into threshold_count equal-width bins over domain.

    A value v goes to bin floor((v - domain_min) / width), clamped to
    [0, threshold_count - 1]. Values outside [domain_min, domain_max] are
    not counted.

    Raises:
        InvalidDomainError: If domain_max <= domain_min, or threshold_count is
            not an integer >= 1.
    """
    domain_min, domain_max = float(domain[0]), float(domain[1])
    if not domain_max > domain_min:
        raise InvalidDomainError(f"histogram domain must satisfy max > min, got [{domain_min}, {domain_max}]")
    if isinstance(threshold_count, bool) or not isinstance(threshold_count, Integral):
        raise InvalidDomainError(f"threshold_count must be an integer, got {threshold_count!r}")
    if threshold_count < 1:
        raise InvalidDomainError(f"threshold_count must be >= 1, got {threshold_count!r}")
    threshold_count = int(threshold_count)

    width = (domain_max - domain_min) / threshold_count
    values = np.asarray(sample, dtype=float)
    in_domain = values[(values >= domain_min) & (values <= domain_max)]

    idx = np.floor((in_domain - domain_min) / width).astype(int)
    idx = np.clip(idx, 0, threshold_count - 1)
    counts = np.bincount(idx, minlength=threshold_count)

    edges = _bin_edges(domain_min, domain_max, threshold_count)
    bins = [
        Bin(lower_bound=edges[i], upper_bound=edges[i + 1], count=int(counts[i]))
        for i in range(threshold_count)
    ]
    excluded = len(values) - len(in_domain)
    if excluded:
        logger.debug("excluded %d of %d values outside domain [%s, %s]", excluded, len(values), domain_min, domain_max)
    return Histogram(domain=(domain_min, domain_max), bins=bins)


def data_domain(*samples: Sequence[float], zero_based: bool = False) -> tuple[float, float]:
    """Return [min, max] over all samples.

    With zero_based the range is widened to include 0 (the histogram chart's
    axis starts at zero); it is never narrowed, so no value falls outside.

    Raises:
        EmptyInputError: If no samples are given or any sample is empty.
    """
    if not samples:
        raise EmptyInputError("no samples given")
    lows: list[float] = []
    highs: list[float] = []
    for s in samples:
        if len(s) == 0:
            raise EmptyInputError("cannot take the domain of an empty sample")
        lows.append(float(min(s)))
        highs.append(float(max(s)))
    lo, hi = min(lows), max(highs)
    if zero_based:
        return (min(0.0, lo), max(0.0, hi))
    return (lo, hi)


def compute_sample_histogram(
    sample: Sequence[float],
    threshold_count: Optional[int] = None,
    *,
    config: Optional[StatsConfig] = None,
) -> Histogram:
    """Histogram of one sample over its own data domain.

    The domain is data_domain(sample, zero_based=config.zero_based_histogram).
    A zero-width domain (every value equal, or all zeros when zero-based)
    becomes [v, v + 1] so the values land in the first bin.
    threshold_count defaults to config.histogram_bins.
    """
    cfg = config or DEFAULT_CONFIG
    lo, hi = data_domain(sample, zero_based=cfg.zero_based_histogram)
    domain = (lo, hi) if hi > lo else (lo, lo + 1.0)
    n_bins = cfg.histogram_bins if threshold_count is None else threshold_count
    return compute_histogram(sample, domain, n_bins)


def compute_grouped_histogram(
    samples: Mapping[str, Sequence[float]],
    threshold_count: Optional[int] = None,
    *,
    config: Optional[StatsConfig] = None,
) -> GroupedHistogram:
    """Histogram every group over one shared domain and bin layout.

    The shared domain is [min over all groups, max over all groups].
    threshold_count defaults to config.violin_bins.

    Raises:
        EmptyInputError: If samples is empty or any group is empty.
        InvalidDomainError: If all values are identical (zero-width domain).
    """
    cfg = config or DEFAULT_CONFIG
    if len(samples) == 0:
        raise EmptyInputError("no groups given")
    for label, s in samples.items():
        if len(s) == 0:
            raise EmptyInputError(f"group {label!r} has an empty sample")

    domain = data_domain(*samples.values())
    n_bins = cfg.violin_bins if threshold_count is None else threshold_count
    logger.debug("grouped histogram: %d groups, domain=%s, bins=%s", len(samples), domain, n_bins)
    return {label: compute_histogram(s, domain, n_bins) for label, s in samples.items()}


def max_bin_count(grouped: Mapping[str, Histogram]) -> int:
    """Largest bin count across all groups (0 for no bins)."""
    return max((b.count for h in grouped.values() for b in h.bins), default=0)


def violin_widths(grouped: Mapping[str, Histogram]) -> dict[str, list[float]]:
    """Per-group bin half-widths in [0, 1], scaled by the shared max_bin_count."""
    peak = max_bin_count(grouped)
    if peak == 0:
        return {label: [0.0] * len(h.bins) for label, h in grouped.items()}
    return {label: [b.count / peak for b in h.bins] for label, h in grouped.items()}
