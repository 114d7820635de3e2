"""Sample preparation: observations -> sorted numeric sample.

A sample is a plain list of floats sorted ascending. Every statistic in
chartstats.stats assumes its input was produced here (or is otherwise sorted).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Hashable, Iterable, Optional, Sequence

from chartstats.errors import EmptyInputError
from chartstats.utils.logging import get_logger

logger = get_logger(__name__)

Sample = list[float]


@dataclass(frozen=True)
class Observation:
    """One (x, y) data point. x is a category or ordinal, y is numeric."""
    x: Hashable
    y: float


@dataclass
class ChartDataset:
    """A labeled series of observations, as supplied by a chart.

    title defaults to label. color is left to the rendering side
    (see chartstats.figures.palette.assign_colors).
    """
    label: str
    data: list[Observation] = field(default_factory=list)
    unit: str = ""
    title: Optional[str] = None
    color: Optional[str] = None

    def __post_init__(self) -> None:
        if self.title is None:
            self.title = self.label

    @classmethod
    def from_pairs(cls, label: str, pairs: Iterable[tuple[Any, float]], **kwargs: Any) -> "ChartDataset":
        """Build a dataset from raw (x, y) tuples."""
        return cls(label=label, data=[Observation(x, y) for x, y in pairs], **kwargs)


def _as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"observation y must be a real number, got {value!r}")
    f = float(value)
    if not math.isfinite(f):
        raise ValueError(f"observation y must be finite, got {f!r}")
    return f


def prepare(observations: Sequence[Observation]) -> Sample:
    """Extract y values in input order and sort them ascending.

    Raises:
        EmptyInputError: If observations is empty.
        ValueError: If a y value is not a real number or is NaN or infinite.
    """
    if len(observations) == 0:
        raise EmptyInputError("cannot prepare a sample from no observations")
    return sorted(_as_number(o.y) for o in observations)


def samples_by_label(datasets: Sequence[ChartDataset]) -> dict[str, Sample]:
    """Prepare one sample per dataset, keyed by dataset label.

    Raises:
        EmptyInputError: If datasets is empty or any dataset has no observations.
    """
    if len(datasets) == 0:
        raise EmptyInputError("no datasets given")
    samples: dict[str, Sample] = {}
    for ds in datasets:
        if len(ds.data) == 0:
            raise EmptyInputError(f"dataset {ds.label!r} has no observations")
        if ds.label in samples:
            logger.warning("duplicate dataset label %r; later dataset replaces earlier", ds.label)
        samples[ds.label] = prepare(ds.data)
    return samples
