"""Box summary builder: quartiles, Tukey fences, whiskers and outliers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from chartstats.config import DEFAULT_CONFIG, StatsConfig
from chartstats.errors import EmptyInputError
from chartstats.stats.quantile import quantile
from chartstats.stats.sample import ChartDataset, Sample, samples_by_label
from chartstats.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BoxSummary:
    """Five-number summary plus outliers for one sample.

    lower_fence/upper_fence are the unclamped Tukey fences
    (q1 - k*iqr, q3 + k*iqr). Whiskers stop at the most extreme sample value
    inside the fences (never inside the box), so they never extend past the
    observed data.
    """
    q1: float
    median: float
    q3: float
    lower_whisker: float
    upper_whisker: float
    outliers: list[float] = field(default_factory=list)
    lower_fence: float = 0.0
    upper_fence: float = 0.0

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (outliers copied)."""
        return {
            "q1": self.q1,
            "median": self.median,
            "q3": self.q3,
            "iqr": self.iqr,
            "lower_whisker": self.lower_whisker,
            "upper_whisker": self.upper_whisker,
            "lower_fence": self.lower_fence,
            "upper_fence": self.upper_fence,
            "outliers": list(self.outliers),
        }


def build_box_summary(sample: Sample, config: Optional[StatsConfig] = None) -> BoxSummary:
    """Compute the box summary of a sorted sample.

    Outliers are values strictly outside the unclamped fences, in sample
    order with duplicates kept. When iqr == 0 the fences collapse onto q1/q3
    and every value different from them is an outlier.

    Raises:
        EmptyInputError: If sample is empty.
    """
    cfg = config or DEFAULT_CONFIG
    if len(sample) == 0:
        raise EmptyInputError("cannot summarize an empty sample")

    q1 = quantile(sample, 0.25)
    median = quantile(sample, 0.5)
    q3 = quantile(sample, 0.75)
    iqr = q3 - q1

    lower_fence = q1 - cfg.whisker_factor * iqr
    upper_fence = q3 + cfg.whisker_factor * iqr

    inside = [v for v in sample if lower_fence <= v <= upper_fence]
    outliers = [float(v) for v in sample if v < lower_fence or v > upper_fence]

    # the fences bracket [q1, q3]; when no sample value falls in [lower_fence, q1]
    # the whisker stops at the box edge
    lower_whisker = min(float(inside[0]), q1) if inside else q1
    upper_whisker = max(float(inside[-1]), q3) if inside else q3

    logger.debug(
        "box summary n=%d q1=%s median=%s q3=%s outliers=%d",
        len(sample), q1, median, q3, len(outliers),
    )
    return BoxSummary(
        q1=q1,
        median=median,
        q3=q3,
        lower_whisker=lower_whisker,
        upper_whisker=upper_whisker,
        outliers=outliers,
        lower_fence=lower_fence,
        upper_fence=upper_fence,
    )


def build_box_summaries(
    datasets: Sequence[ChartDataset],
    config: Optional[StatsConfig] = None,
) -> dict[str, BoxSummary]:
    """Build one BoxSummary per dataset, keyed by label (dataset order)."""
    return {
        label: build_box_summary(sample, config)
        for label, sample in samples_by_label(datasets).items()
    }
