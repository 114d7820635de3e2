"""Configuration for chartstats computations.

StatsConfig holds the tunables shared by the box-summary and histogram
builders. It serializes to/from plain dicts so a host application can persist
it alongside its own chart settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

# Environment variables read by StatsConfig.from_env().
ENV_WHISKER_FACTOR = "CHARTSTATS_WHISKER_FACTOR"
ENV_HISTOGRAM_BINS = "CHARTSTATS_HISTOGRAM_BINS"
ENV_VIOLIN_BINS = "CHARTSTATS_VIOLIN_BINS"


@dataclass(frozen=True)
class StatsConfig:
    """Tunables for distribution summaries.

    Attributes:
        whisker_factor: Tukey fence multiplier applied to the IQR.
        histogram_bins: Number of equal-width bins for plain histograms.
        violin_bins: Number of equal-width bins for grouped (violin) histograms.
        zero_based_histogram: If True, plain histograms span [0, max(sample)]
            instead of [min(sample), max(sample)].
    """
    whisker_factor: float = 1.5
    histogram_bins: int = 20
    violin_bins: int = 20
    zero_based_histogram: bool = True

    def __post_init__(self) -> None:
        if self.whisker_factor < 0:
            raise ValueError(f"whisker_factor must be >= 0, got {self.whisker_factor!r}")
        if self.histogram_bins < 1:
            raise ValueError(f"histogram_bins must be >= 1, got {self.histogram_bins!r}")
        if self.violin_bins < 1:
            raise ValueError(f"violin_bins must be >= 1, got {self.violin_bins!r}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize StatsConfig to a dictionary."""
        return {
            "whisker_factor": self.whisker_factor,
            "histogram_bins": self.histogram_bins,
            "violin_bins": self.violin_bins,
            "zero_based_histogram": self.zero_based_histogram,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StatsConfig":
        """Deserialize StatsConfig from a dictionary.

        Unknown keys are ignored; missing keys take their defaults.

        Raises:
            ValueError: If a value is out of range or cannot be converted.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        if "whisker_factor" in kwargs:
            kwargs["whisker_factor"] = float(kwargs["whisker_factor"])
        for key in ("histogram_bins", "violin_bins"):
            if key in kwargs:
                kwargs[key] = int(kwargs[key])
        if "zero_based_histogram" in kwargs:
            kwargs["zero_based_histogram"] = bool(kwargs["zero_based_histogram"])
        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StatsConfig":
        """Build a StatsConfig from CHARTSTATS_* environment variables."""
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        if env.get(ENV_WHISKER_FACTOR):
            data["whisker_factor"] = env[ENV_WHISKER_FACTOR]
        if env.get(ENV_HISTOGRAM_BINS):
            data["histogram_bins"] = env[ENV_HISTOGRAM_BINS]
        if env.get(ENV_VIOLIN_BINS):
            data["violin_bins"] = env[ENV_VIOLIN_BINS]
        return cls.from_dict(data)


DEFAULT_CONFIG = StatsConfig()
