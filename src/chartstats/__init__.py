"""
chartstats: distribution statistics for box-plot, histogram and violin charts.

This package provides:
- Sample preparation from labeled (x, y) datasets
- Quantiles with linear interpolation, Tukey box summaries and outliers
- Equal-width histograms and shared-edge grouped histograms (violin input)
- A pandas bridge and Plotly figure dicts for rendering layers

For logging configuration in standalone scripts:
    ```python
    from chartstats.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from chartstats.config import StatsConfig
from chartstats.errors import (
    ChartStatsError,
    EmptyInputError,
    InvalidDomainError,
    InvalidQuantileError,
)
from chartstats.stats import (
    Bin,
    BoxSummary,
    ChartDataset,
    Histogram,
    Observation,
    build_box_summaries,
    build_box_summary,
    compute_grouped_histogram,
    compute_histogram,
    compute_sample_histogram,
    prepare,
    quantile,
)
from chartstats.utils.logging import configure_logging, get_logger

# NullHandler so logs don't reach the root logger's last-resort handler when
# no application has configured logging.
_logger = logging.getLogger("chartstats")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "Bin",
    "BoxSummary",
    "ChartDataset",
    "ChartStatsError",
    "EmptyInputError",
    "Histogram",
    "InvalidDomainError",
    "InvalidQuantileError",
    "Observation",
    "StatsConfig",
    "build_box_summaries",
    "build_box_summary",
    "compute_grouped_histogram",
    "compute_histogram",
    "compute_sample_histogram",
    "configure_logging",
    "get_logger",
    "prepare",
    "quantile",
]

__version__ = "0.1.0"
