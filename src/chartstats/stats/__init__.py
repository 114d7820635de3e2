"""Distribution statistics for box-plot, histogram and violin charts.

Pure functions over plain data: no rendering handles go in or come out.
"""

from chartstats.stats.box_summary import BoxSummary, build_box_summaries, build_box_summary
from chartstats.stats.histogram import (
    Bin,
    GroupedHistogram,
    Histogram,
    compute_grouped_histogram,
    compute_histogram,
    compute_sample_histogram,
    data_domain,
    max_bin_count,
    violin_widths,
)
from chartstats.stats.quantile import quantile
from chartstats.stats.sample import ChartDataset, Observation, Sample, prepare, samples_by_label

__all__ = [
    "Bin",
    "BoxSummary",
    "ChartDataset",
    "GroupedHistogram",
    "Histogram",
    "Observation",
    "Sample",
    "build_box_summaries",
    "build_box_summary",
    "compute_grouped_histogram",
    "compute_histogram",
    "compute_sample_histogram",
    "data_domain",
    "max_bin_count",
    "prepare",
    "quantile",
    "samples_by_label",
    "violin_widths",
]
