"""
pandas bridge for chartstats — samples and summary tables from dataframes.

Lets a host application holding tidy data (one row per observation) feed
chartstats directly:

  1. samples_from_frame() groups ycol by group_col into sorted samples.
  2. box_summary_table() builds one box-summary row per group.
  3. histogram_table() flattens a grouped histogram into a long table.

All functions return new objects; the input dataframe is never modified.
"""

from __future__ import annotations

from typing import Mapping, Optional

import numpy as np
import pandas as pd

from chartstats.config import StatsConfig
from chartstats.stats.box_summary import build_box_summary
from chartstats.stats.histogram import Histogram
from chartstats.stats.sample import Sample

# Stats columns for the box summary table.
BOX_COLUMNS = [
    "count",
    "q1",
    "median",
    "q3",
    "iqr",
    "lower_whisker",
    "upper_whisker",
    "n_outliers",
]

HISTOGRAM_COLUMNS = ["group", "bin", "lower_bound", "upper_bound", "count"]


# -----------------------------------------------------------------------------
# Step 1: Samples per group
# -----------------------------------------------------------------------------


def samples_from_frame(
    df: pd.DataFrame,
    group_col: str,
    ycol: str,
) -> dict[str, Sample]:
    """
    Group ycol by group_col and return label -> sorted sample.

    ycol is coerced to numeric (errors become NaN); NaN and infinite values
    are dropped, as are rows with no group. Group labels are compared as strings and
    returned in sorted order. Groups left with no values are omitted.

    Raises:
        ValueError: If group_col or ycol is not a column of df.
    """
    for col in (group_col, ycol):
        if col not in df.columns:
            raise ValueError(f"df must contain column {col!r}")

    tmp = pd.DataFrame({
        "group": df[group_col],
        "y": pd.to_numeric(df[ycol], errors="coerce").replace([np.inf, -np.inf], np.nan),
    }).dropna(subset=["group", "y"])
    tmp = tmp.assign(group=tmp["group"].astype(str))

    result: dict[str, Sample] = {}
    for key, sub in tmp.groupby("group", sort=True):
        result[str(key)] = sorted(sub["y"].astype(float).tolist())
    return result


# -----------------------------------------------------------------------------
# Step 2: Box summary table
# -----------------------------------------------------------------------------


def box_summary_table(
    df: pd.DataFrame,
    group_col: str,
    ycol: str,
    *,
    config: Optional[StatsConfig] = None,
) -> pd.DataFrame:
    """
    Compute one box-summary row per group.

    Returns:
        DataFrame with group_col first, then BOX_COLUMNS. Empty (with those
        columns) when no group has numeric values.
    """
    samples = samples_from_frame(df, group_col, ycol)
    if not samples:
        return pd.DataFrame(columns=[group_col] + BOX_COLUMNS)

    rows = []
    for label, sample in samples.items():
        s = build_box_summary(sample, config)
        rows.append({
            group_col: label,
            "count": len(sample),
            "q1": s.q1,
            "median": s.median,
            "q3": s.q3,
            "iqr": s.iqr,
            "lower_whisker": s.lower_whisker,
            "upper_whisker": s.upper_whisker,
            "n_outliers": len(s.outliers),
        })
    return pd.DataFrame(rows, columns=[group_col] + BOX_COLUMNS)


# -----------------------------------------------------------------------------
# Step 3: Long histogram table
# -----------------------------------------------------------------------------


def histogram_table(grouped: Mapping[str, Histogram]) -> pd.DataFrame:
    """
    Flatten label -> Histogram into rows of (group, bin, lower_bound, upper_bound, count).
    """
    rows = [
        {
            "group": label,
            "bin": i,
            "lower_bound": b.lower_bound,
            "upper_bound": b.upper_bound,
            "count": b.count,
        }
        for label, hist in grouped.items()
        for i, b in enumerate(hist.bins)
    ]
    return pd.DataFrame(rows, columns=HISTOGRAM_COLUMNS)
