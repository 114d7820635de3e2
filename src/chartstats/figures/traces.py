"""Plotly figures built from chartstats summaries.

Returns Plotly figure dicts (never go.Figure) so callers can hand them
straight to a front end. Only the statistics are mapped here; layout beyond
axis titles is left to the caller.
"""

from __future__ import annotations

from typing import Mapping, Optional

import plotly.graph_objects as go

from chartstats.figures.palette import assign_colors
from chartstats.stats.box_summary import BoxSummary
from chartstats.stats.histogram import Histogram, violin_widths

# Fraction of one category slot a full-width violin may occupy on each side.
VIOLIN_HALF_SPAN = 0.4


def box_figure(
    summaries: Mapping[str, BoxSummary],
    *,
    colors: Optional[Mapping[str, str]] = None,
    y_title: str = "",
) -> dict:
    """One precomputed box per label, plus an outlier marker trace per label.

    Args:
        summaries: label -> BoxSummary, in display order.
        colors: Optional label -> color overrides; others use the default palette.
        y_title: Y axis title (usually the dataset unit).
    """
    palette = assign_colors(summaries.keys(), overrides=dict(colors or {}))
    fig = go.Figure()
    for label, s in summaries.items():
        fig.add_trace(
            go.Box(
                x=[label],
                q1=[s.q1],
                median=[s.median],
                q3=[s.q3],
                lowerfence=[s.lower_whisker],
                upperfence=[s.upper_whisker],
                name=label,
                marker_color=palette[label],
                boxpoints=False,
            )
        )
        if s.outliers:
            fig.add_trace(
                go.Scatter(
                    x=[label] * len(s.outliers),
                    y=list(s.outliers),
                    mode="markers",
                    name=f"{label} outliers",
                    marker_color=palette[label],
                    showlegend=False,
                )
            )
    fig.update_layout(yaxis=dict(title=y_title), showlegend=True)
    return fig.to_dict()


def histogram_figure(
    histogram: Histogram,
    *,
    color: str = "Red",
    x_title: str = "",
) -> dict:
    """Bar per bin, positioned at the bin center with the bin's width."""
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=[b.center for b in histogram.bins],
            y=histogram.counts,
            width=[b.upper_bound - b.lower_bound for b in histogram.bins],
            customdata=[[b.lower_bound, b.upper_bound] for b in histogram.bins],
            hovertemplate="Bin: %{customdata[0]}-%{customdata[1]}<br>Count: %{y}<extra></extra>",
            marker_color=color,
        )
    )
    fig.update_layout(
        xaxis=dict(title=x_title, range=list(histogram.domain)),
        yaxis=dict(title="Count"),
        bargap=0,
        showlegend=False,
    )
    return fig.to_dict()


def violin_figure(
    grouped: Mapping[str, Histogram],
    *,
    colors: Optional[Mapping[str, str]] = None,
    y_title: str = "",
) -> dict:
    """Mirrored, filled outline per group from a shared-edge grouped histogram.

    Group i is centered at x = i; its half-width at each bin center is the
    bin's count relative to the largest count in any group.
    """
    palette = assign_colors(grouped.keys(), overrides=dict(colors or {}))
    widths = violin_widths(grouped)
    fig = go.Figure()
    for i, (label, hist) in enumerate(grouped.items()):
        centers = [b.center for b in hist.bins]
        half = [w * VIOLIN_HALF_SPAN for w in widths[label]]
        xs = [i + h for h in half] + [i - h for h in reversed(half)]
        ys = centers + list(reversed(centers))
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                fill="toself",
                name=label,
                line=dict(color=palette[label], shape="spline"),
            )
        )
    fig.update_layout(
        xaxis=dict(
            tickmode="array",
            tickvals=list(range(len(grouped))),
            ticktext=list(grouped.keys()),
        ),
        yaxis=dict(title=y_title),
    )
    return fig.to_dict()
