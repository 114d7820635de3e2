"""Plotly figure dicts and color assignment for chartstats summaries."""

from chartstats.figures.palette import DEFAULT_COLORS, assign_colors, color_for_index
from chartstats.figures.traces import box_figure, histogram_figure, violin_figure

__all__ = [
    "DEFAULT_COLORS",
    "assign_colors",
    "box_figure",
    "color_for_index",
    "histogram_figure",
    "violin_figure",
]
