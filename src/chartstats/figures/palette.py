"""Color assignment for chart series.

Colors are a pure function of a series index, so two charts built from the
same labels always agree and nothing depends on construction order.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

DEFAULT_COLORS: tuple[str, ...] = ("Red", "Green", "Blue", "Purple", "Orange")


def color_for_index(index: int, palette: Optional[Sequence[str]] = None) -> str:
    """Return the palette color for a series index, cycling past the end."""
    colors = palette or DEFAULT_COLORS
    return colors[index % len(colors)]


def assign_colors(
    labels: Iterable[str],
    palette: Optional[Sequence[str]] = None,
    overrides: Optional[dict[str, str]] = None,
) -> dict[str, str]:
    """Map each label to a color by position; overrides win for their labels."""
    overrides = overrides or {}
    return {
        label: overrides.get(label) or color_for_index(i, palette)
        for i, label in enumerate(labels)
    }
