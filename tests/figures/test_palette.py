"""Tests for pure color assignment."""

from __future__ import annotations

from chartstats.figures.palette import DEFAULT_COLORS, assign_colors, color_for_index


def test_color_for_index_cycles() -> None:
    assert [color_for_index(i) for i in range(7)] == [
        "Red", "Green", "Blue", "Purple", "Orange", "Red", "Green",
    ]


def test_color_for_index_custom_palette() -> None:
    assert color_for_index(3, ["#000", "#fff"]) == "#fff"


def test_assign_colors_is_repeatable() -> None:
    """Same labels give the same colors on every call (no shared counter)."""
    first = assign_colors(["a", "b", "c"])
    second = assign_colors(["a", "b", "c"])
    assert first == second == {"a": "Red", "b": "Green", "c": "Blue"}


def test_assign_colors_overrides() -> None:
    colors = assign_colors(["a", "b"], overrides={"b": "Black"})
    assert colors == {"a": DEFAULT_COLORS[0], "b": "Black"}
