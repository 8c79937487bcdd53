"""Matplotlib styling shared by the yield charts."""

from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

__all__ = [
    "COLOURS",
    "chart_style",
    "themed_figure",
    "label_point",
]

COLOURS: dict[str, str] = {
    "gain": "#4E79A7",
    "loss": "#E15759",
    "coupon": "#59A14F",
    "principal": "#F28E2B",
    "text": "#4E4E4E",
}

# Only the settings the bar charts depend on: y gridlines, open frame.
_STYLE = {
    "axes.grid": True,
    "axes.grid.axis": "y",
    "axes.spines.top": False,
    "axes.spines.right": False,
    "grid.color": "#E8E8E8",
}


def chart_style() -> dict[str, object]:
    """rcParams applied to every yield chart."""
    return dict(_STYLE)


def themed_figure(figsize: tuple[float, float] = (8, 4.5)) -> tuple[Figure, Axes]:
    """Single-axes figure drawn under :func:`chart_style`."""
    with plt.rc_context(chart_style()):
        fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def label_point(ax: Axes, x: float, y: float, text: str, ha: str = "center") -> None:
    """Write *text* just above the point ``(x, y)``."""
    ax.annotate(text, xy=(x, y), fontsize=9, color=COLOURS["text"], ha=ha, va="bottom")
