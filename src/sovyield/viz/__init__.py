"""Matplotlib charts of yield results."""

from .returns import plot_cash_flows, plot_tenor_profile
from .theme import COLOURS, chart_style, label_point, themed_figure

__all__ = [
    "COLOURS",
    "chart_style",
    "label_point",
    "plot_cash_flows",
    "plot_tenor_profile",
    "themed_figure",
]
