"""Charts of projected returns and bond cash flows."""

from __future__ import annotations

import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .theme import COLOURS, label_point, themed_figure

__all__ = [
    "plot_tenor_profile",
    "plot_cash_flows",
]


def plot_tenor_profile(table: pd.DataFrame) -> tuple[Figure, Axes]:
    """Bar chart of annualised return per holding tenor.

    Args:
        table: Output of :func:`~sovyield.engine.yield_table`.

    Returns:
        Tuple of (Figure, Axes).

    Raises:
        ValueError: If *table* is empty.
    """
    if table.empty:
        msg = "Cannot plot an empty yield table"
        raise ValueError(msg)

    tenors = table.index.to_numpy()
    returns = table["annualized_return_pct"].to_numpy(dtype=float)
    colours = [COLOURS["gain"] if r >= 0 else COLOURS["loss"] for r in returns]

    fig, ax = themed_figure()
    positions = np.arange(len(tenors))
    ax.bar(positions, returns, color=colours, width=0.6)
    for x, r in zip(positions, returns):
        label_point(ax, x, r, f"{r:.2f}%")
    ax.set_xticks(positions)
    ax.set_xticklabels([f"{t}m" for t in tenors])
    ax.set_xlabel("Holding tenor")
    ax.set_ylabel("Annualised return (%)")
    ax.set_title("Projected annualised return by tenor", loc="left")
    return fig, ax


def plot_cash_flows(schedule: pd.DataFrame) -> tuple[Figure, Axes]:
    """Stacked bars of coupon and principal with their present values.

    Args:
        schedule: Output of :func:`~sovyield.instruments.cash_flow_schedule`.

    Returns:
        Tuple of (Figure, Axes).
    """
    fig, ax = themed_figure()
    times = schedule["time"].to_numpy(dtype=float)
    ax.bar(times, schedule["coupon"], width=0.5, color=COLOURS["coupon"])
    ax.bar(
        times, schedule["principal"], width=0.5,
        bottom=schedule["coupon"], color=COLOURS["principal"],
    )
    ax.plot(times, schedule["present_value"], "o-", color=COLOURS["text"], markersize=3)

    if len(times):
        last = len(times) - 1
        label_point(ax, times[last], schedule["present_value"].iloc[last], "PV", ha="left")
    ax.set_xlabel("Years")
    ax.set_ylabel("Cash flow")
    ax.set_title("Remaining cash flows and present values", loc="left")
    return fig, ax
