"""Smoke tests for yield charts."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from sovyield.core.types import InvestmentRequest, SecurityTerms, SecurityType
from sovyield.engine import yield_table
from sovyield.instruments.cash_flows import cash_flow_schedule
from sovyield.viz import plot_cash_flows, plot_tenor_profile


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_plot_tenor_profile() -> None:
    terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 12, 17.2, maturity_years=20)
    fig, ax = plot_tenor_profile(yield_table(InvestmentRequest(50_000), terms))
    assert fig is not None
    assert len(ax.patches) == 6


def test_plot_tenor_profile_empty() -> None:
    with pytest.raises(ValueError):
        plot_tenor_profile(pd.DataFrame())


def test_plot_cash_flows() -> None:
    fig, ax = plot_cash_flows(cash_flow_schedule(64_000, 16.5, 17.2, 18.5))
    assert fig is not None


def test_themed_figure_open_frame() -> None:
    from sovyield.viz import themed_figure

    fig, ax = themed_figure()
    assert not ax.spines["top"].get_visible()
    assert not ax.spines["right"].get_visible()
    assert ax.spines["left"].get_visible()
