#!/usr/bin/env python3
"""Yield calculator walkthrough: a 91-day bill and a 10-year bond.

Prints projected returns for every offered tenor and saves two charts
to docs/images/.
"""
from __future__ import annotations

import datetime as dt
import os
import sys

import matplotlib

matplotlib.use("Agg")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from sovyield import FixedClock, InvestmentRequest, compute_yield, terms_from_record, yield_table
from sovyield.formatting import format_currency, format_percentage
from sovyield.instruments import cash_flow_schedule
from sovyield.viz import plot_cash_flows, plot_tenor_profile

OUT = os.path.join(os.path.dirname(__file__), "..", "docs", "images")
os.makedirs(OUT, exist_ok=True)

clock = FixedClock(dt.date(2024, 4, 1))

bill = {
    "type": "treasury_bill",
    "interestRate": 10.2,
    "maturityDate": "2024-06-30",
    "duration": 3,
}
bond = {
    "type": "government_bond",
    "interestRate": 16.5,
    "maturityDate": "2034-12-15",
    "duration": 120,
}

# --- Treasury bill ---
result = compute_yield(InvestmentRequest(1_000_000), terms_from_record(bill), clock=clock)
print("91-Day Treasury Bill")
print(f"  Purchase price:   {format_currency(result.purchase_price)}")
print(f"  Paid at maturity: {format_currency(result.total_proceeds)}")
print(f"  Net profit:       {format_currency(result.net_return)}")
print(f"  Yield (p.a.):     {format_percentage(result.annualized_return_pct)}")

# --- Government bond, every tenor the security allows ---
terms = terms_from_record(bond, 24, yield_to_maturity_pct=17.2)
table = yield_table(InvestmentRequest(50_000), terms, clock=clock)
print("\n10-Year Government Bond, UGX 50,000 at 17.2% YTM")
for tenor, row in table.iterrows():
    print(
        f"  {tenor:>3}m  proceeds {format_currency(row['total_proceeds']):>14}"
        f"  annualised {format_percentage(row['annualized_return_pct']):>7}"
    )

fig, _ = plot_tenor_profile(table)
fig.savefig(os.path.join(OUT, "tenor_profile.png"))

row = table.loc[24]
schedule = cash_flow_schedule(
    row["implied_face_value"], 16.5, 17.2, row["maturity_years"] - row["holding_years"],
)
fig, _ = plot_cash_flows(schedule)
fig.savefig(os.path.join(OUT, "exit_cash_flows.png"))
print(f"\nCharts saved to {os.path.abspath(OUT)}")
