"""After-tax coupon income over a holding period."""

from __future__ import annotations

from ._checks import require_non_negative

__all__ = [
    "annual_coupon",
    "net_annual_coupon",
    "accrue_coupon_income",
]

WITHHOLDING_TAX_RATE = 0.10


def annual_coupon(face_value: float, coupon_rate_pct: float) -> float:
    """Gross coupon paid per year."""
    face_value = require_non_negative("face_value", face_value)
    coupon_rate_pct = require_non_negative("coupon_rate_pct", coupon_rate_pct)
    return face_value * coupon_rate_pct / 100


def net_annual_coupon(
    face_value: float,
    coupon_rate_pct: float,
    withholding_tax_rate: float = WITHHOLDING_TAX_RATE,
) -> float:
    """Coupon per year after withholding tax."""
    withholding_tax_rate = require_non_negative("withholding_tax_rate", withholding_tax_rate)
    return annual_coupon(face_value, coupon_rate_pct) * (1 - withholding_tax_rate)


def accrue_coupon_income(
    face_value: float,
    coupon_rate_pct: float,
    holding_years: float,
    withholding_tax_rate: float = WITHHOLDING_TAX_RATE,
) -> float:
    """Net coupon income accrued pro rata over *holding_years*.

    Args:
        face_value: Par value the coupon is paid on.
        coupon_rate_pct: Annual coupon rate in percent.
        holding_years: Holding period in years, may be fractional.
        withholding_tax_rate: Withholding as a fraction of the coupon.

    Returns:
        ``net_annual_coupon × holding_years``.
    """
    holding_years = require_non_negative("holding_years", holding_years)
    return net_annual_coupon(face_value, coupon_rate_pct, withholding_tax_rate) * holding_years
