"""Present value of an annual-coupon bond's remaining cash flows.

Coupons fall on whole years ``1 .. floor(years)`` and the redemption on
``years`` itself, so a fractional horizon keeps every full coupon still
to come and discounts the face value over the exact fraction.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from ._checks import require_non_negative, require_positive

__all__ = [
    "present_value",
    "cash_flow_schedule",
]


def _coupon_times(years: float) -> np.ndarray:
    return np.arange(1, math.floor(years) + 1, dtype=float)


def present_value(
    face_value: float,
    coupon_rate_pct: float,
    discount_rate_pct: float,
    years: float,
) -> float:
    """Price a bond by discounting its coupons and redemption.

    Args:
        face_value: Par value repaid at maturity.
        coupon_rate_pct: Annual coupon rate in percent.
        discount_rate_pct: Annual discount rate (yield to maturity) in percent.
        years: Years until maturity; ``0`` means the bond is redeeming now.

    Returns:
        Present value. Equals *face_value* when *years* is zero.
    """
    face_value = require_non_negative("face_value", face_value)
    coupon_rate_pct = require_non_negative("coupon_rate_pct", coupon_rate_pct)
    discount_rate_pct = require_positive("discount_rate_pct", discount_rate_pct)
    years = require_non_negative("years", years)

    return _discounted(face_value, coupon_rate_pct, discount_rate_pct, years)


def _discounted(
    face_value: float,
    coupon_rate_pct: float,
    discount_rate_pct: float,
    years: float,
) -> float:
    # Unchecked core of present_value; may return inf or nan on overflow.
    if years == 0:
        return face_value
    rate = discount_rate_pct / 100
    coupon = face_value * coupon_rate_pct / 100
    times = _coupon_times(years)
    pv_coupons = float(np.sum(coupon / (1 + rate) ** times))
    pv_face = float(face_value / np.power(1 + rate, years))
    return pv_coupons + pv_face


def cash_flow_schedule(
    face_value: float,
    coupon_rate_pct: float,
    discount_rate_pct: float,
    years: float,
) -> pd.DataFrame:
    """Tabulate the cash flows behind :func:`present_value`.

    One row per coupon date plus the redemption (merged into the last
    coupon when maturity falls on a whole year).

    Returns:
        DataFrame with columns ``time``, ``coupon``, ``principal``,
        ``cash_flow``, ``discount_factor`` and ``present_value``. The
        ``present_value`` column sums to :func:`present_value`.
    """
    face_value = require_non_negative("face_value", face_value)
    coupon_rate_pct = require_non_negative("coupon_rate_pct", coupon_rate_pct)
    discount_rate_pct = require_positive("discount_rate_pct", discount_rate_pct)
    years = require_non_negative("years", years)

    rate = discount_rate_pct / 100
    coupon = face_value * coupon_rate_pct / 100
    times = _coupon_times(years)

    coupons = np.full(len(times), coupon)
    if len(times) == 0 or times[-1] != years:
        times = np.append(times, years)
        coupons = np.append(coupons, 0.0)
    principal = np.zeros(len(times))
    principal[-1] = face_value

    df = pd.DataFrame({"time": times, "coupon": coupons, "principal": principal})
    df["cash_flow"] = df["coupon"] + df["principal"]
    df["discount_factor"] = (1 + rate) ** (-df["time"])
    df["present_value"] = df["cash_flow"] * df["discount_factor"]
    return df
