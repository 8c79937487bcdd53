"""Yield to maturity implied by a bond's price."""

from __future__ import annotations

import logging

from scipy.optimize import brentq

from ..core.errors import NonConvergenceError
from ._checks import require_non_negative, require_positive
from .cash_flows import present_value

__all__ = ["implied_yield_to_maturity"]

logger = logging.getLogger(__name__)

_LOWER_PCT = 1e-9
_UPPER_PCT = 100.0
_MAX_UPPER_PCT = 1e6


def implied_yield_to_maturity(
    face_value: float,
    coupon_rate_pct: float,
    price: float,
    years: float,
    tol: float = 1e-10,
) -> float:
    """Solve ``present_value(face, coupon, y, years) == price`` for ``y``.

    Present value falls monotonically as the yield rises, so the root is
    bracketed between a near-zero yield and an upper bound that is doubled
    until it prices below *price*, then refined with Brent's method.

    Args:
        face_value: Par value repaid at maturity.
        coupon_rate_pct: Annual coupon rate in percent.
        price: Observed price.
        years: Years to maturity.
        tol: Absolute tolerance on the yield, in percent.

    Returns:
        Yield to maturity in percent.

    Raises:
        NonConvergenceError: If no positive yield reproduces *price*.
    """
    face_value = require_positive("face_value", face_value)
    coupon_rate_pct = require_non_negative("coupon_rate_pct", coupon_rate_pct)
    price = require_positive("price", price)
    years = require_positive("years", years)

    def pricing_error(ytm_pct: float) -> float:
        return present_value(face_value, coupon_rate_pct, ytm_pct, years) - price

    if pricing_error(_LOWER_PCT) < 0:
        msg = f"Price {price} exceeds the undiscounted cash flows; no positive yield fits"
        raise NonConvergenceError(msg)

    upper = _UPPER_PCT
    while pricing_error(upper) > 0:
        upper *= 2
        if upper > _MAX_UPPER_PCT:
            msg = f"Could not bracket a yield for price {price}"
            raise NonConvergenceError(msg)

    root, info = brentq(
        pricing_error, _LOWER_PCT, upper, xtol=tol, full_output=True, disp=False,
    )
    if not info.converged:
        msg = f"Yield solver stopped after {info.iterations} iterations: {info.flag}"
        raise NonConvergenceError(msg)
    logger.debug("Implied YTM %.6f%% after %d iterations", root, info.iterations)
    return float(root)
