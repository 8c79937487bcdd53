"""Implied face value of a coupon bond from its market price.

The theoretical price is linear in face value, so rescaling the guess by
``market_price / theoretical_price`` lands on the answer almost at once.
The loop is still bounded and reports whether it actually converged.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..core.errors import NonConvergenceError
from ..core.types import SolverResult
from ._checks import require_non_negative, require_positive
from .cash_flows import _discounted

__all__ = [
    "solve_face_value",
    "implied_face_value",
]

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1.0
DEFAULT_MAX_ITERATIONS = 100


def solve_face_value(
    market_price: float,
    coupon_rate_pct: float,
    ytm_pct: float,
    years_to_maturity: float,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SolverResult:
    """Run the bounded fixed-point iteration for the face value.

    Starts from ``face = market_price`` and rescales until the theoretical
    price is within *tolerance* of *market_price*. A non-finite theoretical
    price stops the loop early as not converged.

    Args:
        market_price: Price paid today.
        coupon_rate_pct: Annual coupon rate in percent.
        ytm_pct: Yield to maturity in percent.
        years_to_maturity: Years until redemption, must be positive.
        tolerance: Acceptable absolute pricing error, in currency units.
        max_iterations: Iteration cap.

    Returns:
        A :class:`SolverResult`; check ``converged`` before using it.

    Raises:
        InvalidInputError: On non-positive price, YTM or horizon, or a
            negative coupon rate.
    """
    market_price = require_positive("market_price", market_price)
    coupon_rate_pct = require_non_negative("coupon_rate_pct", coupon_rate_pct)
    ytm_pct = require_positive("ytm_pct", ytm_pct)
    years_to_maturity = require_positive("years_to_maturity", years_to_maturity)
    tolerance = require_positive("tolerance", tolerance)

    face = market_price
    residual = math.inf
    iteration = 0
    with np.errstate(over="ignore", invalid="ignore"):
        for iteration in range(1, max_iterations + 1):
            theoretical = _discounted(face, coupon_rate_pct, ytm_pct, years_to_maturity)
            residual = abs(theoretical - market_price)
            if residual < tolerance:
                logger.debug(
                    "Face value %.4f converged in %d iterations (residual %.3e)",
                    face, iteration, residual,
                )
                return SolverResult(face, iteration, True, residual)
            if not math.isfinite(theoretical) or theoretical <= 0:
                break
            face *= market_price / theoretical

    return SolverResult(face, iteration, False, residual)


def implied_face_value(
    market_price: float,
    coupon_rate_pct: float,
    ytm_pct: float,
    years_to_maturity: float,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> float:
    """Face value whose theoretical price matches *market_price*.

    Raises:
        NonConvergenceError: If :func:`solve_face_value` did not converge.
    """
    result = solve_face_value(
        market_price,
        coupon_rate_pct,
        ytm_pct,
        years_to_maturity,
        tolerance=tolerance,
        max_iterations=max_iterations,
    )
    if not result.converged:
        logger.warning(
            "Face value solver gave up: price=%s coupon=%s%% ytm=%s%% years=%s (%r)",
            market_price, coupon_rate_pct, ytm_pct, years_to_maturity, result,
        )
        msg = (
            f"Face value did not converge within {tolerance} after "
            f"{result.iterations} iterations (residual {result.residual:.6g})"
        )
        raise NonConvergenceError(msg, result)
    return result.face_value
