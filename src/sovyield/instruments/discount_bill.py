"""Treasury-bill pricing: zero-coupon instruments sold at a discount."""

from __future__ import annotations

from ..core.types import BillPricing
from ._checks import require_months, require_non_negative, require_positive

__all__ = ["price_discount_bill"]


def price_discount_bill(
    face_value: float,
    annual_rate_pct: float,
    tenor_months: int,
) -> BillPricing:
    """Price a discount bill with simple-interest discounting.

    ``discount_rate = annual_rate / 100 × tenor / 12`` and
    ``price = face_value / (1 + discount_rate)``; the annualised return is
    the simple return scaled to twelve months.

    Args:
        face_value: Amount received at maturity.
        annual_rate_pct: Annual rate in percent.
        tenor_months: Months until the bill matures.

    Returns:
        :class:`BillPricing` with purchase price, net return and annualised
        return in percent.

    Raises:
        InvalidInputError: On a non-positive face value or tenor, or a
            negative rate.
    """
    face_value = require_positive("face_value", face_value)
    annual_rate_pct = require_non_negative("annual_rate_pct", annual_rate_pct)
    tenor_months = require_months("tenor_months", tenor_months)

    discount_rate = annual_rate_pct / 100 * (tenor_months / 12)
    purchase_price = face_value / (1 + discount_rate)
    net_return = face_value - purchase_price
    annualized = (net_return / purchase_price) * (12 / tenor_months) * 100
    return BillPricing(
        purchase_price=purchase_price,
        net_return=net_return,
        annualized_return_pct=annualized,
    )
