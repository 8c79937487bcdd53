"""Pricing components: discount bills, cash-flow valuation, face-value
solving, coupon income and implied yield."""

from .cash_flows import cash_flow_schedule, present_value
from .coupon_income import accrue_coupon_income, annual_coupon, net_annual_coupon
from .discount_bill import price_discount_bill
from .face_value import implied_face_value, solve_face_value
from .implied_yield import implied_yield_to_maturity

__all__ = [
    "accrue_coupon_income",
    "annual_coupon",
    "cash_flow_schedule",
    "implied_face_value",
    "implied_yield_to_maturity",
    "net_annual_coupon",
    "present_value",
    "price_discount_bill",
    "solve_face_value",
]
