"""sovyield: yield projections for sovereign bonds and treasury bills.

Prices discount bills, solves the implied face value of coupon bonds
from their market price, accrues after-tax coupon income and values
an early exit, returning one immutable result per calculation.
"""

__version__ = "0.1.0"

from .clock import FixedClock, SystemClock, days_to_maturity, years_to_maturity
from .config import DEFAULT_POLICY, PolicyConfig
from .core.errors import (
    DomainInconsistencyError,
    InvalidInputError,
    NonConvergenceError,
    YieldEngineError,
)
from .core.types import (
    BillPricing,
    InvestmentRequest,
    SecurityTerms,
    SecurityType,
    SolverResult,
    YieldResult,
)
from .engine import YieldEngine, annualised_return_pct, compute_yield, yield_table
from .instruments import (
    accrue_coupon_income,
    cash_flow_schedule,
    implied_face_value,
    implied_yield_to_maturity,
    present_value,
    price_discount_bill,
    solve_face_value,
)
from .securities import available_tenors, terms_from_record

__all__ = [
    # Engine
    "compute_yield",
    "yield_table",
    "annualised_return_pct",
    "YieldEngine",
    # Components
    "price_discount_bill",
    "solve_face_value",
    "implied_face_value",
    "present_value",
    "cash_flow_schedule",
    "accrue_coupon_income",
    "implied_yield_to_maturity",
    # Types
    "SecurityType",
    "SecurityTerms",
    "InvestmentRequest",
    "BillPricing",
    "SolverResult",
    "YieldResult",
    # Errors
    "YieldEngineError",
    "InvalidInputError",
    "NonConvergenceError",
    "DomainInconsistencyError",
    # Configuration and time
    "PolicyConfig",
    "DEFAULT_POLICY",
    "SystemClock",
    "FixedClock",
    "days_to_maturity",
    "years_to_maturity",
    # Record store
    "terms_from_record",
    "available_tenors",
]
