"""Core types and errors shared by every sovyield component."""

from .errors import (
    DomainInconsistencyError,
    InvalidInputError,
    NonConvergenceError,
    YieldEngineError,
)
from .types import (
    BillPricing,
    InvestmentRequest,
    SecurityTerms,
    SecurityType,
    SolverResult,
    YieldResult,
)

__all__ = [
    "BillPricing",
    "DomainInconsistencyError",
    "InvalidInputError",
    "InvestmentRequest",
    "NonConvergenceError",
    "SecurityTerms",
    "SecurityType",
    "SolverResult",
    "YieldEngineError",
    "YieldResult",
]
