"""Dataclass input and result types used across sovyield.

All structured values are frozen dataclasses: each one is created,
consumed and discarded within a single calculation call.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import asdict, dataclass
from enum import Enum

from .errors import InvalidInputError

__all__ = [
    "SecurityType",
    "SecurityTerms",
    "InvestmentRequest",
    "BillPricing",
    "SolverResult",
    "YieldResult",
]


class SecurityType(str, Enum):
    """Kind of sovereign debt instrument.

    Values match the strings used by the record store.
    """

    DISCOUNT_BILL = "treasury_bill"
    COUPON_BOND = "government_bond"

    @classmethod
    def parse(cls, value: SecurityType | str) -> SecurityType:
        """Coerce a member, a store string, or a member name into a member.

        Raises:
            InvalidInputError: If *value* names no known security type.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key == member.value or key.upper() == member.name:
                    return member
        msg = f"Unknown security type {value!r}"
        raise InvalidInputError(msg)


@dataclass(frozen=True)
class SecurityTerms:
    """Terms of the security the investor is looking at.

    Attributes:
        security_type: Discount bill or coupon bond.
        coupon_rate_pct: Annual coupon (or discount) rate in percent.
        tenor_months: Holding period requested by the investor.
        yield_to_maturity_pct: Optional YTM override in percent.
        maturity_years: Years from now to legal maturity, if already known.
        maturity_date: Legal maturity date, resolved against a clock when
            ``maturity_years`` is not given.
    """

    security_type: SecurityType
    coupon_rate_pct: float
    tenor_months: int
    yield_to_maturity_pct: float | None = None
    maturity_years: float | None = None
    maturity_date: dt.date | None = None

    @property
    def holding_years(self) -> float:
        return self.tenor_months / 12


@dataclass(frozen=True)
class InvestmentRequest:
    """Amount the investor commits.

    For a discount bill this is the face value received at maturity; for a
    coupon bond it is the market price paid today.
    """

    amount: float


@dataclass(frozen=True)
class BillPricing:
    """Discount-instrument pricing output."""

    purchase_price: float
    net_return: float
    annualized_return_pct: float

    def __repr__(self) -> str:
        return (
            f"BillPricing(price={self.purchase_price:,.2f}, "
            f"net={self.net_return:,.2f}, ann={self.annualized_return_pct:.4f}%)"
        )


@dataclass(frozen=True)
class SolverResult:
    """Outcome of the face-value fixed-point iteration.

    ``converged`` tags the variant: a not-converged result carries the last
    guess only for diagnostics and must never be used as a price input.
    """

    face_value: float
    iterations: int
    converged: bool
    residual: float

    def __repr__(self) -> str:
        status = "converged" if self.converged else "NOT converged"
        return (
            f"SolverResult(face={self.face_value:,.4f}, {status} in "
            f"{self.iterations} iterations, residual={self.residual:.3e})"
        )


@dataclass(frozen=True)
class YieldResult:
    """Normalised result of one yield calculation.

    Bond-only fields are ``None`` for discount bills.
    """

    security_type: SecurityType
    purchase_price: float
    total_proceeds: float
    net_return: float
    annualized_return_pct: float
    holding_years: float
    implied_face_value: float | None = None
    annual_coupon: float | None = None
    net_annual_coupon_after_tax: float | None = None
    total_coupon_income: float | None = None
    exit_price: float | None = None
    holding_period_return_pct: float | None = None
    yield_to_maturity_pct: float | None = None
    maturity_years: float | None = None

    @property
    def projected_returns(self) -> float:
        """Value attached to a captured lead as its projected returns."""
        return self.total_proceeds

    def to_dict(self) -> dict[str, object]:
        data = asdict(self)
        data["security_type"] = self.security_type.value
        return data

    def __repr__(self) -> str:
        return (
            f"YieldResult({self.security_type.name}, "
            f"price={self.purchase_price:,.2f}, "
            f"proceeds={self.total_proceeds:,.2f}, "
            f"ann={self.annualized_return_pct:.4f}%)"
        )
