"""Yield engine: the single entry point used by the catalogue application.

Given what the investor commits and the terms of the security, dispatch
to discount-bill pricing or to the coupon-bond pipeline (face-value
solve, after-tax coupon accrual, exit valuation) and return one
:class:`YieldResult`. Every call is pure and independent: no state is
kept between calls, and the only time dependency is the injected clock.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from collections.abc import Iterable

import pandas as pd

from .clock import Clock, FixedClock, SystemClock, years_to_maturity
from .config import DEFAULT_POLICY, PolicyConfig
from .core.errors import DomainInconsistencyError
from .core.types import InvestmentRequest, SecurityTerms, SecurityType, YieldResult
from .instruments._checks import require_months, require_non_negative, require_positive
from .instruments.cash_flows import present_value
from .instruments.coupon_income import accrue_coupon_income, annual_coupon, net_annual_coupon
from .instruments.discount_bill import price_discount_bill
from .instruments.face_value import implied_face_value
from .securities import available_tenors

__all__ = [
    "YieldEngine",
    "compute_yield",
    "annualised_return_pct",
    "yield_table",
]

logger = logging.getLogger(__name__)

_HORIZON_EPS = 1e-9


def annualised_return_pct(total_proceeds: float, amount: float, holding_years: float) -> float:
    """Compound annual return in percent; zero for a zero-length hold."""
    if holding_years <= 0:
        return 0.0
    return ((total_proceeds / amount) ** (1 / holding_years) - 1) * 100


def _explicit_maturity(
    terms: SecurityTerms,
    config: PolicyConfig,
    clock: Clock | None,
) -> float | None:
    if terms.maturity_years is not None:
        return require_positive("maturity_years", terms.maturity_years)
    if terms.maturity_date is not None:
        years = years_to_maturity(terms.maturity_date, clock, config.days_per_year)
        if years <= 0:
            msg = f"Security matured on {terms.maturity_date}; nothing left to value"
            raise DomainInconsistencyError(msg)
        return years
    return None


def _check_horizon(
    tenor_months: int,
    maturity_years: float | None,
    *,
    whole_months: bool = False,
) -> None:
    # With whole_months a partial month to maturity counts as a whole one,
    # so a 91-day bill still offers a 3-month tenor. Bonds are held for
    # exact years and must not outlive maturity.
    if maturity_years is None:
        return
    if whole_months:
        exceeded = tenor_months > math.ceil(maturity_years * 12 - _HORIZON_EPS)
    else:
        exceeded = tenor_months / 12 > maturity_years + _HORIZON_EPS
    if exceeded:
        msg = (
            f"Holding period of {tenor_months} months exceeds the "
            f"{maturity_years:.4g} years remaining to maturity"
        )
        raise DomainInconsistencyError(msg)


def _price_bill(
    amount: float,
    terms: SecurityTerms,
    holding_years: float,
    maturity_years: float | None,
) -> YieldResult:
    pricing = price_discount_bill(amount, terms.coupon_rate_pct, terms.tenor_months)
    return YieldResult(
        security_type=SecurityType.DISCOUNT_BILL,
        purchase_price=pricing.purchase_price,
        total_proceeds=amount,
        net_return=pricing.net_return,
        annualized_return_pct=pricing.annualized_return_pct,
        holding_years=holding_years,
        maturity_years=maturity_years,
    )


def _price_bond(
    amount: float,
    terms: SecurityTerms,
    holding_years: float,
    maturity_years: float,
    config: PolicyConfig,
) -> YieldResult:
    coupon_pct = terms.coupon_rate_pct
    if terms.yield_to_maturity_pct is not None:
        ytm_pct = require_positive("yield_to_maturity_pct", terms.yield_to_maturity_pct)
    else:
        ytm_pct = config.default_ytm_pct(coupon_pct)

    face = implied_face_value(
        amount,
        coupon_pct,
        ytm_pct,
        maturity_years,
        tolerance=config.solver_tolerance,
        max_iterations=config.solver_max_iterations,
    )
    tax = config.withholding_tax_rate
    coupon_income = accrue_coupon_income(face, coupon_pct, holding_years, tax)

    remaining_years = max(0.0, maturity_years - holding_years)
    if remaining_years < _HORIZON_EPS:
        remaining_years = 0.0
    exit_price = present_value(face, coupon_pct, ytm_pct, remaining_years)

    total = coupon_income + exit_price
    net = total - amount
    return YieldResult(
        security_type=SecurityType.COUPON_BOND,
        purchase_price=amount,
        total_proceeds=total,
        net_return=net,
        annualized_return_pct=annualised_return_pct(total, amount, holding_years),
        holding_years=holding_years,
        implied_face_value=face,
        annual_coupon=annual_coupon(face, coupon_pct),
        net_annual_coupon_after_tax=net_annual_coupon(face, coupon_pct, tax),
        total_coupon_income=coupon_income,
        exit_price=exit_price,
        holding_period_return_pct=net / amount * 100,
        yield_to_maturity_pct=ytm_pct,
        maturity_years=maturity_years,
    )


def compute_yield(
    request: InvestmentRequest,
    terms: SecurityTerms,
    *,
    config: PolicyConfig | None = None,
    clock: Clock | None = None,
) -> YieldResult:
    """Project purchase price, proceeds and returns for one investment.

    For a discount bill ``request.amount`` is the face value received at
    maturity. For a coupon bond it is the market price paid today: the
    implied face value is solved from it, coupons accrue net of
    withholding tax over the holding period, and the bond is valued at
    exit by discounting what remains to maturity.

    Args:
        request: Amount the investor commits.
        terms: Security terms and requested holding tenor.
        config: Policy constants; defaults to :data:`DEFAULT_POLICY`.
        clock: Clock used to resolve ``terms.maturity_date``.

    Returns:
        A fresh :class:`YieldResult`.

    Raises:
        InvalidInputError: On a non-positive amount, tenor, YTM or horizon.
        DomainInconsistencyError: If the tenor runs past maturity.
        NonConvergenceError: If the face-value solver does not converge.
    """
    config = config or DEFAULT_POLICY
    amount = require_positive("amount", request.amount)
    tenor_months = require_months("tenor_months", terms.tenor_months)
    security_type = SecurityType.parse(terms.security_type)
    coupon_pct = require_non_negative("coupon_rate_pct", terms.coupon_rate_pct)
    terms = dataclasses.replace(
        terms,
        security_type=security_type,
        coupon_rate_pct=coupon_pct,
        tenor_months=tenor_months,
    )
    holding_years = terms.holding_years
    maturity_years = _explicit_maturity(terms, config, clock)

    if security_type is SecurityType.DISCOUNT_BILL:
        _check_horizon(tenor_months, maturity_years, whole_months=True)
        logger.debug("Pricing discount bill: amount=%s tenor=%d", amount, tenor_months)
        return _price_bill(amount, terms, holding_years, maturity_years)

    if maturity_years is None:
        maturity_years = config.default_maturity_years
    _check_horizon(tenor_months, maturity_years)
    logger.debug(
        "Pricing coupon bond: amount=%s tenor=%d maturity=%.4f",
        amount, tenor_months, maturity_years,
    )
    return _price_bond(amount, terms, holding_years, maturity_years, config)


def yield_table(
    request: InvestmentRequest,
    terms: SecurityTerms,
    tenors: Iterable[int] | None = None,
    *,
    config: PolicyConfig | None = None,
    clock: Clock | None = None,
) -> pd.DataFrame:
    """Evaluate :func:`compute_yield` across several holding tenors.

    Tenors that run past maturity are skipped. All rows are priced
    against the same instant.

    Args:
        request: Amount the investor commits.
        terms: Security terms; ``tenor_months`` is overridden per row.
        tenors: Tenors in months; defaults to the tenors offered for the
            security type.
        config: Policy constants.
        clock: Clock used to resolve ``terms.maturity_date``.

    Returns:
        DataFrame indexed by ``tenor_months`` with one column per
        :class:`YieldResult` field.
    """
    if tenors is None:
        tenors = available_tenors(terms.security_type)
    clock = FixedClock((clock or SystemClock()).now())

    rows: dict[int, dict[str, object]] = {}
    for tenor in tenors:
        row_terms = dataclasses.replace(terms, tenor_months=tenor)
        try:
            result = compute_yield(request, row_terms, config=config, clock=clock)
        except DomainInconsistencyError as exc:
            logger.debug("Skipping tenor %s: %s", tenor, exc)
            continue
        rows[int(tenor)] = result.to_dict()

    table = pd.DataFrame.from_dict(rows, orient="index")
    table.index.name = "tenor_months"
    return table


class YieldEngine:
    """Engine bound to one policy and clock.

    Holds only immutable configuration, so one instance can serve
    concurrent callers.

    Example::

        engine = YieldEngine(PolicyConfig(withholding_tax_rate=0.15))
        result = engine.compute(InvestmentRequest(50_000), terms)
    """

    def __init__(self, config: PolicyConfig | None = None, clock: Clock | None = None) -> None:
        self.config = config or DEFAULT_POLICY
        self.clock = clock or SystemClock()

    def compute(self, request: InvestmentRequest, terms: SecurityTerms) -> YieldResult:
        return compute_yield(request, terms, config=self.config, clock=self.clock)

    def table(
        self,
        request: InvestmentRequest,
        terms: SecurityTerms,
        tenors: Iterable[int] | None = None,
    ) -> pd.DataFrame:
        return yield_table(request, terms, tenors, config=self.config, clock=self.clock)

    def __repr__(self) -> str:
        return f"YieldEngine({self.config!r}, clock={self.clock!r})"
