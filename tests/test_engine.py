"""Tests for the yield engine entry point."""

from __future__ import annotations

import datetime as dt

import pandas as pd
import pytest

from sovyield.clock import FixedClock
from sovyield.config import DEFAULT_POLICY, PolicyConfig
from sovyield.core.errors import (
    DomainInconsistencyError,
    InvalidInputError,
    NonConvergenceError,
)
from sovyield.core.types import InvestmentRequest, SecurityTerms, SecurityType, YieldResult
from sovyield.engine import YieldEngine, annualised_return_pct, compute_yield, yield_table
from sovyield.instruments.cash_flows import present_value


@pytest.fixture()
def bond_terms() -> SecurityTerms:
    """20-year coupon bond with an explicit 17.2% yield, held for two years."""
    return SecurityTerms(
        security_type=SecurityType.COUPON_BOND,
        coupon_rate_pct=16.5,
        tenor_months=24,
        yield_to_maturity_pct=17.2,
        maturity_years=20,
    )


@pytest.fixture()
def bill_terms() -> SecurityTerms:
    return SecurityTerms(
        security_type=SecurityType.DISCOUNT_BILL,
        coupon_rate_pct=10.2,
        tenor_months=3,
    )


class TestDiscountBill:

    def test_bill_result(self, bill_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(1_000_000), bill_terms)
        assert isinstance(result, YieldResult)
        assert result.security_type is SecurityType.DISCOUNT_BILL
        assert result.total_proceeds == 1_000_000
        assert result.purchase_price == pytest.approx(1_000_000 / 1.0255)
        assert result.net_return == pytest.approx(result.total_proceeds - result.purchase_price)
        assert result.annualized_return_pct == pytest.approx(10.2)

    def test_bond_only_fields_absent(self, bill_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(1_000_000), bill_terms)
        assert result.implied_face_value is None
        assert result.annual_coupon is None
        assert result.net_annual_coupon_after_tax is None
        assert result.total_coupon_income is None
        assert result.exit_price is None
        assert result.holding_period_return_pct is None

    def test_ytm_override_ignored(self, bill_terms: SecurityTerms) -> None:
        terms = SecurityTerms(SecurityType.DISCOUNT_BILL, 10.2, 3, yield_to_maturity_pct=30.0)
        assert compute_yield(InvestmentRequest(1_000_000), terms).purchase_price == pytest.approx(
            compute_yield(InvestmentRequest(1_000_000), bill_terms).purchase_price
        )

    def test_tenor_past_bill_maturity(self) -> None:
        terms = SecurityTerms(SecurityType.DISCOUNT_BILL, 12.8, 6, maturity_years=0.25)
        with pytest.raises(DomainInconsistencyError):
            compute_yield(InvestmentRequest(1_000_000), terms)

    def test_91_day_bill_offers_3_months(self) -> None:
        terms = SecurityTerms(
            SecurityType.DISCOUNT_BILL, 10.2, 3, maturity_date=dt.date(2024, 6, 30),
        )
        result = compute_yield(
            InvestmentRequest(1_000_000), terms, clock=FixedClock(dt.date(2024, 4, 1)),
        )
        assert result.maturity_years == pytest.approx(90 / 365)
        assert result.total_proceeds == 1_000_000


class TestCouponBond:

    def test_solver_round_trip(self, bond_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(50_000), bond_terms)
        assert result.implied_face_value is not None
        assert abs(present_value(result.implied_face_value, 16.5, 17.2, 20) - 50_000) < 1

    def test_proceeds_decomposition(self, bond_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(50_000), bond_terms)
        assert result.purchase_price == 50_000
        assert result.total_proceeds == pytest.approx(result.total_coupon_income + result.exit_price)
        assert result.net_return == pytest.approx(result.total_proceeds - 50_000)
        assert result.holding_period_return_pct == pytest.approx(result.net_return / 50_000 * 100)

    def test_coupon_fields(self, bond_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(50_000), bond_terms)
        face = result.implied_face_value
        assert result.annual_coupon == pytest.approx(face * 0.165)
        assert result.net_annual_coupon_after_tax == pytest.approx(face * 0.165 * 0.9)
        assert result.total_coupon_income == pytest.approx(face * 0.165 * 0.9 * 2)

    def test_exit_discounts_remaining_years(self, bond_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(50_000), bond_terms)
        expected = present_value(result.implied_face_value, 16.5, 17.2, 18)
        assert result.exit_price == pytest.approx(expected)

    def test_annualised_return(self, bond_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(50_000), bond_terms)
        expected = ((result.total_proceeds / 50_000) ** (1 / 2) - 1) * 100
        assert result.annualized_return_pct == pytest.approx(expected)

    def test_hold_to_maturity_exits_at_face(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 240, 17.2, maturity_years=20)
        result = compute_yield(InvestmentRequest(50_000), terms)
        assert result.exit_price == result.implied_face_value
        assert result.total_proceeds == pytest.approx(
            result.implied_face_value * (1 + 0.165 * 0.9 * 20)
        )

    def test_default_ytm_scales_coupon(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 24)
        assert compute_yield(InvestmentRequest(50_000), terms).yield_to_maturity_pct == pytest.approx(24.75)

    def test_default_ytm_floor(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 10.0, 24)
        assert compute_yield(InvestmentRequest(50_000), terms).yield_to_maturity_pct == 17.0

    def test_default_maturity(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 24, 17.2)
        assert compute_yield(InvestmentRequest(50_000), terms).maturity_years == 20

    def test_maturity_from_date(self) -> None:
        terms = SecurityTerms(
            SecurityType.COUPON_BOND, 16.5, 24, 17.2, maturity_date=dt.date(2034, 12, 15),
        )
        clock = FixedClock(dt.date(2024, 12, 15))
        result = compute_yield(InvestmentRequest(50_000), terms, clock=clock)
        assert result.maturity_years == pytest.approx(3652 / 365)

    def test_matured_bond_rejected(self) -> None:
        terms = SecurityTerms(
            SecurityType.COUPON_BOND, 16.5, 12, 17.2, maturity_date=dt.date(2024, 1, 1),
        )
        with pytest.raises(DomainInconsistencyError):
            compute_yield(InvestmentRequest(50_000), terms, clock=FixedClock(dt.date(2024, 6, 1)))

    def test_tenor_past_maturity(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 252, 17.2, maturity_years=20)
        with pytest.raises(DomainInconsistencyError):
            compute_yield(InvestmentRequest(50_000), terms)

    def test_tenor_just_past_fractional_maturity(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 240, 17.2, maturity_years=19.95)
        with pytest.raises(DomainInconsistencyError):
            compute_yield(InvestmentRequest(50_000), terms)

    def test_matured_by_date_within_last_month(self) -> None:
        # 20 days left: a 1-month bond hold runs past maturity.
        terms = SecurityTerms(
            SecurityType.COUPON_BOND, 16.5, 1, 17.2, maturity_date=dt.date(2024, 6, 21),
        )
        with pytest.raises(DomainInconsistencyError):
            compute_yield(InvestmentRequest(50_000), terms, clock=FixedClock(dt.date(2024, 6, 1)))

    def test_non_convergence_surfaces(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 12, 1e-12, maturity_years=20)
        with pytest.raises(NonConvergenceError):
            compute_yield(InvestmentRequest(1e308), terms)

    def test_store_type_string(self) -> None:
        terms = SecurityTerms("government_bond", 16.5, 24, 17.2)
        result = compute_yield(InvestmentRequest(50_000), terms)
        assert result.security_type is SecurityType.COUPON_BOND


class TestPolicy:

    def test_tax_free_policy(self, bond_terms: SecurityTerms) -> None:
        config = DEFAULT_POLICY.with_overrides(withholding_tax_rate=0.0)
        result = compute_yield(InvestmentRequest(50_000), bond_terms, config=config)
        assert result.net_annual_coupon_after_tax == pytest.approx(result.annual_coupon)

    def test_custom_floor(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 10.0, 24)
        config = PolicyConfig(ytm_floor_pct=20.0)
        assert compute_yield(InvestmentRequest(50_000), terms, config=config).yield_to_maturity_pct == 20.0

    def test_custom_default_maturity(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 15.2, 24, 17.2)
        config = PolicyConfig(default_maturity_years=5)
        assert compute_yield(InvestmentRequest(50_000), terms, config=config).maturity_years == 5

    @pytest.mark.parametrize(
        "field, value",
        [
            ("withholding_tax_rate", 1.5),
            ("ytm_floor_pct", 0.0),
            ("default_maturity_years", -1.0),
            ("solver_tolerance", 0.0),
            ("solver_max_iterations", 0),
        ],
    )
    def test_invalid_policy(self, field: str, value: float) -> None:
        with pytest.raises(InvalidInputError):
            PolicyConfig(**{field: value})


class TestValidation:

    @pytest.mark.parametrize("amount", [0, -50_000, float("nan")])
    def test_non_positive_amount(self, bond_terms: SecurityTerms, amount: float) -> None:
        with pytest.raises(InvalidInputError):
            compute_yield(InvestmentRequest(amount), bond_terms)

    @pytest.mark.parametrize("tenor", [0, -12, 1.5])
    def test_bad_tenor(self, tenor: float) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, tenor, 17.2)
        with pytest.raises(InvalidInputError):
            compute_yield(InvestmentRequest(50_000), terms)

    def test_non_positive_ytm_override(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 16.5, 24, 0.0)
        with pytest.raises(InvalidInputError):
            compute_yield(InvestmentRequest(50_000), terms)

    def test_unknown_type(self) -> None:
        terms = SecurityTerms("equity", 16.5, 24)
        with pytest.raises(InvalidInputError):
            compute_yield(InvestmentRequest(50_000), terms)


class TestDeterminism:

    def test_identical_calls_identical_results(self) -> None:
        terms = SecurityTerms(
            SecurityType.COUPON_BOND, 15.2, 36, maturity_date=dt.date(2029, 8, 20),
        )
        clock = FixedClock(dt.date(2024, 8, 20))
        first = compute_yield(InvestmentRequest(75_000), terms, clock=clock)
        second = compute_yield(InvestmentRequest(75_000), terms, clock=clock)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_engine_matches_function(self, bond_terms: SecurityTerms) -> None:
        engine = YieldEngine(clock=FixedClock(dt.date(2024, 1, 1)))
        assert engine.compute(InvestmentRequest(50_000), bond_terms) == compute_yield(
            InvestmentRequest(50_000), bond_terms,
        )


class TestResult:

    def test_to_dict(self, bond_terms: SecurityTerms) -> None:
        data = compute_yield(InvestmentRequest(50_000), bond_terms).to_dict()
        assert data["security_type"] == "government_bond"
        assert data["purchase_price"] == 50_000

    def test_projected_returns(self, bond_terms: SecurityTerms) -> None:
        result = compute_yield(InvestmentRequest(50_000), bond_terms)
        assert result.projected_returns == result.total_proceeds


def test_annualised_return_pct() -> None:
    assert annualised_return_pct(121, 100, 2) == pytest.approx(10.0)
    assert annualised_return_pct(110, 100, 0) == 0.0


class TestYieldTable:

    def test_skips_tenors_past_maturity(self) -> None:
        terms = SecurityTerms(SecurityType.COUPON_BOND, 15.2, 12, 17.2, maturity_years=5)
        table = yield_table(InvestmentRequest(50_000), terms)
        assert isinstance(table, pd.DataFrame)
        assert list(table.index) == [12, 24, 36, 60]
        assert table.index.name == "tenor_months"
        assert "annualized_return_pct" in table.columns

    def test_bill_tenors(self, bill_terms: SecurityTerms) -> None:
        table = yield_table(InvestmentRequest(1_000_000), bill_terms)
        assert list(table.index) == [3, 6, 12]
        assert (table["total_proceeds"] == 1_000_000).all()

    def test_explicit_tenors(self, bond_terms: SecurityTerms) -> None:
        table = YieldEngine().table(InvestmentRequest(50_000), bond_terms, tenors=[24, 60])
        assert list(table.index) == [24, 60]
        assert table.loc[24, "total_proceeds"] == pytest.approx(
            compute_yield(InvestmentRequest(50_000), bond_terms).total_proceeds
        )
