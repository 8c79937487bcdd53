"""Policy configuration for the yield engine.

Tax, default-yield and default-maturity figures are business policy
rather than mathematics, so they live here and are injected into every
calculation instead of being written into the formulas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

from .core.errors import InvalidInputError

__all__ = [
    "PolicyConfig",
    "DEFAULT_POLICY",
]


@dataclass(frozen=True)
class PolicyConfig:
    """Policy constants used by the engine.

    Attributes:
        withholding_tax_rate: Statutory withholding on coupon income, as a
            fraction (0.10 = 10%).
        ytm_floor_pct: Lowest default yield to maturity, in percent, applied
            when a bond has no explicit YTM.
        ytm_coupon_multiplier: Default YTM is ``coupon × multiplier`` when
            that exceeds the floor.
        default_maturity_years: Years to maturity assumed for a bond with
            neither a maturity date nor an explicit horizon.
        solver_tolerance: Face-value solver tolerance, in currency units.
        solver_max_iterations: Face-value solver iteration cap.
        days_per_year: Denominator of the years-fraction approximation.
    """

    withholding_tax_rate: float = 0.10
    ytm_floor_pct: float = 17.0
    ytm_coupon_multiplier: float = 1.5
    default_maturity_years: float = 20.0
    solver_tolerance: float = 1.0
    solver_max_iterations: int = 100
    days_per_year: int = 365

    def __post_init__(self) -> None:
        if not 0 <= self.withholding_tax_rate < 1:
            msg = f"withholding_tax_rate must be in [0, 1), got {self.withholding_tax_rate}"
            raise InvalidInputError(msg)
        if not self.ytm_floor_pct > 0:
            msg = f"ytm_floor_pct must be positive, got {self.ytm_floor_pct}"
            raise InvalidInputError(msg)
        if self.ytm_coupon_multiplier < 0:
            msg = f"ytm_coupon_multiplier must be non-negative, got {self.ytm_coupon_multiplier}"
            raise InvalidInputError(msg)
        if not (self.default_maturity_years > 0 and math.isfinite(self.default_maturity_years)):
            msg = f"default_maturity_years must be positive, got {self.default_maturity_years}"
            raise InvalidInputError(msg)
        if not self.solver_tolerance > 0:
            msg = f"solver_tolerance must be positive, got {self.solver_tolerance}"
            raise InvalidInputError(msg)
        if self.solver_max_iterations < 1:
            msg = f"solver_max_iterations must be at least 1, got {self.solver_max_iterations}"
            raise InvalidInputError(msg)
        if self.days_per_year < 1:
            msg = f"days_per_year must be at least 1, got {self.days_per_year}"
            raise InvalidInputError(msg)

    def default_ytm_pct(self, coupon_rate_pct: float) -> float:
        """Default yield to maturity for a bond quoted without one."""
        return max(coupon_rate_pct * self.ytm_coupon_multiplier, self.ytm_floor_pct)

    def with_overrides(self, **kwargs: Any) -> PolicyConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)


DEFAULT_POLICY = PolicyConfig()
