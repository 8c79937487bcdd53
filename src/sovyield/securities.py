"""Adapter between record-store security rows and engine inputs.

The store keeps the coupon as ``interestRate``, the holding duration in
months as ``duration`` and the maturity as an ISO date string. Both
camelCase and snake_case keys are accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .clock import parse_date
from .core.errors import DomainInconsistencyError, InvalidInputError
from .core.types import SecurityTerms, SecurityType
from .instruments._checks import require_months, require_non_negative, require_positive

__all__ = [
    "TENORS",
    "available_tenors",
    "terms_from_record",
]

TENORS: dict[SecurityType, tuple[int, ...]] = {
    SecurityType.DISCOUNT_BILL: (3, 6, 12),
    SecurityType.COUPON_BOND: (12, 24, 36, 60, 120, 180),
}


def available_tenors(
    security_type: SecurityType | str,
    max_months: int | None = None,
) -> tuple[int, ...]:
    """Holding tenors offered for a security type.

    Args:
        security_type: Bill or bond.
        max_months: Optional cap, typically the security's duration.

    Returns:
        Tenors in months, ascending.
    """
    tenors = TENORS[SecurityType.parse(security_type)]
    if max_months is None:
        return tenors
    return tuple(t for t in tenors if t <= max_months)


def _field(record: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if name in record and record[name] is not None:
            return record[name]
    return None


def terms_from_record(
    record: Mapping[str, Any],
    tenor_months: int | None = None,
    yield_to_maturity_pct: float | None = None,
) -> SecurityTerms:
    """Build :class:`SecurityTerms` from a record-store row.

    The row's ``yield`` column is a display figure and is not used as the
    yield to maturity; pass *yield_to_maturity_pct* to override the
    policy default.

    Args:
        record: Security row with ``type``, ``interestRate`` and optionally
            ``maturityDate`` and ``duration``.
        tenor_months: Requested holding tenor; defaults to the row's
            ``duration``.
        yield_to_maturity_pct: Optional YTM override in percent.

    Returns:
        Terms ready for :func:`~sovyield.engine.compute_yield`.

    Raises:
        InvalidInputError: If a required field is missing or malformed.
        DomainInconsistencyError: If the tenor exceeds the row's duration.
    """
    raw_type = _field(record, "type", "security_type")
    if raw_type is None:
        msg = "Security record has no 'type'"
        raise InvalidInputError(msg)
    security_type = SecurityType.parse(raw_type)

    rate = _field(record, "interestRate", "interest_rate", "coupon_rate_pct")
    if rate is None:
        msg = "Security record has no 'interestRate'"
        raise InvalidInputError(msg)
    rate = require_non_negative("interestRate", rate)

    duration = _field(record, "duration", "duration_months")
    if duration is not None:
        duration = require_months("duration", duration)

    if tenor_months is None:
        if duration is None:
            msg = "No tenor requested and the record has no 'duration'"
            raise InvalidInputError(msg)
        tenor_months = duration
    tenor_months = require_months("tenor_months", tenor_months)
    if duration is not None and tenor_months > duration:
        msg = f"Tenor of {tenor_months} months exceeds the security's {duration}-month duration"
        raise DomainInconsistencyError(msg)

    maturity = _field(record, "maturityDate", "maturity_date")
    if yield_to_maturity_pct is not None:
        yield_to_maturity_pct = require_positive("yield_to_maturity_pct", yield_to_maturity_pct)

    return SecurityTerms(
        security_type=security_type,
        coupon_rate_pct=rate,
        tenor_months=tenor_months,
        yield_to_maturity_pct=yield_to_maturity_pct,
        maturity_date=parse_date(maturity) if maturity is not None else None,
    )
