"""Display formatting for the presentation layer.

The engine emits plain floats; these helpers render them at the
boundary and are never called from the calculation path.
"""

from __future__ import annotations

import datetime as dt
import math

from .clock import parse_date
from .core.errors import InvalidInputError

__all__ = [
    "format_currency",
    "format_percentage",
    "format_date",
]

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_currency(amount: float, currency: str = "UGX") -> str:
    """Whole currency units with thousands separators, e.g. ``UGX 1,250,000``."""
    if not math.isfinite(amount):
        msg = f"Cannot format non-finite amount {amount!r}"
        raise InvalidInputError(msg)
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency} {abs(rounded):,.0f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """Percent figure (already scaled by 100), e.g. ``10.20%``."""
    return f"{value:.{decimals}f}%"


def format_date(value: dt.date | str) -> str:
    """Short date, e.g. ``Dec 15, 2034``."""
    day = parse_date(value)
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"
