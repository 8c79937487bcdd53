"""Injectable clocks and time-to-maturity helpers.

Anything derived from "today" goes through a :class:`Clock` so that a
calculation is reproducible once the clock is fixed.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Protocol

from .core.errors import InvalidInputError

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "parse_date",
    "days_to_maturity",
    "years_to_maturity",
]


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> dt.datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> dt.datetime:
        return dt.datetime.now(dt.timezone.utc)


class FixedClock:
    """Clock frozen at a given instant, for tests and replays."""

    def __init__(self, instant: dt.datetime | dt.date) -> None:
        if not isinstance(instant, dt.datetime):
            instant = dt.datetime.combine(instant, dt.time.min)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=dt.timezone.utc)
        self._instant = instant

    def now(self) -> dt.datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


def parse_date(value: dt.date | str) -> dt.date:
    """Accept a date or an ISO ``YYYY-MM-DD`` string.

    Raises:
        InvalidInputError: If *value* is not a valid date.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    try:
        return dt.date.fromisoformat(str(value).strip()[:10])
    except ValueError as exc:
        msg = f"Invalid date {value!r}"
        raise InvalidInputError(msg) from exc


def days_to_maturity(maturity_date: dt.date | str, clock: Clock | None = None) -> int:
    """Whole days from now until midnight UTC on *maturity_date*.

    A partial day counts as a full day. The result is negative once the
    security has matured.
    """
    clock = clock or SystemClock()
    maturity = dt.datetime.combine(parse_date(maturity_date), dt.time.min, dt.timezone.utc)
    seconds = (maturity - clock.now()).total_seconds()
    return math.ceil(seconds / 86_400)


def years_to_maturity(
    maturity_date: dt.date | str,
    clock: Clock | None = None,
    days_per_year: int = 365,
) -> float:
    """Years-fraction approximation: days to maturity over *days_per_year*."""
    return days_to_maturity(maturity_date, clock) / days_per_year
