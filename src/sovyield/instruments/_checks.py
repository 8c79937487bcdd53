"""Argument checks shared by the pricing components."""

from __future__ import annotations

import math

from ..core.errors import InvalidInputError


def require_positive(name: str, value: float) -> float:
    value = _as_float(name, value)
    if not value > 0:
        msg = f"{name} must be positive, got {value}"
        raise InvalidInputError(msg)
    return value


def require_non_negative(name: str, value: float) -> float:
    value = _as_float(name, value)
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise InvalidInputError(msg)
    return value


def require_months(name: str, value: int) -> int:
    """A positive whole number of months."""
    number = _as_float(name, value)
    if not number > 0 or number != int(number):
        msg = f"{name} must be a positive whole number of months, got {value!r}"
        raise InvalidInputError(msg)
    return int(number)


def _as_float(name: str, value: float) -> float:
    if isinstance(value, bool):
        msg = f"{name} must be a number, got {value!r}"
        raise InvalidInputError(msg)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        msg = f"{name} must be a number, got {value!r}"
        raise InvalidInputError(msg) from exc
    if not math.isfinite(number):
        msg = f"{name} must be finite, got {value!r}"
        raise InvalidInputError(msg)
    return number
