"""Exception hierarchy for the yield engine.

Every failure is local to a single calculation call and is raised before
any result is built, so callers never see a partial result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import SolverResult

__all__ = [
    "YieldEngineError",
    "InvalidInputError",
    "NonConvergenceError",
    "DomainInconsistencyError",
]


class YieldEngineError(Exception):
    """Base class for all errors raised by sovyield."""


class InvalidInputError(YieldEngineError, ValueError):
    """A non-positive amount, tenor, rate or horizon, or a malformed field."""


class NonConvergenceError(YieldEngineError, RuntimeError):
    """The face-value solver hit its iteration cap outside tolerance.

    Attributes:
        result: The not-converged :class:`SolverResult` the solver stopped on.
    """

    def __init__(self, message: str, result: SolverResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class DomainInconsistencyError(YieldEngineError, ValueError):
    """The request contradicts the security, e.g. holding past maturity."""
