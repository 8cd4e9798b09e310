"""Exception types raised by the estimators."""
from __future__ import annotations


class RobustEstimatorsError(Exception):
    """Base class for every error raised by this package."""


class EmptySampleError(RobustEstimatorsError, ValueError):
    """An estimator that needs at least one observation received none."""

    def __init__(self, message: str = "sample should contain at least one element") -> None:
        super().__init__(message)


class InsufficientElementsError(RobustEstimatorsError, ValueError):
    """A sample is smaller than the estimator requires."""


class InvalidProbabilityError(RobustEstimatorsError, ValueError):
    """A probability lies outside [0, 1]."""


class InvalidWeightError(RobustEstimatorsError, ValueError):
    """A sample weight is negative or all weights are zero."""


class ConvergenceError(RobustEstimatorsError, ArithmeticError):
    """A numerical routine failed to converge.

    This signals a broken internal invariant rather than bad input, which is
    why it does not derive from ``ValueError``.
    """
