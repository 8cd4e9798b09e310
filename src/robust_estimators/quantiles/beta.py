"""Regularized incomplete beta function.

The value is evaluated in log space for the ``x^a (1-x)^b / B(a, b)``
prefactor and with the modified Lentz algorithm for the continued fraction.
Shape parameters in the thousands (large samples) stay accurate because
nothing is exponentiated before the logarithms are combined.
"""
from __future__ import annotations

import logging
import math

import numpy as np
from scipy.special import betaln

from ..errors import ConvergenceError

logger = logging.getLogger(__name__)

RELATIVE_TOLERANCE = 1e-15
MAX_ITERATIONS = 10_000
_TINY = 1e-300


def _continued_fraction(x: float, a: float, b: float) -> float:
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < _TINY:
        d = _TINY
    d = 1.0 / d
    h = d
    for m in range(1, MAX_ITERATIONS + 1):
        m2 = 2 * m
        # Even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < _TINY:
            d = _TINY
        c = 1.0 + aa / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        h *= d * c
        # Odd step
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < _TINY:
            d = _TINY
        c = 1.0 + aa / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < RELATIVE_TOLERANCE:
            return h
    logger.debug("Incomplete beta did not converge: x=%r a=%r b=%r", x, a, b)
    raise ConvergenceError(
        f"incomplete beta continued fraction did not converge in {MAX_ITERATIONS} iterations "
        f"(x={x}, a={a}, b={b})"
    )


def regularized_incomplete_beta(x: float, a: float, b: float) -> float:
    """CDF of the Beta(a, b) distribution evaluated at ``x``.

    Args:
        x: Point in [0, 1]
        a: First shape parameter, strictly positive
        b: Second shape parameter, strictly positive

    Returns:
        I_x(a, b), a value in [0, 1]

    Raises:
        ValueError: if an argument is outside its domain
        ConvergenceError: if the continued fraction does not converge
    """
    if not a > 0 or not b > 0:
        raise ValueError(f"shape parameters should be positive, got a={a}, b={b}")
    if not 0.0 <= x <= 1.0:
        raise ValueError(f"x should be in [0, 1], got {x}")
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0

    log_front = a * math.log(x) + b * math.log1p(-x) - betaln(a, b)
    front = math.exp(log_front)
    if x < (a + 1.0) / (a + b + 2.0):
        value = front * _continued_fraction(x, a, b) / a
    else:
        value = 1.0 - front * _continued_fraction(1.0 - x, b, a) / b
    return min(1.0, max(0.0, value))


def beta_cdf(points: np.ndarray, a: float, b: float) -> np.ndarray:
    """Evaluate :func:`regularized_incomplete_beta` at every point."""
    return np.array([regularized_incomplete_beta(float(x), a, b) for x in points], dtype=float)
