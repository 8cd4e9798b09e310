"""Quantile comparison functions.

A quantile comparison function evaluates both samples at the same set of
probabilities and combines the two estimates. The shift function reports the
difference ``Q_y(p) - Q_x(p)``, which shows how much (and where) ``y`` moved
relative to ``x``, tail by tail.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np
import pandas as pd

from ..data.models import Probability, ProbabilityLike, as_sample
from ..errors import EmptySampleError
from ..quantiles.base import QuantileEstimator, SampleLike
from ..quantiles.harrell_davis import HARRELL_DAVIS_QUANTILE_ESTIMATOR

DEFAULT_PROBABILITIES = tuple(np.arange(1, 10) / 10)


class QuantileCompareFunction(ABC):
    """Compares two samples quantile by quantile."""

    def __init__(self, quantile_estimator: QuantileEstimator | None = None) -> None:
        self.quantile_estimator = quantile_estimator or HARRELL_DAVIS_QUANTILE_ESTIMATOR

    def calc(
        self,
        x: SampleLike,
        y: SampleLike,
        probabilities: Iterable[ProbabilityLike] = DEFAULT_PROBABILITIES,
    ) -> pd.Series:
        """Compare ``y`` against ``x``.

        Returns:
            Series of comparison values indexed by probability
        """
        x, y = as_sample(x), as_sample(y)
        if x.is_empty or y.is_empty:
            raise EmptySampleError()
        probs = [Probability.of(p) for p in probabilities]
        values = [
            self.calculate_value(
                self.quantile_estimator.get_quantile(x, p),
                self.quantile_estimator.get_quantile(y, p),
            )
            for p in probs
        ]
        return pd.Series(values, index=pd.Index([p.value for p in probs], name="probability"), dtype=float)

    @abstractmethod
    def calculate_value(self, quantile_x: float, quantile_y: float) -> float:
        """Combine the two quantile estimates."""


class ShiftFunction(QuantileCompareFunction):
    def calculate_value(self, quantile_x: float, quantile_y: float) -> float:
        return quantile_y - quantile_x


SHIFT_FUNCTION = ShiftFunction()
