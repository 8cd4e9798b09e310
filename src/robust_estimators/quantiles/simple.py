"""Conventional order-statistic quantile estimator.

Hyndman-Fan type 7, the default of R's ``quantile`` and of ``numpy.quantile``:
linear interpolation between the two order statistics around
``h = (n - 1) p + 1``. Weighted samples are handled by spreading the
interpolation over the cumulative weights, which reduces to the classic rule
when every weight is one.
"""
from __future__ import annotations

import numpy as np

from ..data.models import Sample
from .base import WeightedSumQuantileEstimator


class SimpleQuantileEstimator(WeightedSumQuantileEstimator):
    """Type 7 quantile estimator."""

    def _interior_weights(self, sample: Sample, probability: float) -> np.ndarray:
        n = sample.count
        h = (n - 1) * probability + 1
        # Cumulative weights in element units; exact integers when unweighted.
        positions = np.concatenate(([0.0], np.cumsum(sample.sorted_weights))) * n / sample.total_weight
        positions[-1] = float(n)
        cdf = np.clip(positions - h + 1, 0.0, 1.0)
        return np.diff(cdf)

    def __repr__(self) -> str:
        return "SimpleQuantileEstimator()"


SIMPLE_QUANTILE_ESTIMATOR = SimpleQuantileEstimator()
