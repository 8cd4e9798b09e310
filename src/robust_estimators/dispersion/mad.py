"""Normalized median absolute deviation.

MAD = median(|x - median(x)|). Multiplied by ``1 / Phi^-1(0.75)`` it becomes
a consistent estimator of the standard deviation for normal data, so the two
are directly comparable.
"""
from __future__ import annotations

import numpy as np
from scipy.stats import norm

from ..data.models import MEDIAN, as_sample
from ..errors import EmptySampleError
from ..quantiles.base import SampleLike, WeightedSumQuantileEstimator
from ..quantiles.harrell_davis import HARRELL_DAVIS_QUANTILE_ESTIMATOR
from ..quantiles.simple import SIMPLE_QUANTILE_ESTIMATOR

MAD_CONSISTENCY_CONSTANT = float(1.0 / norm.ppf(0.75))


class NormalizedMadEstimator:
    """Dispersion estimator computing a normalized MAD with a given quantile estimator."""

    def __init__(self, quantile_estimator: WeightedSumQuantileEstimator) -> None:
        self.quantile_estimator = quantile_estimator

    def calc_mad(self, sample: SampleLike) -> float:
        """Raw median absolute deviation, without the normality constant."""
        sample = as_sample(sample)
        if sample.is_empty:
            raise EmptySampleError()
        median = self.quantile_estimator.get_quantile(sample, MEDIAN)
        deviations = sample.map(lambda values: np.abs(values - median))
        return self.quantile_estimator.get_quantile(deviations, MEDIAN)

    def calc(self, sample: SampleLike) -> float:
        return self.calc_mad(sample) * MAD_CONSISTENCY_CONSTANT

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SimpleNormalizedMadEstimator(NormalizedMadEstimator):
    """Normalized MAD with both medians taken by the type 7 estimator."""

    def __init__(self) -> None:
        super().__init__(SIMPLE_QUANTILE_ESTIMATOR)


class HarrellDavisNormalizedMadEstimator(NormalizedMadEstimator):
    """Normalized MAD with both medians taken by the Harrell-Davis estimator."""

    def __init__(self) -> None:
        super().__init__(HARRELL_DAVIS_QUANTILE_ESTIMATOR)


SIMPLE_NORMALIZED_MAD = SimpleNormalizedMadEstimator()
HARRELL_DAVIS_NORMALIZED_MAD = HarrellDavisNormalizedMadEstimator()
