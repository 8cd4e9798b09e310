"""Harrell-Davis quantile estimator.

Harrell, F. E., and C. E. Davis. "A new distribution-free quantile estimator."
Biometrika 69, no. 3 (1982): 635-640.

Every order statistic contributes to the estimate with a weight equal to the
mass that Beta(p(n+1), (1-p)(n+1)) puts on its slice of the cumulative
weights. The result is smooth in ``p`` and much less sensitive to which two
order statistics happen to sit around the target rank.
"""
from __future__ import annotations

import numpy as np

from ..data.models import ProbabilityLike, Sample, as_sample
from .base import SampleLike, WeightedSumQuantileEstimator
from .beta import beta_cdf


class HarrellDavisQuantileEstimator(WeightedSumQuantileEstimator):
    """Weighted-sum quantile estimator driven by the incomplete beta function."""

    def _interior_weights(self, sample: Sample, probability: float) -> np.ndarray:
        # The element count (not the total weight) sets the shape parameters;
        # weights only move the slice boundaries.
        n = sample.count
        a = probability * (n + 1)
        b = (1 - probability) * (n + 1)
        cdf = beta_cdf(self._cumulative_probabilities(sample), a, b)
        return np.clip(np.diff(cdf), 0.0, None)

    def get_quantile_confidence_interval_estimator(
        self, sample: SampleLike, probability: ProbabilityLike
    ) -> "MaritzJarrettConfidenceIntervalEstimator":
        """Maritz-Jarrett interval estimator for the given quantile."""
        from .confidence import MaritzJarrettConfidenceIntervalEstimator

        return MaritzJarrettConfidenceIntervalEstimator(as_sample(sample), probability, self)

    def __repr__(self) -> str:
        return "HarrellDavisQuantileEstimator()"


HARRELL_DAVIS_QUANTILE_ESTIMATOR = HarrellDavisQuantileEstimator()
