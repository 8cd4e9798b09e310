"""Maritz-Jarrett confidence intervals for Harrell-Davis quantiles.

Maritz, J. S., and R. G. Jarrett. "A note on estimating the variance of the
sample median." Journal of the American Statistical Association 73, no. 361
(1978): 194-196.

The Harrell-Davis weights define a discrete distribution over the order
statistics; its first moment is the quantile estimate and its variance is
the squared standard error. The interval is a large-sample normal
approximation, so its coverage is only nominal.
"""
from __future__ import annotations

import math

import numpy as np
from scipy.stats import norm

from ..data.models import ConfidenceInterval, Probability, ProbabilityLike, as_sample
from ..errors import EmptySampleError
from .base import SampleLike
from .harrell_davis import HARRELL_DAVIS_QUANTILE_ESTIMATOR, HarrellDavisQuantileEstimator


def two_sided_z(confidence_level: ProbabilityLike) -> float:
    """Standard normal z-score leaving ``(1 - level) / 2`` in each tail."""
    level = Probability.of(confidence_level).value
    return float(norm.ppf((1 + level) / 2))


class MaritzJarrettConfidenceIntervalEstimator:
    """Confidence-interval estimator for one quantile of one sample."""

    def __init__(
        self,
        sample: SampleLike,
        probability: ProbabilityLike,
        quantile_estimator: HarrellDavisQuantileEstimator | None = None,
    ) -> None:
        sample = as_sample(sample)
        if sample.is_empty:
            raise EmptySampleError()
        self.probability = Probability.of(probability)
        estimator = quantile_estimator or HARRELL_DAVIS_QUANTILE_ESTIMATOR
        weights = estimator.get_weights(sample, self.probability)
        values = sample.sorted_values
        c1 = float(np.dot(weights, values))
        c2 = float(np.dot(weights, values ** 2))
        self.estimation = c1
        self.standard_error = math.sqrt(max(0.0, c2 - c1 * c1))

    def get_confidence_interval(self, confidence_level: ProbabilityLike) -> ConfidenceInterval:
        level = Probability.of(confidence_level)
        margin = two_sided_z(level) * self.standard_error if self.standard_error > 0 else 0.0
        return ConfidenceInterval(
            estimation=self.estimation,
            lower=self.estimation - margin,
            upper=self.estimation + margin,
            confidence_level=level,
        )


def quantile_confidence_interval(
    sample: SampleLike, probability: ProbabilityLike, confidence_level: ProbabilityLike
) -> ConfidenceInterval:
    """Shortcut for a one-off Maritz-Jarrett interval."""
    return MaritzJarrettConfidenceIntervalEstimator(sample, probability).get_confidence_interval(
        confidence_level
    )
