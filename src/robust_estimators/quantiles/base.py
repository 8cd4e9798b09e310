"""Shared machinery for quantile estimators built on order-statistic weights."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Protocol, Union

import numpy as np

from ..data.models import MEDIAN, Probability, ProbabilityLike, Sample, as_sample
from ..errors import EmptySampleError

SampleLike = Union[Sample, Iterable[float]]


class QuantileEstimator(Protocol):
    """Anything that can estimate a quantile of a sample."""

    def get_quantile(self, sample: SampleLike, probability: ProbabilityLike) -> float:
        """Return the estimate of the ``probability`` quantile."""


class WeightedSumQuantileEstimator(ABC):
    """Quantile estimator expressed as a weighted sum of order statistics.

    Subclasses only describe how the interior weights are derived; the
    boundary probabilities, single-element samples and input validation are
    handled here.
    """

    def get_weights(self, sample: SampleLike, probability: ProbabilityLike) -> np.ndarray:
        """Weights of the sorted elements, non-negative and summing to one."""
        sample = as_sample(sample)
        p = Probability.of(probability).value
        if sample.is_empty:
            raise EmptySampleError()

        if sample.count == 1:
            return np.ones(1)
        if p == 0.0 or p == 1.0:
            weights = np.zeros(sample.count)
            carrying = np.flatnonzero(sample.sorted_weights > 0)
            weights[carrying[0] if p == 0.0 else carrying[-1]] = 1.0
            return weights
        return self._interior_weights(sample, p)

    def get_quantile(self, sample: SampleLike, probability: ProbabilityLike) -> float:
        sample = as_sample(sample)
        weights = self.get_weights(sample, probability)
        return self._weighted_sum(sample, weights)

    def get_quantiles(self, sample: SampleLike, probabilities: Iterable[ProbabilityLike]) -> np.ndarray:
        sample = as_sample(sample)
        return np.array([self.get_quantile(sample, p) for p in probabilities], dtype=float)

    def get_median(self, sample: SampleLike) -> float:
        return self.get_quantile(sample, MEDIAN)

    @staticmethod
    def _weighted_sum(sample: Sample, weights: np.ndarray) -> float:
        values = sample.sorted_values
        estimate = float(np.dot(weights[weights > 0], values[weights > 0]))
        # A convex combination never leaves the sample range.
        return min(max(estimate, float(values[0])), float(values[-1]))

    @staticmethod
    def _cumulative_probabilities(sample: Sample) -> np.ndarray:
        """Cumulative normalized weight before and after each sorted element."""
        cumulative = np.concatenate(([0.0], np.cumsum(sample.sorted_weights))) / sample.total_weight
        cumulative = np.clip(cumulative, 0.0, 1.0)
        cumulative[-1] = 1.0
        return cumulative

    @abstractmethod
    def _interior_weights(self, sample: Sample, probability: float) -> np.ndarray:
        """Weights for ``0 < probability < 1`` and at least two elements."""
