"""Quantile estimators and their confidence intervals."""
from .base import QuantileEstimator, WeightedSumQuantileEstimator
from .beta import regularized_incomplete_beta
from .confidence import MaritzJarrettConfidenceIntervalEstimator, quantile_confidence_interval
from .harrell_davis import HARRELL_DAVIS_QUANTILE_ESTIMATOR, HarrellDavisQuantileEstimator
from .simple import SIMPLE_QUANTILE_ESTIMATOR, SimpleQuantileEstimator

__all__ = [
    "QuantileEstimator",
    "WeightedSumQuantileEstimator",
    "regularized_incomplete_beta",
    "MaritzJarrettConfidenceIntervalEstimator",
    "quantile_confidence_interval",
    "HARRELL_DAVIS_QUANTILE_ESTIMATOR",
    "HarrellDavisQuantileEstimator",
    "SIMPLE_QUANTILE_ESTIMATOR",
    "SimpleQuantileEstimator",
]
