"""Robust estimators for noisy performance measurements."""
from .analysis import DoubleMadOutlierDetector, OutlierConfig, ShiftFunction, cohen_d
from .data.models import ConfidenceInterval, Moments, Probability, Sample
from .dispersion import (
    HARRELL_DAVIS_NORMALIZED_MAD,
    SIMPLE_NORMALIZED_MAD,
    HarrellDavisNormalizedMadEstimator,
    SimpleNormalizedMadEstimator,
)
from .errors import (
    ConvergenceError,
    EmptySampleError,
    InsufficientElementsError,
    InvalidProbabilityError,
    InvalidWeightError,
    RobustEstimatorsError,
)
from .quantiles import (
    HARRELL_DAVIS_QUANTILE_ESTIMATOR,
    SIMPLE_QUANTILE_ESTIMATOR,
    HarrellDavisQuantileEstimator,
    MaritzJarrettConfidenceIntervalEstimator,
    SimpleQuantileEstimator,
    regularized_incomplete_beta,
)

__all__ = [
    "DoubleMadOutlierDetector",
    "OutlierConfig",
    "ShiftFunction",
    "cohen_d",
    "ConfidenceInterval",
    "Moments",
    "Probability",
    "Sample",
    "HARRELL_DAVIS_NORMALIZED_MAD",
    "SIMPLE_NORMALIZED_MAD",
    "HarrellDavisNormalizedMadEstimator",
    "SimpleNormalizedMadEstimator",
    "ConvergenceError",
    "EmptySampleError",
    "InsufficientElementsError",
    "InvalidProbabilityError",
    "InvalidWeightError",
    "RobustEstimatorsError",
    "HARRELL_DAVIS_QUANTILE_ESTIMATOR",
    "SIMPLE_QUANTILE_ESTIMATOR",
    "HarrellDavisQuantileEstimator",
    "MaritzJarrettConfidenceIntervalEstimator",
    "SimpleQuantileEstimator",
    "regularized_incomplete_beta",
]
