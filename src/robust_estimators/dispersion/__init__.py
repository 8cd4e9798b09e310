"""Robust dispersion estimators."""
from .mad import (
    HARRELL_DAVIS_NORMALIZED_MAD,
    MAD_CONSISTENCY_CONSTANT,
    SIMPLE_NORMALIZED_MAD,
    HarrellDavisNormalizedMadEstimator,
    NormalizedMadEstimator,
    SimpleNormalizedMadEstimator,
)

__all__ = [
    "HARRELL_DAVIS_NORMALIZED_MAD",
    "MAD_CONSISTENCY_CONSTANT",
    "SIMPLE_NORMALIZED_MAD",
    "HarrellDavisNormalizedMadEstimator",
    "NormalizedMadEstimator",
    "SimpleNormalizedMadEstimator",
]
