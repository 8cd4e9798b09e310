"""Tests for the normalized MAD dispersion estimators."""
import numpy as np
import pytest

from robust_estimators import (
    HARRELL_DAVIS_NORMALIZED_MAD,
    SIMPLE_NORMALIZED_MAD,
    EmptySampleError,
    Sample,
)
from robust_estimators.dispersion import MAD_CONSISTENCY_CONSTANT


def test_consistency_constant():
    assert MAD_CONSISTENCY_CONSTANT == pytest.approx(1.482602218505602, abs=1e-12)


def test_simple_mad():
    # median 3, deviations [2, 1, 0, 1, 2] -> MAD 1
    assert SIMPLE_NORMALIZED_MAD.calc_mad([1, 2, 3, 4, 5]) == 1.0
    assert SIMPLE_NORMALIZED_MAD.calc([1, 2, 3, 4, 5]) == pytest.approx(MAD_CONSISTENCY_CONSTANT)


def test_harrell_davis_mad():
    # Deviations [0, 1, 1, 2, 2] weighted by Beta(3, 3) slices of width 0.2
    assert HARRELL_DAVIS_NORMALIZED_MAD.calc_mad([1, 2, 3, 4, 5]) == pytest.approx(1.25952, abs=1e-9)
    assert HARRELL_DAVIS_NORMALIZED_MAD.calc([1, 2, 3, 4, 5]) == pytest.approx(1.25952 * MAD_CONSISTENCY_CONSTANT)


@pytest.mark.parametrize("estimator", [SIMPLE_NORMALIZED_MAD, HARRELL_DAVIS_NORMALIZED_MAD])
def test_constant_sample_has_zero_mad(estimator):
    assert estimator.calc(Sample([2.5] * 7)) == 0.0


@pytest.mark.parametrize("estimator", [SIMPLE_NORMALIZED_MAD, HARRELL_DAVIS_NORMALIZED_MAD])
def test_approximates_standard_deviation_for_normal_data(estimator):
    rng = np.random.default_rng(7)
    values = rng.normal(100, 4, size=2000)

    assert estimator.calc(values) == pytest.approx(4, rel=0.08)


@pytest.mark.parametrize("estimator", [SIMPLE_NORMALIZED_MAD, HARRELL_DAVIS_NORMALIZED_MAD])
def test_resistant_to_outliers(estimator):
    clean = list(np.random.default_rng(3).normal(10, 0.5, size=30))
    dirty = clean + [1000.0]

    assert estimator.calc(dirty) < 2 * estimator.calc(clean)


@pytest.mark.parametrize("estimator", [SIMPLE_NORMALIZED_MAD, HARRELL_DAVIS_NORMALIZED_MAD])
def test_empty_sample_raises(estimator):
    with pytest.raises(EmptySampleError):
        estimator.calc(Sample([]))
