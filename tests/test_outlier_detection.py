"""Tests for the double MAD outlier detector."""
import numpy as np
import pandas as pd
import pytest

from robust_estimators import (
    HARRELL_DAVIS_NORMALIZED_MAD,
    HARRELL_DAVIS_QUANTILE_ESTIMATOR,
    SIMPLE_NORMALIZED_MAD,
    DoubleMadOutlierDetector,
    EmptySampleError,
    OutlierConfig,
    Sample,
)

CASE1 = [1, 4, 4, 4, 5, 5, 5, 5, 7, 7, 8, 10, 16, 30]


class TestDoubleMadOutlierDetector:
    """Test suite for DoubleMadOutlierDetector."""

    @pytest.fixture
    def skewed_values(self):
        """Right-skewed measurements with one gross error on each side."""
        rng = np.random.default_rng(42)
        body = 100 + rng.gamma(shape=2.0, scale=3.0, size=200)
        return np.concatenate([body, [40.0, 400.0]])

    def test_simple_mad_reference_case(self):
        detector = DoubleMadOutlierDetector.create(CASE1, SIMPLE_NORMALIZED_MAD)

        assert detector.get_outliers() == [1.0, 16.0, 30.0]

    def test_harrell_davis_mad_reference_case(self):
        detector = DoubleMadOutlierDetector.create(CASE1, HARRELL_DAVIS_NORMALIZED_MAD)

        assert detector.median == pytest.approx(5.6049, abs=1e-3)
        assert detector.lower_boundary == pytest.approx(3.3006, abs=1e-3)
        assert detector.upper_boundary == pytest.approx(22.8011, abs=1e-3)
        assert detector.get_outliers() == [1.0, 30.0]

    def test_simple_mad_fence(self):
        """Lower half [1, 4, 4, 4, 5, 5, 5, 5] and upper half [7, 7, 8, 10, 16, 30]."""
        detector = DoubleMadOutlierDetector.create(CASE1, SIMPLE_NORMALIZED_MAD)
        c = 1.482602218505602

        assert detector.median == pytest.approx(HARRELL_DAVIS_QUANTILE_ESTIMATOR.get_median(CASE1))
        assert detector.lower_mad == pytest.approx(0.5 * c)
        assert detector.upper_mad == pytest.approx(2.0 * c)
        assert detector.lower_boundary == pytest.approx(detector.median - 1.5 * c)
        assert detector.upper_boundary == pytest.approx(detector.median + 6.0 * c)

    @pytest.mark.parametrize("mad_estimator", [SIMPLE_NORMALIZED_MAD, HARRELL_DAVIS_NORMALIZED_MAD])
    def test_constant_sample_has_no_outliers(self, mad_estimator):
        detector = DoubleMadOutlierDetector.create([6.0] * 10, mad_estimator)

        assert detector.lower_mad == 0.0
        assert detector.upper_mad == 0.0
        assert detector.lower_boundary == detector.upper_boundary == 6.0
        assert detector.get_outliers() == []

    @pytest.mark.parametrize("mad_estimator", [SIMPLE_NORMALIZED_MAD, HARRELL_DAVIS_NORMALIZED_MAD])
    def test_empty_sample_raises(self, mad_estimator):
        with pytest.raises(EmptySampleError):
            DoubleMadOutlierDetector.create([], mad_estimator)

    def test_single_value(self):
        detector = DoubleMadOutlierDetector.create([12.0])

        assert not detector.is_outlier(12.0)
        assert detector.is_outlier(12.5)

    def test_asymmetric_fence_on_skewed_data(self, skewed_values):
        detector = DoubleMadOutlierDetector.create(skewed_values, HARRELL_DAVIS_NORMALIZED_MAD)

        assert detector.upper_mad > detector.lower_mad
        assert detector.median - detector.lower_boundary < detector.upper_boundary - detector.median
        assert 40.0 in detector.get_outliers()
        assert 400.0 in detector.get_outliers()

    def test_larger_k_flags_fewer_values(self, skewed_values):
        strict = DoubleMadOutlierDetector(skewed_values, SIMPLE_NORMALIZED_MAD, OutlierConfig(k=2))
        lenient = DoubleMadOutlierDetector(skewed_values, SIMPLE_NORMALIZED_MAD, OutlierConfig(k=5))

        assert len(lenient.get_outliers()) <= len(strict.get_outliers())
        assert lenient.config.k == 5

    def test_default_config(self):
        detector = DoubleMadOutlierDetector(CASE1)

        assert detector.config.k == 3.0
        assert detector.mad_estimator is HARRELL_DAVIS_NORMALIZED_MAD

    def test_weights_are_kept_in_halves(self):
        values = [1.0, 2.0, 3.0, 4.0, 5.0]
        sample = Sample(values, [1.0, 1.0, 1.0, 1.0, 1.0])
        unweighted = DoubleMadOutlierDetector.create(values, SIMPLE_NORMALIZED_MAD)
        weighted = DoubleMadOutlierDetector.create(sample, SIMPLE_NORMALIZED_MAD)

        assert weighted.lower_boundary == pytest.approx(unweighted.lower_boundary)
        assert weighted.upper_boundary == pytest.approx(unweighted.upper_boundary)

    def test_flag_series(self):
        detector = DoubleMadOutlierDetector.create(CASE1, SIMPLE_NORMALIZED_MAD)
        series = pd.Series(CASE1, index=[f"run{i}" for i in range(len(CASE1))])

        mask = detector.flag(series)

        assert mask.dtype == bool
        assert series[mask].tolist() == [1, 16, 30]

    def test_analyze(self):
        detector = DoubleMadOutlierDetector.create(CASE1, SIMPLE_NORMALIZED_MAD)
        result = detector.analyze()

        assert result.lower_outliers == [1.0]
        assert result.upper_outliers == [16.0, 30.0]
        assert result.num_values == len(CASE1)
        assert result.outlier_fraction == pytest.approx(3 / 14)
        assert result.severity_label == "BOTH TAILS"

    def test_get_summary_stats(self):
        detector = DoubleMadOutlierDetector.create(CASE1, SIMPLE_NORMALIZED_MAD)
        stats = detector.get_summary_stats()

        assert stats['total_values'] == 14
        assert stats['lower_outliers'] == 1
        assert stats['upper_outliers'] == 2
        assert stats['mad_asymmetry'] == pytest.approx(4.0)
        assert stats['inlier_min'] == 4.0
        assert stats['inlier_max'] == 10.0

    def test_generate_report(self):
        detector = DoubleMadOutlierDetector.create(CASE1, SIMPLE_NORMALIZED_MAD)
        report = detector.generate_report()

        assert isinstance(report, str)
        assert "OUTLIER ANALYSIS REPORT" in report
        assert "Upper: 16, 30" in report

    def test_report_without_outliers(self):
        report = DoubleMadOutlierDetector.create([5.0] * 4).generate_report()

        assert "No outliers detected." in report
