"""Outlier detection using the double median absolute deviation.

A single MAD treats both tails alike, which breaks down on skewed data such
as performance measurements: the long right tail inflates the MAD and hides
genuine outliers on the compressed left side. The double MAD computes a
separate dispersion for the values below and above the median and builds an
asymmetric fence:

    [median - k * lower_mad, median + k * upper_mad]

Values outside the fence are outliers. The median is always the
Harrell-Davis estimate; the dispersion of each half comes from a pluggable
normalized MAD estimator.

See also: https://eurekastatsblog.wordpress.com/2013/12/11/beware-the-mad-outlier-detection-method/
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

from ..data.models import Sample, as_sample
from ..dispersion.mad import HARRELL_DAVIS_NORMALIZED_MAD, NormalizedMadEstimator
from ..errors import EmptySampleError
from ..quantiles.base import SampleLike
from ..quantiles.harrell_davis import HARRELL_DAVIS_QUANTILE_ESTIMATOR

logger = logging.getLogger(__name__)

DEFAULT_K = 3.0


@dataclass
class OutlierConfig:
    """Configuration for outlier detection.

    Typical thresholds for the fence multiplier:
    - k = 2: aggressive, flags a few percent of normal data
    - k = 3: conventional choice (default)
    - k = 5: conservative, flags only gross errors
    """

    k: float = DEFAULT_K


@dataclass
class OutlierAnalysisResult:
    """Result of outlier analysis for a single sample."""

    median: float
    lower_mad: float
    upper_mad: float
    lower_boundary: float
    upper_boundary: float
    num_values: int
    lower_outliers: List[float]
    upper_outliers: List[float]

    @property
    def outliers(self) -> List[float]:
        return self.lower_outliers + self.upper_outliers

    @property
    def outlier_fraction(self) -> float:
        return len(self.outliers) / self.num_values if self.num_values else 0.0

    @property
    def severity_label(self) -> str:
        """Human-readable classification of the sample."""
        if not self.outliers:
            return "CLEAN"
        if self.lower_outliers and self.upper_outliers:
            return "BOTH TAILS"
        return "LOWER TAIL" if self.lower_outliers else "UPPER TAIL"


class DoubleMadOutlierDetector:
    """Detects outliers with separate lower and upper MADs.

    Usage:
        detector = DoubleMadOutlierDetector.create(values, SIMPLE_NORMALIZED_MAD)

        detector.is_outlier(42.0)
        outliers = detector.get_outliers(values)

        # Summary of the sample the fence was built on
        print(detector.generate_report())
    """

    def __init__(
        self,
        sample: SampleLike,
        mad_estimator: NormalizedMadEstimator | None = None,
        config: OutlierConfig | None = None,
    ) -> None:
        self.sample = as_sample(sample)
        if self.sample.is_empty:
            raise EmptySampleError()
        self.config = config or OutlierConfig()
        self.mad_estimator = mad_estimator or HARRELL_DAVIS_NORMALIZED_MAD

        self.median = HARRELL_DAVIS_QUANTILE_ESTIMATOR.get_median(self.sample)
        lower_half, upper_half = self._split(self.sample, self.median)
        self.lower_mad = self.mad_estimator.calc(lower_half)
        self.upper_mad = self.mad_estimator.calc(upper_half)

        k = self.config.k
        self.lower_boundary = self.median - k * self.lower_mad
        self.upper_boundary = self.median + k * self.upper_mad
        logger.debug(
            "Double MAD fence for %d values: median=%.6g lower_mad=%.6g upper_mad=%.6g -> [%.6g, %.6g]",
            self.sample.count,
            self.median,
            self.lower_mad,
            self.upper_mad,
            self.lower_boundary,
            self.upper_boundary,
        )

    @classmethod
    def create(
        cls,
        sample: SampleLike,
        mad_estimator: NormalizedMadEstimator | None = None,
        k: float = DEFAULT_K,
    ) -> "DoubleMadOutlierDetector":
        return cls(sample, mad_estimator, OutlierConfig(k=k))

    @staticmethod
    def _split(sample: Sample, median: float) -> tuple[Sample, Sample]:
        # Values equal to the median belong to both halves, so each half keeps
        # enough mass even when many observations tie with the median.
        values = sample.values
        return sample.select(values <= median), sample.select(values >= median)

    def is_outlier(self, value: float) -> bool:
        return value < self.lower_boundary or value > self.upper_boundary

    def is_lower_outlier(self, value: float) -> bool:
        return value < self.lower_boundary

    def is_upper_outlier(self, value: float) -> bool:
        return value > self.upper_boundary

    def get_outliers(self, values: Iterable[float] | None = None) -> List[float]:
        """Outliers among ``values`` (the detector's own sample by default), in order."""
        source = self.sample.sorted_values if values is None else values
        return [float(v) for v in source if self.is_outlier(v)]

    def flag(self, series: pd.Series) -> pd.Series:
        """Boolean mask marking the outliers of ``series``."""
        return (series < self.lower_boundary) | (series > self.upper_boundary)

    def analyze(self) -> OutlierAnalysisResult:
        """Classify every value of the sample the detector was built on."""
        values = self.sample.sorted_values
        return OutlierAnalysisResult(
            median=self.median,
            lower_mad=self.lower_mad,
            upper_mad=self.upper_mad,
            lower_boundary=self.lower_boundary,
            upper_boundary=self.upper_boundary,
            num_values=self.sample.count,
            lower_outliers=[float(v) for v in values if self.is_lower_outlier(v)],
            upper_outliers=[float(v) for v in values if self.is_upper_outlier(v)],
        )

    def get_summary_stats(self, result: OutlierAnalysisResult | None = None) -> Dict[str, float]:
        """Get summary statistics of the outlier analysis.

        Returns:
            Dict with summary metrics
        """
        result = result or self.analyze()
        values = self.sample.sorted_values
        inliers = values[(values >= self.lower_boundary) & (values <= self.upper_boundary)]

        return {
            'total_values': result.num_values,
            'lower_outliers': len(result.lower_outliers),
            'upper_outliers': len(result.upper_outliers),
            'outlier_fraction': result.outlier_fraction,
            'median': result.median,
            'lower_mad': result.lower_mad,
            'upper_mad': result.upper_mad,
            'mad_asymmetry': (
                result.upper_mad / result.lower_mad if result.lower_mad > 0 else float("nan")
            ),
            'inlier_min': float(np.min(inliers)) if len(inliers) else float("nan"),
            'inlier_max': float(np.max(inliers)) if len(inliers) else float("nan"),
        }

    def generate_report(self, result: OutlierAnalysisResult | None = None) -> str:
        """Generate human-readable outlier analysis report.

        Args:
            result: Analysis result; computed from the detector's sample if omitted

        Returns:
            Formatted report string
        """
        result = result or self.analyze()
        stats = self.get_summary_stats(result)

        report_lines = [
            "=" * 70,
            "OUTLIER ANALYSIS REPORT",
            "=" * 70,
            "",
            "SUMMARY STATISTICS:",
            f"   Values analyzed: {stats['total_values']}",
            f"   Dispersion estimator: {self.mad_estimator!r}",
            f"   Fence multiplier (k): {self.config.k:g}",
            f"   Median: {stats['median']:.4f}",
            f"   Lower MAD: {stats['lower_mad']:.4f}",
            f"   Upper MAD: {stats['upper_mad']:.4f}",
            f"   Fence: [{result.lower_boundary:.4f}, {result.upper_boundary:.4f}]",
            "",
            f"OUTLIERS ({len(result.outliers)} values, {result.outlier_fraction:.1%}): {result.severity_label}",
        ]

        if result.lower_outliers:
            report_lines.append(f"   Lower: {', '.join(f'{v:g}' for v in result.lower_outliers)}")
        if result.upper_outliers:
            report_lines.append(f"   Upper: {', '.join(f'{v:g}' for v in result.upper_outliers)}")
        if not result.outliers:
            report_lines.append("   No outliers detected.")

        report_lines.append("")
        report_lines.append("=" * 70)

        return "\n".join(report_lines)
