"""Outlier detection and two-sample comparisons."""
from .effect_size import cohen_d
from .outliers import DEFAULT_K, DoubleMadOutlierDetector, OutlierAnalysisResult, OutlierConfig
from .shift import SHIFT_FUNCTION, QuantileCompareFunction, ShiftFunction

__all__ = [
    "cohen_d",
    "DEFAULT_K",
    "DoubleMadOutlierDetector",
    "OutlierAnalysisResult",
    "OutlierConfig",
    "SHIFT_FUNCTION",
    "QuantileCompareFunction",
    "ShiftFunction",
]
