"""Command line interface for the robust estimators."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List

from .analysis.outliers import DEFAULT_K, DoubleMadOutlierDetector
from .data.models import Sample
from .dispersion.mad import HARRELL_DAVIS_NORMALIZED_MAD, SIMPLE_NORMALIZED_MAD, NormalizedMadEstimator
from .errors import RobustEstimatorsError
from .quantiles.base import WeightedSumQuantileEstimator
from .quantiles.confidence import MaritzJarrettConfidenceIntervalEstimator
from .quantiles.harrell_davis import HARRELL_DAVIS_QUANTILE_ESTIMATOR
from .quantiles.simple import SIMPLE_QUANTILE_ESTIMATOR

QUANTILE_ESTIMATORS: Dict[str, WeightedSumQuantileEstimator] = {
    "hd": HARRELL_DAVIS_QUANTILE_ESTIMATOR,
    "simple": SIMPLE_QUANTILE_ESTIMATOR,
}
MAD_ESTIMATORS: Dict[str, NormalizedMadEstimator] = {
    "hd": HARRELL_DAVIS_NORMALIZED_MAD,
    "simple": SIMPLE_NORMALIZED_MAD,
}


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Robust quantile and outlier estimates for measurement samples")
    parser.add_argument("--output", help="Output file for JSON results")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    quantile = subparsers.add_parser("quantile", help="Estimate quantiles")
    quantile.add_argument("values", nargs="+", type=float, help="Sample values")
    quantile.add_argument(
        "--probability", "-p", type=float, action="append", required=True, help="Quantile probability (repeatable)"
    )
    quantile.add_argument("--estimator", choices=sorted(QUANTILE_ESTIMATORS), default="hd")
    quantile.add_argument(
        "--confidence-level", type=float, default=None, help="Add a Maritz-Jarrett interval (Harrell-Davis only)"
    )

    outliers = subparsers.add_parser("outliers", help="Detect outliers with the double MAD")
    outliers.add_argument("values", nargs="+", type=float, help="Sample values")
    outliers.add_argument("--mad", choices=sorted(MAD_ESTIMATORS), default="hd")
    outliers.add_argument("--k", type=float, default=DEFAULT_K)
    return parser.parse_args(list(argv) if argv is not None else None)


def _run_quantile(args: argparse.Namespace) -> List[Dict[str, object]]:
    sample = Sample(args.values)
    estimator = QUANTILE_ESTIMATORS[args.estimator]
    payload: List[Dict[str, object]] = []
    for probability in args.probability:
        entry: Dict[str, object] = {
            "probability": probability,
            "quantile": estimator.get_quantile(sample, probability),
        }
        if args.confidence_level is not None:
            interval = MaritzJarrettConfidenceIntervalEstimator(sample, probability).get_confidence_interval(
                args.confidence_level
            )
            entry["confidence_interval"] = interval.to_json()
        payload.append(entry)
    return payload


def _run_outliers(args: argparse.Namespace) -> Dict[str, object]:
    detector = DoubleMadOutlierDetector.create(Sample(args.values), MAD_ESTIMATORS[args.mad], k=args.k)
    result = detector.analyze()
    return {
        "median": result.median,
        "lower_mad": result.lower_mad,
        "upper_mad": result.upper_mad,
        "lower_boundary": result.lower_boundary,
        "upper_boundary": result.upper_boundary,
        "outliers": detector.get_outliers(args.values),
    }


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        payload = _run_quantile(args) if args.command == "quantile" else _run_outliers(args)
    except (RobustEstimatorsError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    text = json.dumps(payload, indent=2)

    if args.output:
        Path(args.output).write_text(text)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
