"""Value types shared by the estimators."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Union

import numpy as np
import pandas as pd

from ..errors import EmptySampleError, InvalidProbabilityError, InvalidWeightError

ProbabilityLike = Union["Probability", float]


@dataclass(frozen=True)
class Probability:
    """A float constrained to the closed interval [0, 1]."""

    value: float

    def __post_init__(self) -> None:
        value = float(self.value)
        if math.isnan(value) or value < 0.0 or value > 1.0:
            raise InvalidProbabilityError(f"probability should be in [0, 1], got {self.value}")
        object.__setattr__(self, "value", value)

    @classmethod
    def of(cls, value: ProbabilityLike) -> "Probability":
        if isinstance(value, Probability):
            return value
        return cls(float(value))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


MEDIAN = Probability(0.5)


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def _to_array(data: Iterable[float]) -> np.ndarray:
    # Always copies, so later changes to the caller's buffer are not seen.
    return np.array(data if isinstance(data, np.ndarray) else list(data), dtype=float).ravel()


class Sample:
    """Immutable collection of observations with non-negative weights.

    Attributes
    ----------
    values:
        Observations in the order they were given.
    weights:
        Per-observation weights. Unweighted samples carry a weight of 1 for
        every element, so ``total_weight`` equals ``count``.
    sorted_values:
        Observations sorted ascending. Computed once at construction.
    sorted_weights:
        Weights reordered to follow ``sorted_values``.
    """

    __slots__ = (
        "values",
        "weights",
        "sorted_values",
        "sorted_weights",
        "total_weight",
        "is_weighted",
    )

    def __init__(self, values: Iterable[float], weights: Iterable[float] | None = None) -> None:
        values_array = _to_array(values)
        if not np.isfinite(values_array).all():
            raise ValueError("sample values should be finite")
        if weights is None:
            weights_array = np.ones_like(values_array)
            is_weighted = False
        else:
            weights_array = _to_array(weights)
            if weights_array.shape != values_array.shape:
                raise ValueError(
                    f"values and weights should have the same length "
                    f"({len(values_array)} != {len(weights_array)})"
                )
            if np.isnan(weights_array).any() or (weights_array < 0).any():
                raise InvalidWeightError("sample weights should be non-negative")
            is_weighted = True

        total_weight = float(weights_array.sum())
        if len(values_array) > 0 and total_weight <= 0:
            raise InvalidWeightError("sample weights should not all be zero")

        order = np.argsort(values_array, kind="mergesort")
        object.__setattr__(self, "values", _readonly(values_array))
        object.__setattr__(self, "weights", _readonly(weights_array))
        object.__setattr__(self, "sorted_values", _readonly(values_array[order]))
        object.__setattr__(self, "sorted_weights", _readonly(weights_array[order]))
        object.__setattr__(self, "total_weight", total_weight)
        object.__setattr__(self, "is_weighted", is_weighted)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Sample is immutable")

    @classmethod
    def from_series(cls, series: pd.Series, weights: pd.Series | None = None) -> "Sample":
        """Build a sample from a pandas Series, dropping missing values."""
        if weights is None:
            return cls(series.dropna().to_numpy(dtype=float))
        frame = pd.DataFrame({"value": series, "weight": weights}).dropna()
        return cls(frame["value"].to_numpy(dtype=float), frame["weight"].to_numpy(dtype=float))

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        if self.is_weighted:
            return f"Sample(values={self.values.tolist()}, weights={self.weights.tolist()})"
        return f"Sample(values={self.values.tolist()})"

    def map(self, func: Callable[[np.ndarray], np.ndarray]) -> "Sample":
        """Apply ``func`` to the values and keep each element's weight."""
        mapped = np.asarray(func(self.values.copy()), dtype=float)
        return Sample(mapped, self.weights.copy() if self.is_weighted else None)

    def select(self, mask: np.ndarray) -> "Sample":
        """Keep the elements where ``mask`` is true, together with their weights."""
        mask = np.asarray(mask, dtype=bool)
        return Sample(self.values[mask], self.weights[mask] if self.is_weighted else None)


def as_sample(values: Union[Sample, pd.Series, Iterable[float]]) -> Sample:
    if isinstance(values, Sample):
        return values
    if isinstance(values, pd.Series):
        return Sample.from_series(values)
    return Sample(values)


@dataclass(frozen=True)
class Moments:
    """Weighted mean and variance of a sample."""

    mean: float
    variance: float

    @property
    def standard_deviation(self) -> float:
        return math.sqrt(self.variance)

    @classmethod
    def from_sample(cls, sample: Sample) -> "Moments":
        if sample.is_empty:
            raise EmptySampleError()
        values, weights = sample.values, sample.weights
        total = sample.total_weight
        mean = float(np.sum(weights * values) / total)
        if sample.count == 1:
            return cls(mean=mean, variance=0.0)
        # Reliability weights; reduces to ddof=1 when every weight is 1.
        denominator = total - float(np.sum(weights ** 2)) / total
        if denominator <= 0:
            return cls(mean=mean, variance=0.0)
        variance = float(np.sum(weights * (values - mean) ** 2) / denominator)
        return cls(mean=mean, variance=variance)


@dataclass(frozen=True)
class ConfidenceInterval:
    """Two-sided interval around a point estimate."""

    estimation: float
    lower: float
    upper: float
    confidence_level: Probability

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    @property
    def margin(self) -> float:
        return (self.upper - self.lower) / 2

    def to_json(self) -> dict:
        """Return a JSON serialisable dictionary."""
        return {
            "estimation": self.estimation,
            "lower": self.lower,
            "upper": self.upper,
            "confidence_level": self.confidence_level.value,
        }
