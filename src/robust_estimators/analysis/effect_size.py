"""Effect size between two samples."""
from __future__ import annotations

import math

from ..data.models import Moments, Sample, as_sample
from ..errors import InsufficientElementsError
from ..quantiles.base import SampleLike


def _require_two(name: str, sample: Sample) -> None:
    if sample.count < 2:
        raise InsufficientElementsError(f"{name} should contain at least 2 elements")


def cohen_d(x: SampleLike, y: SampleLike) -> float:
    """Cohen's d of ``y`` relative to ``x`` using the pooled standard deviation.

    Positive when ``y`` has the larger mean.
    """
    x, y = as_sample(x), as_sample(y)
    _require_two("x", x)
    _require_two("y", y)

    nx, ny = x.count, y.count
    mx, my = Moments.from_sample(x), Moments.from_sample(y)
    pooled = math.sqrt(((nx - 1) * mx.variance + (ny - 1) * my.variance) / (nx + ny - 2))
    diff = my.mean - mx.mean
    if pooled == 0:
        return 0.0 if diff == 0 else math.copysign(math.inf, diff)
    return diff / pooled
