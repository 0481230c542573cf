"""
Progress trend and change-rate analysis for ordered score series.

Public API:
    trend_slope(values)                  - least-squares slope against index
    classify_trend(slope, threshold)     - improving / declining / stable
    analyze_trend(values, threshold)     - TrendSolution
    change_rate(old, new)                - percent change, 1 decimal
    classify_change(rate)                - seven-level improvement class
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from scorestats.core.result import Result
from scorestats.core.exceptions import InvalidInputError
from scorestats.core.validation import (
    check_finite_statistics,
    check_min_samples,
    to_sample,
)
from scorestats.core.compute.timing import Timer
from scorestats.core.compute.approximations import round3, round_half_up
from scorestats.trend.solution import CHANGE_CLASSES, TrendParams, TrendSolution


DEFAULT_TREND_THRESHOLD = 0.05

# Lower bounds (inclusive, in percent) for each class but the last
CHANGE_THRESHOLDS = (20.0, 10.0, 5.0, -5.0, -10.0, -20.0)


def trend_slope(values: ArrayLike) -> float:
    """
    Ordinary least-squares slope of ``values`` against 0, 1, ..., n-1.

    Raises:
        InsufficientSampleSizeError: fewer than 2 values
        NonFiniteResultError: the slope overflows float64
    """
    y = to_sample(values, "values")
    check_min_samples(y, 2, "values")
    return _slope(y)


def _slope(y: np.ndarray) -> float:
    n = y.shape[0]
    x = np.arange(n, dtype=np.float64)
    sum_x = float(np.sum(x))
    sum_xx = float(np.sum(x * x))
    with np.errstate(over='ignore', invalid='ignore'):
        sum_y = float(np.sum(y))
        sum_xy = float(np.sum(x * y))
    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    check_finite_statistics("trend_slope", slope=slope)
    return slope


def classify_trend(slope: float, threshold: float = DEFAULT_TREND_THRESHOLD) -> str:
    """'improving' above +threshold, 'declining' below -threshold, else 'stable'."""
    if threshold < 0:
        raise InvalidInputError(f"threshold must be >= 0, got {threshold}", name="threshold")
    if slope > threshold:
        return "improving"
    if slope < -threshold:
        return "declining"
    return "stable"


def change_rate(old: float, new: float) -> float:
    """
    Percent change from ``old`` to ``new``, rounded half-up to 1 decimal.

    A zero baseline gives 100 for any increase and 0 otherwise.
    """
    for name, value in (("old", old), ("new", new)):
        if not math.isfinite(value):
            raise InvalidInputError(f"{name}: expected a finite number, got {value}", name=name)
    if old == 0:
        return 100.0 if new > 0 else 0.0
    rate = (new - old) / old * 100.0
    check_finite_statistics("change_rate", change_rate=rate)
    return round_half_up(rate, 1)


def classify_change(rate: float) -> str:
    """Map a percent change to one of seven improvement classes."""
    for bound, label in zip(CHANGE_THRESHOLDS, CHANGE_CLASSES):
        if rate >= bound:
            return label
    return CHANGE_CLASSES[-1]


def analyze_trend(
    values: ArrayLike,
    threshold: float = DEFAULT_TREND_THRESHOLD,
) -> TrendSolution:
    """
    Summarize the direction of an ordered score series.

    Args:
        values: Scores in chronological order, at least 2
        threshold: Slope magnitude below which the series is 'stable'

    Returns:
        TrendSolution with slope, direction and first-to-last change

    Examples:
        >>> result = analyze_trend([2.0, 2.5, 3.1, 3.4])
        >>> result.direction
        'improving'
    """
    y = to_sample(values, "values")
    check_min_samples(y, 2, "values")

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('slope'):
        slope = _slope(y)
        direction = classify_trend(slope, threshold)

    first, last = float(y[0]), float(y[-1])
    rate = change_rate(first, last)
    if first == 0:
        warnings_list.append("zero baseline: change rate reported as 100 or 0")

    params = TrendParams(
        slope=round3(slope),
        direction=direction,
        threshold=threshold,
        n=int(y.shape[0]),
        first=first,
        last=last,
        change_rate=rate,
        change_class=classify_change(rate),
    )

    timer.stop()

    result = Result(
        params=params,
        info={'method': 'ols_index', 'raw_slope': slope},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return TrendSolution(_result=result)
