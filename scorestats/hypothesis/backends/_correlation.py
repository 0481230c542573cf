"""
Pearson product-moment correlation with a t-based significance test.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
import numpy as np

from scorestats.core.exceptions import DegenerateInputError
from scorestats.core.compute.approximations import round3, t_p_value
from scorestats.core.validation import check_finite_statistics
from scorestats.hypothesis._common import CorrelationParams, STRENGTH_LABELS

if TYPE_CHECKING:
    from scorestats.hypothesis.design import HypothesisDesign


# Upper bounds on |r| for every label but the last
STRENGTH_THRESHOLDS = (0.1, 0.3, 0.5, 0.7)


def classify_strength(coefficient: float) -> str:
    """Map |r| to a strength label using fixed thresholds."""
    magnitude = abs(coefficient)
    for bound, label in zip(STRENGTH_THRESHOLDS, STRENGTH_LABELS):
        if magnitude < bound:
            return label
    return STRENGTH_LABELS[-1]


def pearson(design: HypothesisDesign) -> tuple[CorrelationParams, list[str]]:
    """Pearson's r between x and y, tested against r = 0 with df = n - 2."""
    x = design.x
    y = design.y
    alpha = design.alpha
    warnings_list: list[str] = []

    n = len(x)
    with np.errstate(over='ignore', invalid='ignore'):
        dx = x - np.mean(x)
        dy = y - np.mean(y)
        sxy = float(np.sum(dx * dy))
        sxx = float(np.sum(dx * dx))
        syy = float(np.sum(dy * dy))

    check_finite_statistics(
        "correlation",
        sum_of_squares_x=sxx, sum_of_squares_y=syy, sum_of_products=sxy,
    )

    for name, arr, ss in (("x", x, sxx), ("y", y, syy)):
        if ss == 0.0 or np.ptp(arr) == 0.0:
            raise DegenerateInputError(
                f"correlation: {name} is constant, standard deviation is zero",
                quantity=f"sd({name})",
            )

    # cov / (sd_x * sd_y); the (n - 1) factors cancel
    denominator = math.sqrt(sxx * syy)
    if denominator == 0.0 or not math.isfinite(denominator):
        denominator = math.sqrt(sxx) * math.sqrt(syy)
    r = min(1.0, max(-1.0, sxy / denominator))

    df = n - 2
    if abs(r) == 1.0:
        t_stat = math.inf
        warnings_list.append("perfect linear relationship: t statistic is infinite")
    else:
        t_stat = r * math.sqrt(df / (1.0 - r * r))
    p_value = t_p_value(abs(t_stat), df)

    return CorrelationParams(
        coefficient=round3(r),
        p_value=round3(p_value),
        is_significant=bool(p_value < alpha),
        strength=classify_strength(r),
        n=n,
        alpha=alpha,
    ), warnings_list
