"""
Sums of squares computation for one-way ANOVA.

Between groups:
    SS_B = sum_g n_g * (mean_g - grand_mean)^2

Within groups:
    SS_W = sum_g sum_i (y_gi - mean_g)^2

SS_B + SS_W is the total sum of squares about the grand mean.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class OneWaySS:
    """Unrounded one-way decomposition."""
    ss_between: float
    ss_within: float
    grand_mean: float
    group_means: tuple[float, ...]

    @property
    def ss_total(self) -> float:
        return self.ss_between + self.ss_within


def oneway_sums_of_squares(groups: tuple[NDArray[np.floating[Any]], ...]) -> OneWaySS:
    """Between- and within-group sums of squares for k groups."""
    with np.errstate(over='ignore', invalid='ignore'):
        grand_mean = float(np.mean(np.concatenate(groups)))

        means = np.array([np.mean(g) for g in groups])
        sizes = np.array([len(g) for g in groups], dtype=np.float64)
        ss_between = np.sum(sizes * (means - grand_mean) ** 2)
        ss_within = sum(
            float(np.sum((g - m) ** 2)) for g, m in zip(groups, means)
        )

    return OneWaySS(
        ss_between=float(ss_between),
        ss_within=float(ss_within),
        grand_mean=grand_mean,
        group_means=tuple(float(m) for m in means),
    )
