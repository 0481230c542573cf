"""
CPU reference backend for descriptive statistics.

Quartiles use the nearest-rank rule on the ascending sort (zero-based
index floor(n * p)), not interpolation, so q1/q3 are always sample values.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from scorestats.core.result import Result
from scorestats.core.compute.timing import Timer
from scorestats.core.compute.approximations import round3
from scorestats.core.validation import check_finite_statistics
from scorestats.descriptive.design import DescriptiveDesign
from scorestats.descriptive.solution import DescriptiveParams, Quartiles


# Tukey fence multiplier for outlier detection
OUTLIER_FENCE = 1.5


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        """Compute all descriptive statistics for one sample."""
        timer = Timer()
        timer.start()

        data = design.data
        n = design.n
        warnings_list: list[str] = []

        with timer.section('sort'):
            ordered = np.sort(data)

        with timer.section('moments'), np.errstate(over='ignore', invalid='ignore'):
            mean = float(np.mean(data))
            median = self._median(ordered)
            if n > 1:
                variance = float(np.var(data, ddof=1))
            else:
                variance = 0.0
                warnings_list.append("single observation: variance and sd reported as 0")
            sd = float(np.sqrt(variance))

        lo = float(ordered[0])
        hi = float(ordered[-1])
        check_finite_statistics(
            "compute_descriptive",
            mean=mean, median=median, variance=variance, range=hi - lo,
        )

        with timer.section('quartiles'):
            q1 = float(ordered[int(np.floor(n * 0.25))])
            q3 = float(ordered[int(np.floor(n * 0.75))])

        with timer.section('outliers'):
            outliers = self._outliers(data, q1, q3)
            if outliers:
                warnings_list.append(f"{len(outliers)} outlier(s) outside {OUTLIER_FENCE} * IQR fences")

        params = DescriptiveParams(
            mean=round3(mean),
            median=round3(median),
            standard_deviation=round3(sd),
            variance=round3(variance),
            min=round3(lo),
            max=round3(hi),
            range=round3(hi - lo),
            quartiles=Quartiles(q1=round3(q1), q2=round3(median), q3=round3(q3)),
            outliers=outliers,
            n=n,
        )

        timer.stop()

        return Result(
            params=params,
            info={'method': 'nearest_rank', 'n': n, 'iqr': q3 - q1},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    @staticmethod
    def _median(ordered: NDArray[np.floating[Any]]) -> float:
        n = ordered.shape[0]
        mid = n // 2
        if n % 2 == 0:
            return float((ordered[mid - 1] + ordered[mid]) / 2.0)
        return float(ordered[mid])

    @staticmethod
    def _outliers(
        data: NDArray[np.floating[Any]],
        q1: float,
        q3: float,
    ) -> tuple[float, ...]:
        """Values beyond the Tukey fences, in input order."""
        iqr = q3 - q1
        lower = q1 - OUTLIER_FENCE * iqr
        upper = q3 + OUTLIER_FENCE * iqr
        mask = (data < lower) | (data > upper)
        return tuple(float(v) for v in data[mask])
