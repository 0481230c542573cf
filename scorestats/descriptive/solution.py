"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from scorestats.core.result import Result
from scorestats.core.compute.approximations import round3

if TYPE_CHECKING:
    from scorestats.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class Quartiles:
    """Nearest-rank quartiles; q2 is the median."""
    q1: float
    q2: float
    q3: float


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Every float is rounded half-up to 3 decimals. Outliers are the
    original sample values, in input order.
    """
    mean: float
    median: float
    standard_deviation: float
    variance: float
    min: float
    max: float
    range: float
    quartiles: Quartiles
    outliers: tuple[float, ...]
    n: int


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def standard_deviation(self) -> float:
        """Sample standard deviation (Bessel-corrected, n-1); 0 when n == 1."""
        return self._result.params.standard_deviation

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, n-1); 0 when n == 1."""
        return self._result.params.variance

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def quartiles(self) -> Quartiles:
        return self._result.params.quartiles

    @property
    def iqr(self) -> float:
        """Interquartile range q3 - q1 of the reported quartiles."""
        q = self._result.params.quartiles
        return round3(q.q3 - q.q1)

    @property
    def outliers(self) -> tuple[float, ...]:
        """Values outside the 1.5 * IQR fences, in input order."""
        return self._result.params.outliers

    @property
    def n(self) -> int:
        return self._result.params.n

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view for report and chart layers."""
        p = self._result.params
        return {
            'mean': p.mean,
            'median': p.median,
            'standard_deviation': p.standard_deviation,
            'variance': p.variance,
            'min': p.min,
            'max': p.max,
            'range': p.range,
            'quartiles': {'q1': p.quartiles.q1, 'q2': p.quartiles.q2, 'q3': p.quartiles.q3},
            'outliers': list(p.outliers),
        }

    def summary(self) -> str:
        """Six-number summary followed by spread and outliers."""
        p = self._result.params
        q = p.quartiles
        labels = ["Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max."]
        values = [p.min, q.q1, p.median, p.mean, q.q3, p.max]
        width = max(max(len(lbl) for lbl in labels), max(len(f"{v:.3f}") for v in values))

        lines = [
            f"Descriptive Statistics ({self._design.name}, n={p.n})",
            "  ".join(lbl.rjust(width) for lbl in labels),
            "  ".join(f"{v:.3f}".rjust(width) for v in values),
            "",
            f"SD: {p.standard_deviation:.3f}  Variance: {p.variance:.3f}  Range: {p.range:.3f}",
        ]
        if p.outliers:
            lines.append("Outliers: " + ", ".join(f"{v:g}" for v in p.outliers))
        else:
            lines.append("Outliers: none")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(n={p.n}, mean={p.mean}, "
            f"sd={p.standard_deviation}, outliers={len(p.outliers)})"
        )
