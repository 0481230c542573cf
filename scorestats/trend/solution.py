"""
Trend analysis solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from scorestats.core.result import Result


TREND_DIRECTIONS = ("improving", "declining", "stable")

CHANGE_CLASSES = (
    "significant_improvement",
    "moderate_improvement",
    "slight_improvement",
    "stable",
    "slight_decline",
    "moderate_decline",
    "significant_decline",
)


@dataclass(frozen=True)
class TrendParams:
    """Parameter payload for a progress trend over an ordered series."""
    slope: float
    direction: str
    threshold: float
    n: int
    first: float
    last: float
    change_rate: float
    change_class: str


@dataclass
class TrendSolution:
    """User-facing trend analysis results."""
    _result: Result[TrendParams]

    @property
    def slope(self) -> float:
        """Least-squares change per observation, rounded to 3 decimals."""
        return self._result.params.slope

    @property
    def direction(self) -> str:
        """'improving', 'declining' or 'stable'."""
        return self._result.params.direction

    @property
    def threshold(self) -> float:
        return self._result.params.threshold

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def change_rate(self) -> float:
        """Percent change from the first to the last observation."""
        return self._result.params.change_rate

    @property
    def change_class(self) -> str:
        return self._result.params.change_class

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        p = self._result.params
        return "\n".join([
            f"Trend over {p.n} observations",
            f"  slope = {p.slope:.3f} per step ({p.direction}, threshold {p.threshold:g})",
            f"  first = {p.first:g}, last = {p.last:g}, "
            f"change = {p.change_rate:+.1f}% ({p.change_class})",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return f"TrendSolution(n={p.n}, slope={p.slope}, direction={p.direction!r})"
