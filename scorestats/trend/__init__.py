"""
Progress trend analysis for ordered score series.

Public API:
    analyze_trend(values, threshold)  - slope, direction and change summary
    trend_slope(values)               - least-squares slope against index
    classify_trend(slope, threshold)  - 'improving', 'declining' or 'stable'
    change_rate(old, new)             - percent change (1 decimal)
    classify_change(rate)             - seven-level improvement class
"""

from scorestats.trend.solvers import (
    analyze_trend,
    trend_slope,
    classify_trend,
    change_rate,
    classify_change,
)
from scorestats.trend.solution import (
    CHANGE_CLASSES,
    TREND_DIRECTIONS,
    TrendParams,
    TrendSolution,
)

__all__ = [
    "analyze_trend",
    "trend_slope",
    "classify_trend",
    "change_rate",
    "classify_change",
    "CHANGE_CLASSES",
    "TREND_DIRECTIONS",
    "TrendParams",
    "TrendSolution",
]
