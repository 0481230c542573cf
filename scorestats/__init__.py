"""
scorestats: statistical analysis engine for assessment scores.

Deterministic descriptive statistics, two-sample t-tests, Pearson
correlation and one-way ANOVA over small in-memory samples. Every
reported number is rounded half-up to 3 decimals.

Submodules:
    descriptive: compute_descriptive
    hypothesis: t_test, correlation
    anova: one_way_anova
    trend: progress slope and change-rate classification
"""

__version__ = "0.1.0"

from scorestats.descriptive import compute_descriptive
from scorestats.hypothesis import t_test, correlation
from scorestats.anova import one_way_anova
from scorestats.core.exceptions import (
    ScoreStatsError,
    InvalidInputError,
    InsufficientSampleSizeError,
    InsufficientGroupsError,
    DegenerateInputError,
    NonFiniteResultError,
)
from scorestats import descriptive, hypothesis, anova, trend

__all__ = [
    "__version__",
    "compute_descriptive",
    "t_test",
    "correlation",
    "one_way_anova",
    "ScoreStatsError",
    "InvalidInputError",
    "InsufficientSampleSizeError",
    "InsufficientGroupsError",
    "DegenerateInputError",
    "NonFiniteResultError",
    "descriptive",
    "hypothesis",
    "anova",
    "trend",
]
