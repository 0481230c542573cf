"""
Hypothesis testing module.

Public API:
    t_test(group_a, group_b, alpha)  - Pooled two-sample Student's t-test
    correlation(x, y, alpha)         - Pearson correlation with significance
"""

from scorestats.hypothesis.solvers import t_test, correlation
from scorestats.hypothesis.design import HypothesisDesign
from scorestats.hypothesis._common import (
    ConfidenceInterval,
    CorrelationParams,
    TTestParams,
    STRENGTH_LABELS,
)
from scorestats.hypothesis.solution import CorrelationSolution, TTestSolution

__all__ = [
    "t_test",
    "correlation",
    "HypothesisDesign",
    "ConfidenceInterval",
    "CorrelationParams",
    "TTestParams",
    "STRENGTH_LABELS",
    "CorrelationSolution",
    "TTestSolution",
]
