"""
Analysis of Variance (ANOVA).

Public API:
    one_way_anova(groups, alpha) -> AnovaSolution
"""

from scorestats.anova.solvers import one_way_anova
from scorestats.anova.design import AnovaDesign
from scorestats.anova._common import AnovaParams, AnovaTableRow
from scorestats.anova.solution import AnovaSolution

__all__ = [
    "one_way_anova",
    "AnovaDesign",
    "AnovaParams",
    "AnovaTableRow",
    "AnovaSolution",
]
