"""
Descriptive statistics module.

Public API:
    compute_descriptive(sample)  - mean, median, variance, sd, range,
                                   quartiles and IQR outliers
"""

from scorestats.descriptive.design import DescriptiveDesign
from scorestats.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    Quartiles,
)
from scorestats.descriptive.solvers import compute_descriptive

__all__ = [
    "compute_descriptive",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "Quartiles",
]
