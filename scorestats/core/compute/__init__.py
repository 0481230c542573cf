"""
Shared compute infrastructure for scorestats.

This module provides the numeric approximations and timing utilities that
are shared across all domain-specific modules.

IMPORTANT: This is NOT where domain computations live. Those go in
{domain}/. This module contains shared NUMERIC infrastructure.

Submodules:
    approximations: Normal CDF, t/F tail probabilities, t critical values, rounding
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical validation
"""

from scorestats.core.compute.approximations import (
    normal_cdf,
    t_p_value,
    t_critical_95,
    f_p_value,
    round3,
)
from scorestats.core.compute.timing import Timer

__all__ = [
    # Approximations
    "normal_cdf",
    "t_p_value",
    "t_critical_95",
    "f_p_value",
    "round3",
    # Timing
    "Timer",
]
