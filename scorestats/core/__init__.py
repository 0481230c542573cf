"""
Core infrastructure for scorestats.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, hypothesis, anova, trend).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Numeric approximations, rounding, timing
"""

from scorestats.core.result import Result
from scorestats.core.exceptions import (
    ScoreStatsError,
    ValidationError,
    InvalidInputError,
    InsufficientSampleSizeError,
    InsufficientGroupsError,
    NumericalError,
    DegenerateInputError,
    NonFiniteResultError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ScoreStatsError",
    "ValidationError",
    "InvalidInputError",
    "InsufficientSampleSizeError",
    "InsufficientGroupsError",
    "NumericalError",
    "DegenerateInputError",
    "NonFiniteResultError",
]
