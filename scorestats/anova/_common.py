"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container with no methods and no computation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (between groups, residuals or total)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float | None    # None for Total row
    f_value: float | None    # None for Residuals and Total rows
    p_value: float | None    # None for Residuals and Total rows


@dataclass(frozen=True)
class AnovaParams:
    """
    Parameter payload for one-way ANOVA.

    between_group_variance and within_group_variance are mean squares;
    total_variance is the total sum of squares, so
    total = between * df_between + within * df_within.
    """
    f_statistic: float
    p_value: float
    is_significant: bool
    between_group_variance: float
    within_group_variance: float
    total_variance: float
    degrees_of_freedom_between: int
    degrees_of_freedom_within: int
    eta_squared: float
    table: tuple[AnovaTableRow, ...]
    n_obs: int
    n_groups: int
    grand_mean: float
    group_means: dict[str, float]
    group_sizes: dict[str, int]
    alpha: float
