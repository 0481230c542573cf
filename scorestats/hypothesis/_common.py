"""
Common types for hypothesis testing.

Defines the frozen parameter payloads for the two-sample t-test and
Pearson correlation, plus the correlation strength labels.
"""

from __future__ import annotations

from dataclasses import dataclass


# Ordered from weakest to strongest
STRENGTH_LABELS = ("very weak", "weak", "moderate", "strong", "very strong")


@dataclass(frozen=True)
class ConfidenceInterval:
    """Two-sided interval for a mean difference; lower <= upper."""
    lower: float
    upper: float


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for the pooled two-sample t-test.

    Attributes
    ----------
    t_statistic : float
        (mean_a - mean_b) / SE with pooled variance.
    p_value : float
        Approximate two-tailed p-value.
    degrees_of_freedom : int
        n_a + n_b - 2.
    is_significant : bool
        p_value < alpha, decided before rounding.
    confidence_interval : ConfidenceInterval
        Interval for mean_a - mean_b at conf_level (always 0.95).
    effect_size : float
        Cohen's d with the pooled standard deviation.
    mean_a, mean_b : float
        Group means.
    alpha : float
        Significance threshold used for is_significant.
    conf_level : float
        Confidence level of the interval.
    """
    t_statistic: float
    p_value: float
    degrees_of_freedom: int
    is_significant: bool
    confidence_interval: ConfidenceInterval
    effect_size: float
    mean_a: float
    mean_b: float
    alpha: float
    conf_level: float


@dataclass(frozen=True)
class CorrelationParams:
    """
    Parameter payload for Pearson correlation.

    Attributes
    ----------
    coefficient : float
        Pearson's r, in [-1, 1].
    p_value : float
        Approximate two-tailed p-value of t = r * sqrt((n-2)/(1-r^2)).
    is_significant : bool
        p_value < alpha, decided before rounding.
    strength : str
        One of STRENGTH_LABELS, from |r| before rounding.
    n : int
        Number of pairs.
    alpha : float
        Significance threshold used for is_significant.
    """
    coefficient: float
    p_value: float
    is_significant: bool
    strength: str
    n: int
    alpha: float
