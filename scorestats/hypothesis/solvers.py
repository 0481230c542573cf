"""
Solver dispatch for hypothesis tests.

Provides t_test() and correlation().
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from scorestats.core.exceptions import InvalidInputError
from scorestats.hypothesis.design import HypothesisDesign
from scorestats.hypothesis.solution import CorrelationSolution, TTestSolution
from scorestats.hypothesis.backends.cpu import CPUHypothesisBackend


def t_test(
    group_a: ArrayLike | HypothesisDesign,
    group_b: ArrayLike | None = None,
    alpha: float | None = None,
) -> TTestSolution:
    """
    Independent two-sample t-test with pooled variance (Student's t).

    Two-tailed. The p-value uses the closed-form t approximation; the
    confidence interval for mean(a) - mean(b) is always at the 95% level,
    whatever ``alpha`` is.

    Parameters
    ----------
    group_a, group_b : array-like
        Samples with at least 2 finite values each. Alternatively pass a
        design from HypothesisDesign.for_t_test as ``group_a`` and omit
        ``group_b``.
    alpha : float, optional
        Significance threshold in (0, 1). Default 0.05. A design carries
        its own alpha, so this must be omitted when a design is passed.

    Returns
    -------
    TTestSolution
        t_statistic, p_value, degrees_of_freedom, is_significant,
        confidence_interval, effect_size (Cohen's d).

    Raises
    ------
    InsufficientSampleSizeError
        If either group has fewer than 2 values.
    InvalidInputError
        If alpha is outside (0, 1) or a group is malformed, or if a
        design is not a t-test design or comes with group_b or alpha.
    DegenerateInputError
        If both groups are constant (zero pooled variance).
    NonFiniteResultError
        If a mean or the pooled variance overflows float64.

    Examples
    --------
    >>> result = t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5])
    >>> result.t_statistic, result.degrees_of_freedom, result.is_significant
    (4.0, 8, True)
    """
    if isinstance(group_a, HypothesisDesign):
        design = _check_prebuilt(group_a, "t_two_sample", "t_test", "group_b", group_b, alpha)
    else:
        design = HypothesisDesign.for_t_test(
            group_a, group_b, alpha=0.05 if alpha is None else alpha,
        )

    result = CPUHypothesisBackend().solve(design)
    return TTestSolution(_result=result, _design=design)


def correlation(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    alpha: float | None = None,
) -> CorrelationSolution:
    """
    Pearson correlation coefficient with a two-tailed significance test.

    Parameters
    ----------
    x, y : array-like
        Equal-length samples with at least 3 pairs. Alternatively pass a
        design from HypothesisDesign.for_correlation as ``x`` and omit
        ``y``.
    alpha : float, optional
        Significance threshold in (0, 1). Default 0.05. Must be omitted
        when a design is passed.

    Returns
    -------
    CorrelationSolution
        coefficient, p_value, is_significant, strength.

    Raises
    ------
    InvalidInputError
        If lengths differ, fewer than 3 pairs are given, alpha is
        outside (0, 1), or a design is not a correlation design or comes
        with y or alpha.
    DegenerateInputError
        If x or y is constant.
    NonFiniteResultError
        If a sum of squares or cross-products overflows float64.

    Examples
    --------
    >>> result = correlation([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
    >>> result.coefficient, result.strength
    (1.0, 'very strong')
    """
    if isinstance(x, HypothesisDesign):
        design = _check_prebuilt(x, "pearson", "correlation", "y", y, alpha)
    else:
        design = HypothesisDesign.for_correlation(
            x, y, alpha=0.05 if alpha is None else alpha,
        )

    result = CPUHypothesisBackend().solve(design)
    return CorrelationSolution(_result=result, _design=design)


def _check_prebuilt(
    design: HypothesisDesign,
    test_type: str,
    caller: str,
    other_name: str,
    other: ArrayLike | None,
    alpha: float | None,
) -> HypothesisDesign:
    """A design passed in place of data must match the test and stand alone."""
    if design.test_type != test_type:
        raise InvalidInputError(
            f"{caller}: expected a {test_type!r} design, got {design.test_type!r}",
            name="design",
        )
    if other is not None:
        raise InvalidInputError(
            f"{caller}: {other_name} must be omitted when a design is passed",
            name=other_name,
        )
    if alpha is not None:
        raise InvalidInputError(
            f"{caller}: alpha is fixed by the design (alpha={design.alpha}); "
            f"set it in the design factory instead",
            name="alpha",
        )
    return design
