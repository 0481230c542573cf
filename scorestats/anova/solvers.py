"""
ANOVA solver dispatch.

Public API:
    one_way_anova(groups, alpha) -> AnovaSolution
"""

from typing import Any

import numpy as np

from scorestats.core.result import Result
from scorestats.core.exceptions import DegenerateInputError, InsufficientSampleSizeError
from scorestats.core.validation import check_finite_statistics
from scorestats.core.compute.timing import Timer
from scorestats.core.compute.approximations import f_p_value, round3
from scorestats.anova._common import AnovaParams, AnovaTableRow
from scorestats.anova._ss import oneway_sums_of_squares
from scorestats.anova.design import AnovaDesign
from scorestats.anova.solution import AnovaSolution


def one_way_anova(
    groups: Any,
    alpha: float = 0.05,
) -> AnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more groups are equal using
    F = MS_between / MS_within, with the bounded F p-value approximation.

    Args:
        groups: Ordered collection of at least 2 non-empty samples, or a
            mapping of label -> sample
        alpha: Significance threshold in (0, 1). Default 0.05.

    Returns:
        AnovaSolution with F, p-value, mean squares, total sum of
        squares, degrees of freedom and eta-squared

    Raises:
        InsufficientGroupsError: fewer than 2 groups
        InsufficientSampleSizeError: no residual degrees of freedom
            (every group has a single observation)
        DegenerateInputError: zero within-group variance
        NonFiniteResultError: a sum of squares overflows float64
        InvalidInputError: an empty or malformed group, or bad alpha

    Examples:
        >>> result = one_way_anova([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        >>> result.f_statistic, result.eta_squared
        (27.0, 0.9)
    """
    design = AnovaDesign.for_oneway(groups, alpha=alpha)

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    k = design.k
    n = design.n
    df_between = k - 1
    df_within = n - k
    if df_within <= 0:
        raise InsufficientSampleSizeError(
            f"one_way_anova: within-groups degrees of freedom must be positive, "
            f"got {df_within} (n={n}, k={k})",
            name="df_within",
            required=1,
            actual=df_within,
        )

    with timer.section('sums_of_squares'):
        ss = oneway_sums_of_squares(design.groups)

    check_finite_statistics(
        "one_way_anova",
        grand_mean=ss.grand_mean, ss_between=ss.ss_between, ss_within=ss.ss_within,
    )

    if ss.ss_within == 0.0 or all(np.ptp(g) == 0.0 for g in design.groups):
        raise DegenerateInputError(
            "one_way_anova: every group is constant, within-group variance is zero",
            quantity="within-group variance",
        )

    with timer.section('f_test'):
        ms_between = ss.ss_between / df_between
        ms_within = ss.ss_within / df_within
        f_stat = ms_between / ms_within
        p_value = f_p_value(f_stat, df_between, df_within)
        eta_sq = ss.ss_between / ss.ss_total

    check_finite_statistics("one_way_anova", f_statistic=f_stat, eta_squared=eta_sq)

    if f_stat < 1.0:
        warnings_list.append("F < 1: p-value reported as 1")
    sizes = [len(g) for g in design.groups]
    if len(set(sizes)) > 1:
        warnings_list.append(f"unbalanced design: group sizes {sizes}")

    table = (
        AnovaTableRow(
            term='Between groups',
            df=df_between,
            sum_sq=round3(ss.ss_between),
            mean_sq=round3(ms_between),
            f_value=round3(f_stat),
            p_value=round3(p_value),
        ),
        AnovaTableRow(
            term='Residuals',
            df=df_within,
            sum_sq=round3(ss.ss_within),
            mean_sq=round3(ms_within),
            f_value=None,
            p_value=None,
        ),
        AnovaTableRow(
            term='Total',
            df=n - 1,
            sum_sq=round3(ss.ss_total),
            mean_sq=None,
            f_value=None,
            p_value=None,
        ),
    )

    params = AnovaParams(
        f_statistic=round3(f_stat),
        p_value=round3(p_value),
        is_significant=bool(p_value < design.alpha),
        between_group_variance=round3(ms_between),
        within_group_variance=round3(ms_within),
        total_variance=round3(ss.ss_total),
        degrees_of_freedom_between=df_between,
        degrees_of_freedom_within=df_within,
        eta_squared=round3(eta_sq),
        table=table,
        n_obs=n,
        n_groups=k,
        grand_mean=round3(ss.grand_mean),
        group_means={
            label: round3(m) for label, m in zip(design.labels, ss.group_means)
        },
        group_sizes=dict(zip(design.labels, sizes)),
        alpha=design.alpha,
    )

    timer.stop()

    result = Result(
        params=params,
        info={
            'design_type': 'oneway',
            'ss_between': ss.ss_between,
            'ss_within': ss.ss_within,
            'ms_between': ms_between,
            'ms_within': ms_within,
        },
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )

    return AnovaSolution(_result=result)
