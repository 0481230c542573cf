"""
Tests for the pooled two-sample t_test().

Hand-computed reference for the canonical example; scipy.stats.ttest_ind
(equal_var=True) as the exact reference for the statistic on larger data.
"""

import numpy as np
import pytest
from scipy import stats

from scorestats import t_test
from scorestats.core.exceptions import (
    DegenerateInputError,
    InsufficientSampleSizeError,
    InvalidInputError,
    NonFiniteResultError,
)
from scorestats.core.compute.tolerances import ROUNDED_3DP, select_tolerance
from scorestats.hypothesis import ConfidenceInterval, HypothesisDesign


# ═══════════════════════════════════════════════════════════════════════
# Known example
# ═══════════════════════════════════════════════════════════════════════


class TestKnownExample:
    """a = 5..9, b = 1..5: diff 4, pooled variance 2.5, SE 1."""

    @pytest.fixture
    def result(self):
        return t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5], 0.05)

    def test_statistic(self, result):
        assert result.t_statistic == 4.0
        assert result.degrees_of_freedom == 8

    def test_p_value(self, result):
        # 2 * (1 + 16/8)^(-9/2)
        assert result.p_value == 0.014
        assert result.is_significant

    def test_effect_size(self, result):
        # 4 / sqrt(2.5)
        assert result.effect_size == 2.53

    def test_confidence_interval(self, result):
        assert result.confidence_interval == ConfidenceInterval(lower=1.694, upper=6.306)
        assert result.conf_level == 0.95

    def test_means(self, result):
        assert result.mean_a == 7.0
        assert result.mean_b == 3.0

    def test_no_table_warning_for_tabulated_df(self, result):
        assert result.warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:

    def test_swap_negates(self, treatment_control):
        a, b = treatment_control
        ab = t_test(a, b)
        ba = t_test(b, a)
        assert ba.t_statistic == -ab.t_statistic
        assert ba.effect_size == -ab.effect_size
        assert ba.p_value == ab.p_value
        assert ba.is_significant == ab.is_significant
        assert ba.degrees_of_freedom == ab.degrees_of_freedom
        assert ba.confidence_interval.lower == -ab.confidence_interval.upper
        assert ba.confidence_interval.upper == -ab.confidence_interval.lower

    def test_swap_negates_on_rounding_tie(self):
        # pooled sd 4, mean difference 0.25: d = 0.0625 exactly
        a, b = [-4, 0, 4], [-4.25, -0.25, 3.75]
        ab = t_test(a, b)
        ba = t_test(b, a)
        assert ab.effect_size == 0.063
        assert ba.effect_size == -0.063
        assert ba.t_statistic == -ab.t_statistic

    def test_identical_groups(self):
        result = t_test([1, 2, 3, 4], [1, 2, 3, 4])
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0
        assert not result.is_significant
        assert result.confidence_interval.lower < 0.0 < result.confidence_interval.upper

    def test_interval_independent_of_alpha(self, treatment_control):
        a, b = treatment_control
        strict = t_test(a, b, alpha=0.01)
        loose = t_test(a, b, alpha=0.10)
        assert strict.confidence_interval == loose.confidence_interval
        assert strict.alpha == 0.01
        assert loose.alpha == 0.10

    def test_significance_follows_alpha(self):
        # unrounded p = 2 * 3^-4.5 = 0.01426
        a, b = [5, 6, 7, 8, 9], [1, 2, 3, 4, 5]
        assert t_test(a, b, alpha=0.05).is_significant
        assert not t_test(a, b, alpha=0.01).is_significant

    def test_interval_contains_difference(self, treatment_control):
        a, b = treatment_control
        result = t_test(a, b)
        diff = result.mean_a - result.mean_b
        ci = result.confidence_interval
        assert ci.lower <= diff + ROUNDED_3DP.atol
        assert diff - ROUNDED_3DP.atol <= ci.upper

    def test_untabulated_df_warns(self, treatment_control):
        a, b = treatment_control
        result = t_test(a, b)
        assert result.degrees_of_freedom == 22
        assert any("df=22" in w and "df=20" in w for w in result.warnings)

    def test_large_df_uses_normal_interval(self, large_groups):
        a, b = large_groups
        result = t_test(a, b)
        assert result.degrees_of_freedom == 73
        ci = result.confidence_interval
        half_width = (ci.upper - ci.lower) / 2
        se = abs(result.mean_a - result.mean_b) / abs(result.t_statistic)
        assert half_width == pytest.approx(1.96 * se, rel=1e-2)
        assert result.warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# scipy reference
# ═══════════════════════════════════════════════════════════════════════


class TestAgainstScipy:

    def test_statistic(self, large_groups):
        a, b = large_groups
        ref = stats.ttest_ind(a, b, equal_var=True)
        result = t_test(a, b)
        assert abs(result.t_statistic - ref.statistic) <= ROUNDED_3DP.atol

    def test_p_value_large_df(self, large_groups):
        a, b = large_groups
        ref = stats.ttest_ind(a, b, equal_var=True)
        result = t_test(a, b)
        assert abs(result.p_value - ref.pvalue) < select_tolerance('p_value').atol

    def test_cohens_d(self, treatment_control):
        a, b = treatment_control
        n1, n2 = len(a), len(b)
        pooled = ((n1 - 1) * np.var(a, ddof=1) + (n2 - 1) * np.var(b, ddof=1)) / (n1 + n2 - 2)
        expected = (np.mean(a) - np.mean(b)) / np.sqrt(pooled)
        assert abs(t_test(a, b).effect_size - expected) <= ROUNDED_3DP.atol


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_group_too_small(self):
        with pytest.raises(InsufficientSampleSizeError) as exc_info:
            t_test([1, 2, 3], [4])
        assert exc_info.value.name == "group_b"
        assert exc_info.value.required == 2

    def test_empty_group(self):
        with pytest.raises(InsufficientSampleSizeError):
            t_test([], [1, 2])

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.5])
    def test_bad_alpha(self, alpha):
        with pytest.raises(InvalidInputError):
            t_test([1, 2, 3], [4, 5, 6], alpha=alpha)

    def test_non_finite(self):
        with pytest.raises(InvalidInputError):
            t_test([1, 2, np.inf], [4, 5, 6])

    def test_both_constant(self):
        with pytest.raises(DegenerateInputError) as exc_info:
            t_test([2, 2, 2], [5, 5, 5])
        assert exc_info.value.quantity == "pooled variance"

    def test_one_constant_group_is_fine(self):
        result = t_test([2, 2, 2], [4, 5, 6])
        assert result.t_statistic < 0.0

    def test_overflowing_variance(self):
        with pytest.raises(NonFiniteResultError) as exc_info:
            t_test([1e200, 2e200], [1, 2])
        assert exc_info.value.quantity == "pooled_variance"


# ═══════════════════════════════════════════════════════════════════════
# Design and presentation
# ═══════════════════════════════════════════════════════════════════════


class TestDesignAndOutput:

    def test_accepts_design(self):
        design = HypothesisDesign.for_t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5])
        assert design.test_type == "t_two_sample"
        assert t_test(design).t_statistic == 4.0

    def test_design_alpha_is_used(self):
        design = HypothesisDesign.for_t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5], alpha=0.01)
        result = t_test(design)
        assert result.alpha == 0.01
        assert not result.is_significant

    def test_rejects_correlation_design(self):
        design = HypothesisDesign.for_correlation([1, 2, 3], [1, 3, 2])
        with pytest.raises(InvalidInputError, match="expected a 't_two_sample' design") as exc_info:
            t_test(design)
        assert exc_info.value.name == "design"

    def test_rejects_alpha_with_design(self):
        design = HypothesisDesign.for_t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5])
        with pytest.raises(InvalidInputError, match="alpha is fixed by the design") as exc_info:
            t_test(design, alpha=0.01)
        assert exc_info.value.name == "alpha"

    def test_rejects_group_b_with_design(self):
        design = HypothesisDesign.for_t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5])
        with pytest.raises(InvalidInputError):
            t_test(design, [1, 2, 3])

    def test_summary(self):
        text = t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5]).summary()
        assert "Two Sample t-test (pooled variance)" in text
        assert "data:  group_a and group_b" in text
        assert "t = 4, df = 8, p-value = 0.014" in text
        assert "95 percent confidence interval:" in text
        assert "1.694  6.306" in text
        assert "Cohen's d = 2.53 (significant at alpha = 0.05)" in text

    def test_to_dict(self):
        d = t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5]).to_dict()
        assert d['confidence_interval'] == {'lower': 1.694, 'upper': 6.306}
        assert d['degrees_of_freedom'] == 8

    def test_metadata(self):
        result = t_test([5, 6, 7, 8, 9], [1, 2, 3, 4, 5])
        assert result.backend_name == 'cpu_hypothesis'
        assert result.info == {'test_type': 't_two_sample', 'n_x': 5, 'n_y': 5}
