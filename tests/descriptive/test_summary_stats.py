"""
Tests for compute_descriptive().

Reference values are hand-computed for the small samples and checked
against numpy for the random ones.
"""

import numpy as np
import pytest

from scorestats import compute_descriptive
from scorestats.core.exceptions import InvalidInputError, NonFiniteResultError
from scorestats.core.compute.approximations import round3
from scorestats.core.compute.tolerances import ROUNDED_3DP
from scorestats.descriptive import DescriptiveDesign, Quartiles


# ═══════════════════════════════════════════════════════════════════════
# Known samples
# ═══════════════════════════════════════════════════════════════════════


class TestKnownSamples:

    def test_one_to_five(self, five_scores):
        result = compute_descriptive(five_scores)
        assert result.mean == 3.0
        assert result.median == 3.0
        assert result.standard_deviation == 1.581
        assert result.variance == 2.5
        assert result.min == 1.0
        assert result.max == 5.0
        assert result.range == 4.0
        assert result.quartiles == Quartiles(q1=2.0, q2=3.0, q3=4.0)
        assert result.outliers == ()
        assert result.n == 5

    def test_extreme_value_is_outlier(self):
        result = compute_descriptive([1, 2, 3, 4, 100])
        assert 100.0 in result.outliers
        assert result.outliers == (100.0,)
        assert result.mean == 22.0
        assert result.median == 3.0

    def test_even_length_median(self):
        result = compute_descriptive([4, 1, 3, 2])
        assert result.median == 2.5
        assert result.quartiles.q1 == 2.0
        assert result.quartiles.q3 == 4.0

    def test_single_observation(self):
        result = compute_descriptive([7.5])
        assert result.mean == 7.5
        assert result.median == 7.5
        assert result.variance == 0.0
        assert result.standard_deviation == 0.0
        assert result.range == 0.0
        assert result.quartiles == Quartiles(q1=7.5, q2=7.5, q3=7.5)
        assert any("single observation" in w for w in result.warnings)

    def test_constant_sample(self):
        result = compute_descriptive([3.0] * 6)
        assert result.standard_deviation == 0.0
        assert result.outliers == ()

    def test_rounding_half_up(self):
        result = compute_descriptive([0.0625, 0.0625])
        assert result.mean == 0.063


# ═══════════════════════════════════════════════════════════════════════
# Outliers
# ═══════════════════════════════════════════════════════════════════════


class TestOutliers:

    def test_input_order_preserved(self):
        result = compute_descriptive([50, 3, 4, 5, 4, 3, 4, 5, -40])
        assert result.outliers == (50.0, -40.0)

    def test_raw_values_not_rounded(self):
        result = compute_descriptive([1, 2, 3, 4, 100.12345])
        assert result.outliers == (100.12345,)

    def test_warning_emitted(self):
        result = compute_descriptive([1, 2, 3, 4, 100])
        assert any("outlier" in w for w in result.warnings)

    def test_no_warning_without_outliers(self, five_scores):
        assert compute_descriptive(five_scores).warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# Invariants on random samples
# ═══════════════════════════════════════════════════════════════════════


class TestInvariants:

    def test_ordering(self, assessment_scores):
        r = compute_descriptive(assessment_scores)
        q = r.quartiles
        assert r.min <= q.q1 <= q.q2 <= q.q3 <= r.max
        assert q.q2 == r.median
        assert r.range == pytest.approx(r.max - r.min, abs=ROUNDED_3DP.atol * 2)
        assert r.variance >= 0.0
        assert r.standard_deviation >= 0.0

    def test_matches_numpy(self, assessment_scores):
        r = compute_descriptive(assessment_scores)
        tol = ROUNDED_3DP.atol
        assert abs(r.mean - np.mean(assessment_scores)) <= tol
        assert abs(r.median - np.median(assessment_scores)) <= tol
        assert abs(r.variance - np.var(assessment_scores, ddof=1)) <= tol
        assert abs(r.standard_deviation - np.std(assessment_scores, ddof=1)) <= tol

    def test_quartiles_are_sample_values(self, rng):
        data = rng.normal(0.0, 1.0, 17)
        r = compute_descriptive(data)
        rounded = {round3(float(v)) for v in data}
        assert r.quartiles.q1 in rounded
        assert r.quartiles.q3 in rounded

    def test_input_not_mutated(self):
        data = np.array([5.0, 1.0, 4.0, 2.0, 3.0])
        original = data.copy()
        compute_descriptive(data)
        np.testing.assert_array_equal(data, original)

    def test_list_not_mutated(self):
        data = [5, 1, 4, 2, 3]
        compute_descriptive(data)
        assert data == [5, 1, 4, 2, 3]

    def test_permutation_invariant(self, assessment_scores, rng):
        a = compute_descriptive(assessment_scores)
        b = compute_descriptive(rng.permutation(assessment_scores))
        assert a.mean == pytest.approx(b.mean, abs=1e-3)
        assert a.quartiles == b.quartiles
        assert a.standard_deviation == pytest.approx(b.standard_deviation, abs=1e-3)


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_empty(self):
        with pytest.raises(InvalidInputError, match="empty sample"):
            compute_descriptive([])

    def test_nan(self):
        with pytest.raises(InvalidInputError):
            compute_descriptive([1.0, np.nan, 3.0])

    def test_2d(self):
        with pytest.raises(InvalidInputError):
            compute_descriptive([[1, 2], [3, 4]])

    def test_strings(self):
        with pytest.raises(InvalidInputError):
            compute_descriptive(["a", "b"])

    def test_mean_overflow(self):
        with pytest.raises(NonFiniteResultError) as exc_info:
            compute_descriptive([1e308, 1e308])
        assert exc_info.value.quantity == "mean"

    def test_range_overflow(self):
        with pytest.raises(NonFiniteResultError) as exc_info:
            compute_descriptive([-1e308, 1e308])
        assert exc_info.value.quantity == "variance"

    def test_large_finite_values_pass(self):
        result = compute_descriptive([1e150, 2e150, 3e150])
        assert result.mean == pytest.approx(2e150, rel=1e-12)
        assert result.max == 3e150


# ═══════════════════════════════════════════════════════════════════════
# Design and presentation
# ═══════════════════════════════════════════════════════════════════════


class TestDesignAndOutput:

    def test_design_is_read_only(self, five_scores):
        design = DescriptiveDesign.from_array(five_scores)
        assert design.n == 5
        with pytest.raises(ValueError):
            design.data[0] = 10.0

    def test_accepts_design(self, five_scores):
        design = DescriptiveDesign.from_array(five_scores, name="scores")
        result = compute_descriptive(design)
        assert result.mean == 3.0
        assert "scores" in result.summary()

    def test_summary(self, five_scores):
        text = compute_descriptive(five_scores).summary()
        assert "Descriptive Statistics (sample, n=5)" in text
        assert "Median" in text
        assert "1.581" in text
        assert "Outliers: none" in text

    def test_summary_lists_outliers(self):
        text = compute_descriptive([1, 2, 3, 4, 100]).summary()
        assert "Outliers: 100" in text

    def test_to_dict(self, five_scores):
        d = compute_descriptive(five_scores).to_dict()
        assert d['quartiles'] == {'q1': 2.0, 'q2': 3.0, 'q3': 4.0}
        assert d['outliers'] == []

    def test_metadata(self, five_scores):
        result = compute_descriptive(five_scores)
        assert result.backend_name == 'cpu_descriptive'
        assert result.info['method'] == 'nearest_rank'
        assert result.iqr == 2.0
        assert 'total_seconds' in result.timing
