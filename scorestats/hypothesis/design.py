"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from scorestats.core.exceptions import InvalidInputError
from scorestats.core.validation import (
    check_alpha,
    check_array,
    check_1d,
    check_finite,
    check_min_samples,
    check_consistent_length,
)


# Confidence level of the t-test interval, independent of alpha
T_TEST_CONF_LEVEL = 0.95

# Fewest paired observations for which the correlation t-test is defined
MIN_CORRELATION_PAIRS = 3


def _to_float64_1d(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to a read-only 1D float64 copy, rejecting NaN and Inf."""
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    _alpha: float = 0.05
    _conf_level: float = T_TEST_CONF_LEVEL
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def conf_level(self) -> float:
        return self._conf_level

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        group_a: ArrayLike,
        group_b: ArrayLike,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """
        Build design for the pooled two-sample t_test().

        Raises:
            InvalidInputError: alpha outside (0, 1) or malformed groups
            InsufficientSampleSizeError: either group has fewer than 2 values
        """
        alpha = check_alpha(alpha)

        a = _to_float64_1d(group_a, "group_a")
        b = _to_float64_1d(group_b, "group_b")
        check_min_samples(a, 2, "group_a")
        check_min_samples(b, 2, "group_b")

        return cls(
            test_type="t_two_sample",
            _x=a,
            _y=b,
            _alpha=alpha,
            _conf_level=T_TEST_CONF_LEVEL,
            _data_name="group_a and group_b",
        )

    @classmethod
    def for_correlation(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """
        Build design for Pearson correlation().

        Raises:
            InvalidInputError: alpha outside (0, 1), unequal lengths,
                or fewer than 3 pairs
        """
        alpha = check_alpha(alpha)

        x_arr = _to_float64_1d(x, "x")
        y_arr = _to_float64_1d(y, "y")
        check_consistent_length(x_arr, y_arr, names=("x", "y"))

        n = x_arr.shape[0]
        if n < MIN_CORRELATION_PAIRS:
            raise InvalidInputError(
                f"correlation requires at least {MIN_CORRELATION_PAIRS} pairs, got {n}",
                name="x",
            )

        return cls(
            test_type="pearson",
            _x=x_arr,
            _y=y_arr,
            _alpha=alpha,
            _data_name="x and y",
        )

    def __repr__(self) -> str:
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, "
            f"n_x={len(self._x)}, n_y={len(self._y)}, alpha={self._alpha})"
        )
