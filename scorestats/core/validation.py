"""
Input validation utilities for scorestats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from scorestats.core.exceptions import (
    InvalidInputError,
    InsufficientSampleSizeError,
    NonFiniteResultError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to a fresh numpy array, so the
    caller's object is never aliased. Rejects inputs that result in object
    dtype (mixed types) or any other non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        InvalidInputError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"{name}: cannot convert to array: {e}", name=name) from e

    if result.dtype == object:
        raise InvalidInputError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data",
            name=name,
        )

    if not np.issubdtype(result.dtype, np.number):
        raise InvalidInputError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data",
            name=name,
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        InvalidInputError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise InvalidInputError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            name=name,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        InvalidInputError: If array is not 1D
    """
    if array.ndim != 1:
        raise InvalidInputError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}",
            name=name,
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        InvalidInputError: If array is empty
    """
    if array.shape[0] == 0:
        raise InvalidInputError(f"{name}: empty sample", name=name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        InvalidInputError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise InvalidInputError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        InsufficientSampleSizeError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientSampleSizeError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            name=name,
            required=min_samples,
            actual=n,
        )


def check_alpha(alpha: float) -> float:
    """
    Verify a significance level lies strictly inside (0, 1).

    Returns:
        alpha as a Python float

    Raises:
        InvalidInputError: If alpha is not a number in (0, 1)
    """
    try:
        value = float(alpha)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"alpha: expected a number, got {alpha!r}", name="alpha") from e
    if not (0.0 < value < 1.0):
        raise InvalidInputError(f"alpha must be in (0, 1), got {alpha}", name="alpha")
    return value


def to_sample(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Run the standard sample checks and return a private float64 copy.

    Combines check_array, check_1d, check_not_empty and check_finite.
    """
    result = check_array(array, name)
    check_1d(result, name)
    check_not_empty(result, name)
    check_finite(result, name)
    return result


def check_finite_statistics(context: str, **quantities: float) -> None:
    """
    Verify computed statistics are finite before they are rounded or divided.

    Finite inputs can still overflow (squares of values near 1e200), and
    NaN slips through comparisons and clamps silently.

    Args:
        context: Operation name for error messages (e.g. 'correlation')
        **quantities: Name -> value of each intermediate to check

    Raises:
        NonFiniteResultError: If any quantity is NaN or Inf
    """
    for name, value in quantities.items():
        if not math.isfinite(value):
            raise NonFiniteResultError(
                f"{context}: {name} is {value} (input magnitude exceeds float64 range)",
                quantity=name,
            )
