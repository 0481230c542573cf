"""
Solver dispatch for descriptive statistics.

Provides compute_descriptive() as the single entry point.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from scorestats.descriptive.design import DescriptiveDesign
from scorestats.descriptive.solution import DescriptiveSolution
from scorestats.descriptive.backends.cpu import CPUDescriptiveBackend


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def compute_descriptive(sample: ArrayLike | DescriptiveDesign) -> DescriptiveSolution:
    """
    Compute descriptive statistics for a single sample.

    Computes mean, median, sample variance and standard deviation
    (Bessel-corrected; both 0 for a single observation), min, max, range,
    nearest-rank quartiles and IQR-fence outliers.

    Parameters
    ----------
    sample : array-like or DescriptiveDesign
        Non-empty 1D sequence of finite real numbers.

    Returns
    -------
    DescriptiveSolution
        All numeric fields rounded half-up to 3 decimals.

    Raises
    ------
    InvalidInputError
        If the sample is empty or malformed.
    NonFiniteResultError
        If the mean, variance or range overflows float64.

    Examples
    --------
    >>> result = compute_descriptive([1, 2, 3, 4, 5])
    >>> result.mean, result.standard_deviation
    (3.0, 1.581)
    >>> result.quartiles
    Quartiles(q1=2.0, q2=3.0, q3=4.0)
    """
    design = _ensure_design(sample)
    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)
